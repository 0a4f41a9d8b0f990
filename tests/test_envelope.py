"""Envelope behavior: Present always unpacks, Absent never does."""

from __future__ import annotations

import dataclasses

from hypothesis import given, settings
import pytest

from tests.strategies import payloads
from wrappers.envelope import Absent, Present, from_optional, is_envelope
from wrappers.errors import EmptyAbsentAccessError, WrapperError

pytestmark = pytest.mark.unit


@given(value=payloads, default=payloads)
@settings(max_examples=50, deadline=None, derandomize=True)
def test_present_unpacks_the_held_value(value: object, default: object) -> None:
    """Property: Present(v) unpacks to v and ignores any default."""
    envelope = Present(value)

    assert envelope.unpack() is value
    assert envelope.unpack_or(default) is value


@given(default=payloads)
@settings(max_examples=50, deadline=None, derandomize=True)
def test_absent_unpack_or_returns_default(default: object) -> None:
    assert Absent().unpack_or(default) is default


def test_absent_unpack_raises() -> None:
    with pytest.raises(EmptyAbsentAccessError) as exc:
        Absent().unpack()

    assert str(exc.value) == "Called `unpack()` on an instance of `Absent`"
    assert exc.value.variant == "Absent"
    assert exc.value.operation == "unpack"
    assert "is_something()" in (exc.value.hint or "")
    assert isinstance(exc.value, WrapperError)


def test_present_none_is_still_something() -> None:
    """None is a legitimate value, not absence."""
    envelope = Present(None)

    assert envelope.is_something()
    assert envelope.unpack() is None
    assert envelope.unpack_or("fallback") is None


@pytest.mark.parametrize(
    ("envelope", "something"),
    [(Present("x"), True), (Present(0), True), (Absent(), False)],
)
def test_predicates_are_complements(envelope, something: bool) -> None:
    assert envelope.is_something() is something
    assert envelope.is_nothing() is (not something)


def test_repeated_calls_are_stable() -> None:
    envelope = Present([1, 2])

    first = envelope.unpack()
    assert envelope.unpack() is first
    assert envelope.is_something() and envelope.is_something()

    absent = Absent()
    for _ in range(3):
        with pytest.raises(EmptyAbsentAccessError):
            absent.unpack()
        assert absent.is_nothing()


def test_scenarios() -> None:
    assert Present("x").is_something() is True
    assert Absent().unpack_or("none") == "none"


class TestValueSemantics:
    @pytest.mark.unit
    def test_present_is_immutable(self):
        envelope = Present("x")

        with pytest.raises(dataclasses.FrozenInstanceError):
            envelope.value = "y"  # type: ignore[misc]

    @pytest.mark.unit
    def test_equality_is_value_based(self):
        assert Present(1) == Present(1)
        assert Present(1) != Present(2)
        assert Absent() == Absent()
        assert Present(None) != Absent()

    @pytest.mark.unit
    def test_hashable_when_value_is_hashable(self):
        assert hash(Present("a")) == hash(Present("a"))
        assert len({Absent(), Absent()}) == 1

    @pytest.mark.unit
    def test_repr_mirrors_construction(self):
        assert repr(Present("x")) == "Present('x')"
        assert repr(Absent()) == "Absent()"

    @pytest.mark.unit
    def test_supports_pattern_matching(self):
        def describe(envelope: Present[int] | Absent) -> str:
            match envelope:
                case Present(value):
                    return f"got {value}"
                case Absent():
                    return "nothing"

        assert describe(Present(7)) == "got 7"
        assert describe(Absent()) == "nothing"


def test_from_optional_maps_none_to_absent() -> None:
    assert from_optional(None) == Absent()
    assert from_optional(0) == Present(0)
    assert from_optional("") == Present("")


def test_is_envelope_guard() -> None:
    assert is_envelope(Present(1))
    assert is_envelope(Absent())
    assert not is_envelope(None)
    assert not is_envelope(1)
