"""
Tests for looking up declared members by value and by name.
"""
import pytest

from enumcore import LookupNotFoundException
from enumcore.tests.utils import Color, IOMode, Status


def test_from_value_round_trips_declared_members():
    for name, member in zip(Color.names(), Color.values()):
        found = Color.from_value(member.value)
        assert found.equals(member)
        assert found.to_string() == name


def test_from_value_returns_canonical_member():
    assert Color.from_value(1) is Color.Green
    assert Color.from_value_or_none(2) is Color.Blue


def test_from_value_first_declared_wins():
    assert Status.from_value(0) is Status.Ok
    assert Status.from_value(11) is Status.Retry


def test_from_value_missing():
    """
    Test that a missing value is None for the optional form and an error for the strict one.
    """
    assert Color.from_value_or_none(3) is None
    with pytest.raises(LookupNotFoundException, match="Unknown enum Color value: 3") as excinfo:
        Color.from_value(3)
    assert excinfo.value.enum_name == "Color"
    assert excinfo.value.key == 3
    assert isinstance(excinfo.value, LookupError)


def test_from_value_flags():
    assert IOMode.from_value(0) is getattr(IOMode, "None")
    assert IOMode.from_value(7) is IOMode.All
    assert IOMode.from_value_or_none(3) is None


def test_parse_is_case_insensitive():
    assert Color.parse("RED").equals(Color.Red)
    assert Color.parse("blue") is Color.Blue
    assert Color.parse_or_none("gReEn") is Color.Green
    assert IOMode.parse("all") is IOMode.All
    assert IOMode.parse("NONE").value == 0


def test_parse_missing():
    assert Color.parse_or_none("Yellow") is None
    with pytest.raises(LookupNotFoundException, match="Yellow") as excinfo:
        Color.parse("Yellow")
    assert excinfo.value.key == "Yellow"


def test_lookups_leave_table_untouched():
    before = (Color.names(), Color.values())
    Color.parse_or_none("Yellow")
    Color.from_value_or_none(99)
    Color.parse("green")
    assert (Color.names(), Color.values()) == before
