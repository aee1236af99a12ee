"""
Tests for member tables.
"""
from enumcore import Member, MemberTable


def test_table_keeps_order_and_first_match():
    table = MemberTable("Status", [("Ok", 0), ("Success", 0), ("Failed", 10)])
    assert [m.name for m in table] == ["Ok", "Success", "Failed"]
    assert len(table) == 3
    assert table.find_value(0) == Member("Ok", 0)
    assert table.find_value(5) is None
    assert table.find_name("SUCCESS") == Member("Success", 0)
    assert table.find_name("missing") is None
    assert table.reflected == table.members
    assert not table.is_flags


def test_flags_table_hides_none_and_all():
    table = MemberTable(
        "IOMode", [("None", 0), ("Read", 1), ("Write", 2), ("All", 3)], is_flags=True
    )
    assert [m.name for m in table.reflected] == ["Read", "Write"]
    assert len(table.members) == 4
    assert table.find_name("all").value == 3
    assert repr(table).startswith("MemberTable(IOMode, flags, ")
