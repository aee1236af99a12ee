"""Member tables.

A member table is the static description of one enum type: its declared
``(name, value)`` pairs in declaration order and whether the type is a flags
enum. Tables are built once, when the enum class is declared, and are never
modified afterwards. Every instance of the type shares the same table.

Lookups by value and by name are indexed when the table is built so that the
first declared member wins on duplicates, matching a linear scan in
declaration order.


File: table.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import Iterator, NamedTuple, Optional

# Names that flags enums keep out of reflection and string decomposition.
NONE_MEMBER = "None"
ALL_MEMBER = "All"


class Member(NamedTuple):
    """A declared ``(name, value)`` pair."""

    name: str
    value: int


class MemberTable:
    """
    Immutable, ordered member table for one enum type.
    """

    __slots__ = (
        "_type_name",
        "_members",
        "_is_flags",
        "_reflected",
        "_by_value",
        "_by_name",
    )

    def __init__(self, type_name: str, members, is_flags: bool = False):
        """
        Build a table from ordered ``(name, value)`` pairs.

        Parameters:
            type_name (str): Name of the enum type, used in error messages.
            members (Iterable[tuple[str, int]]): Declared members in order.
            is_flags (bool): Whether the type is a flags enum.
        """
        members = tuple(Member(name, value) for name, value in members)
        self._type_name = type_name
        self._members = members
        self._is_flags = is_flags

        if is_flags:
            self._reflected = tuple(
                m for m in members if m.name not in (NONE_MEMBER, ALL_MEMBER)
            )
        else:
            self._reflected = members

        self._by_value = {}
        self._by_name = {}
        for member in members:
            self._by_value.setdefault(member.value, member)
            self._by_name.setdefault(member.name.lower(), member)

    @property
    def type_name(self) -> str:
        return self._type_name

    @property
    def is_flags(self) -> bool:
        return self._is_flags

    @property
    def members(self) -> tuple[Member, ...]:
        """All declared members, in declaration order."""
        return self._members

    @property
    def reflected(self) -> tuple[Member, ...]:
        """Members visible to reflection; excludes ``None``/``All`` for flags."""
        return self._reflected

    def find_value(self, value: int) -> Optional[Member]:
        """
        Return the first declared member holding ``value``, or None.
        """
        return self._by_value.get(value)

    def find_name(self, name: str) -> Optional[Member]:
        """
        Return the declared member whose name matches ``name`` ignoring case,
        or None.
        """
        return self._by_name.get(name.lower())

    def __iter__(self) -> Iterator[Member]:
        return iter(self._members)

    def __len__(self) -> int:
        return len(self._members)

    def __repr__(self) -> str:
        mode = "flags" if self._is_flags else "enum"
        return f"MemberTable({self._type_name}, {mode}, {list(self._members)})"
