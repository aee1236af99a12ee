"""Enum declarations.

Turns a declaration into a :class:`~enumcore.table.MemberTable`. A declaration
is either the body of an ``EnumValue`` subclass or an explicit list of member
names and ``(name, value)`` pairs. This step runs once per enum type.

1. Member collection
Public class attributes holding an ``int`` (``bool`` excluded) or an
:func:`auto` marker become members, in definition order. Private names,
functions, descriptors and any other values stay ordinary class attributes.

2. Numbering
``auto()`` members of a regular enum count up from 0, each one the previous
value plus one. Flags enums start at 1 and double the previous value.

3. Flags conventions
A flags enum always has a ``None`` member (0), placed first, and an ``All``
member holding the OR of every other member, placed last. Either one is only
added when the declaration does not already provide it.


File: declare.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from enumcore.exceptions import EnumDeclarationException
from enumcore.table import ALL_MEMBER, NONE_MEMBER, MemberTable


class auto:  # pylint: disable=invalid-name
    """Marker for a member whose value is numbered automatically."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "auto()"


def _is_member_value(value) -> bool:
    if isinstance(value, auto):
        return True
    return isinstance(value, int) and not isinstance(value, bool)


def _next_value(previous, is_flags: bool) -> int:
    if previous is None:
        return 1 if is_flags else 0
    if is_flags:
        return previous * 2 if previous else 1
    return previous + 1


def collect_members(namespace: dict) -> list[tuple[str, object]]:
    """
    Pick the member declarations out of a class namespace.

    Parameters:
        namespace (dict): The class ``__dict__``, in definition order.

    Returns:
        list[tuple[str, object]]: ``(name, int | auto)`` pairs.
    """
    return [
        (name, value)
        for name, value in namespace.items()
        if not name.startswith("_") and _is_member_value(value)
    ]


def normalize_members(type_name: str, declared) -> list[tuple[str, object]]:
    """
    Normalize a functional declaration into ``(name, int | auto)`` pairs.

    Each entry is either a bare name (numbered automatically) or a
    ``(name, value)`` pair.

    Raises:
        EnumDeclarationException: If an entry is malformed.
    """
    pairs = []
    for entry in declared:
        if isinstance(entry, str):
            pairs.append((entry, auto()))
            continue
        try:
            name, value = entry
        except (TypeError, ValueError) as e:
            raise EnumDeclarationException(
                type_name, f"expected a name or a (name, value) pair, got {entry!r}"
            ) from e
        if not isinstance(name, str):
            raise EnumDeclarationException(
                type_name, f"member name must be a string, got {name!r}"
            )
        if not _is_member_value(value):
            raise EnumDeclarationException(
                type_name, f"member '{name}' must have an integer value, got {value!r}"
            )
        pairs.append((name, value))
    return pairs


def build_table(type_name: str, declared, is_flags: bool = False) -> MemberTable:
    """
    Number the declared members and build the type's member table.

    Parameters:
        type_name (str): Name of the enum type.
        declared (list[tuple[str, int | auto]]): Declared members in order.
        is_flags (bool): Whether the type is a flags enum.

    Returns:
        MemberTable: The immutable member table.

    Raises:
        EnumDeclarationException: On empty or duplicate member names.
    """
    members = []
    seen = set()
    previous = None
    for name, value in declared:
        if not name:
            raise EnumDeclarationException(type_name, "member names must not be empty")
        if name in seen:
            raise EnumDeclarationException(type_name, f"duplicate member '{name}'")
        seen.add(name)
        if isinstance(value, auto):
            value = _next_value(previous, is_flags)
        members.append((name, value))
        previous = value

    if is_flags:
        if NONE_MEMBER not in seen:
            members.insert(0, (NONE_MEMBER, 0))
        if ALL_MEMBER not in seen:
            combined = 0
            for name, value in members:
                if name != NONE_MEMBER:
                    combined |= value
            members.append((ALL_MEMBER, combined))

    return MemberTable(type_name, members, is_flags)
