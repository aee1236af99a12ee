"""Member lookup.

Finds declared members by value or by name. Unlike constructing an instance
directly (``Color(3)``), these always check the member table and return the
canonical declared member. Each lookup has an optional form returning None
when nothing matches and a strict form raising
:class:`~enumcore.exceptions.LookupNotFoundException`.

Name matching is case-insensitive. When several members share a value, the
first one declared wins.


File: lookup.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from enumcore.exceptions import LookupNotFoundException


def from_value_or_none(cls, value):
    """
    Return the first declared member of ``cls`` holding ``value``, or None.
    """
    member = cls._table_.find_value(value)
    if member is None:
        return None
    return cls._members_[member.name]


def from_value(cls, value):
    """
    Return the first declared member of ``cls`` holding ``value``.

    Raises:
        LookupNotFoundException: If no member holds ``value``.
    """
    found = from_value_or_none(cls, value)
    if found is None:
        raise LookupNotFoundException(cls.__name__, value)
    return found


def parse_or_none(cls, name: str):
    """
    Return the member of ``cls`` named ``name`` (any case), or None.
    """
    member = cls._table_.find_name(name)
    if member is None:
        return None
    return cls._members_[member.name]


def parse(cls, name: str):
    """
    Return the member of ``cls`` named ``name`` (any case).

    Raises:
        LookupNotFoundException: If no member has that name.
    """
    found = parse_or_none(cls, name)
    if found is None:
        raise LookupNotFoundException(cls.__name__, name)
    return found
