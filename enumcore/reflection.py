"""Reflection over declared members.

Flags enums leave their ``None`` and ``All`` members out of both listings.


File: reflection.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""


def names(cls) -> list[str]:
    """
    Return the member names of ``cls`` in declaration order.
    """
    return [member.name for member in cls._table_.reflected]


def values(cls) -> list:
    """
    Return the member instances of ``cls`` in declaration order.
    """
    return [cls._members_[member.name] for member in cls._table_.reflected]
