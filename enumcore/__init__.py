"""enumcore package.

Runtime behavior shared by every enum type: arithmetic and bitwise
composition, text rendering, lookup by value or name, and reflection over
the declared members, for both regular and flags enums. Enum types are
declared by subclassing :class:`EnumValue` or with :func:`define_enum`.


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from .base import EnumValue, define_enum
from .declare import auto
from .exceptions import (
    EnumDeclarationException,
    LookupNotFoundException,
    TypeMismatchException,
    UnknownOpException,
)
from .table import Member, MemberTable

__all__ = [
    "EnumValue",
    "define_enum",
    "auto",
    "Member",
    "MemberTable",
    "EnumDeclarationException",
    "LookupNotFoundException",
    "TypeMismatchException",
    "UnknownOpException",
]
