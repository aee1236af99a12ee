"""Enum values.

:class:`EnumValue` is the base class of every enum type. An instance holds
exactly one integer and shares its type's member table, which is built once
when the subclass is declared:

    class Color(EnumValue):
        Red = 0
        Green = auto()
        Blue = auto()

    class IOMode(EnumValue, flags=True):
        Read = auto()
        Write = auto()
        Async = auto()

Declared members become class attributes holding instances of the type.
Any integer can be wrapped, declared or not (``Color(10)`` renders as
``"10"``), so values from external sources survive a round trip.
Instances are immutable; every operator returns a new instance.

``==`` and ``hash`` follow the underlying integer. ``==`` against anything
that is not the same enum type is simply False, while :meth:`equals`
rejects it with :class:`TypeMismatchException`, as do the ordering,
bitwise and ``includes`` operators.


File: base.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import operator
import sys
import types
from typing import Optional

from enumcore import lookup, reflection, text
from enumcore.declare import build_table, collect_members, normalize_members
from enumcore.exceptions import EnumDeclarationException
from enumcore.operations import Op, eval_binary, eval_unary
from enumcore.table import MemberTable


class EnumValue:
    """Base class for enum types."""

    __slots__ = ("_value",)

    _table_ = MemberTable("EnumValue", ())
    _members_ = types.MappingProxyType({})
    _declared_ = False

    def __init_subclass__(cls, flags: Optional[bool] = None, **kwargs):
        super().__init_subclass__(**kwargs)
        for base in cls.__mro__[1:]:
            if getattr(base, "_declared_", False):
                raise EnumDeclarationException(
                    cls.__name__, f"cannot extend enum '{base.__name__}'"
                )

        if flags is None:
            flags = cls._table_.is_flags

        declared = cls.__dict__.get("_declaration_")
        if declared is None:
            declared = collect_members(cls.__dict__)
        for name, _ in declared:
            if hasattr(EnumValue, name):
                raise EnumDeclarationException(
                    cls.__name__, f"member name '{name}' is reserved"
                )

        table = build_table(cls.__name__, declared, flags)
        cls._table_ = table
        cls._declared_ = bool(declared)

        members = {}
        for member in table:
            instance = cls(member.value)
            members[member.name] = instance
            setattr(cls, member.name, instance)
        cls._members_ = types.MappingProxyType(members)

    def __init__(self, value):
        """
        Wrap ``value`` without checking it against the declared members.

        Raises:
            TypeError: If ``value`` is not an integer.
        """
        if isinstance(value, (bool, EnumValue)):
            raise TypeError(
                f"{type(self).__name__} value must be an integer, "
                f"got {type(value).__name__}"
            )
        try:
            value = operator.index(value)
        except TypeError:
            raise TypeError(
                f"{type(self).__name__} value must be an integer, "
                f"got {type(value).__name__}"
            ) from None
        object.__setattr__(self, "_value", value)

    @classmethod
    def new(cls, value):
        """Wrap any integer as an instance of this enum type."""
        return cls(value)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} instances are immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} instances are immutable")

    def __reduce__(self):
        return (type(self), (self._value,))

    # Value access

    @property
    def value(self) -> int:
        """The underlying integer."""
        return self._value

    def to_i(self) -> int:
        return self._value

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    # Operators

    def __add__(self, other):
        return eval_binary(Op.ADD, self, other)

    def __sub__(self, other):
        return eval_binary(Op.SUB, self, other)

    def __or__(self, other):
        return eval_binary(Op.OR_BITS, self, other)

    def __and__(self, other):
        return eval_binary(Op.AND_BITS, self, other)

    def __xor__(self, other):
        return eval_binary(Op.XOR_BITS, self, other)

    def __invert__(self):
        return eval_unary(Op.NOT_BITS, self)

    def compare(self, other) -> int:
        """
        Three-way comparison of the underlying values: -1, 0 or 1.
        """
        return eval_binary(Op.CMP, self, other)

    def equals(self, other) -> bool:
        """
        True if ``other`` holds the same value; both must be the same enum type.
        """
        return eval_binary(Op.EQ, self, other)

    def includes(self, other) -> bool:
        """
        True if this value shares at least one bit with ``other``.

        Mostly useful with flags enums:

            mode = IOMode.Read | IOMode.Write
            mode.includes(IOMode.Read)   # True
            mode.includes(IOMode.Async)  # False
        """
        return eval_binary(Op.INCLUDES, self, other)

    def __contains__(self, other) -> bool:
        return self.includes(other)

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return eval_binary(Op.EQ, self, other)

    def __lt__(self, other):
        return eval_binary(Op.LT, self, other)

    def __le__(self, other):
        return eval_binary(Op.LE, self, other)

    def __gt__(self, other):
        return eval_binary(Op.GT, self, other)

    def __ge__(self, other):
        return eval_binary(Op.GE, self, other)

    def __hash__(self):
        return hash(self._value)

    # Text

    def write_to(self, sink) -> None:
        """Append the textual form to ``sink`` (anything with ``write``)."""
        text.write_to(self, sink)

    def to_string(self) -> str:
        """
        Return the textual form.

            Color.Red.to_string()                # "Red"
            (IOMode.Read | IOMode.Write).to_string()  # "Read, Write"
            Color(10).to_string()                # "10"
        """
        return text.to_string(self)

    def __str__(self) -> str:
        return text.to_string(self)

    def __format__(self, format_spec: str) -> str:
        return format(text.to_string(self), format_spec)

    def __repr__(self) -> str:
        return text.to_repr(self)

    # Lookup

    @classmethod
    def from_value(cls, value):
        return lookup.from_value(cls, value)

    @classmethod
    def from_value_or_none(cls, value):
        return lookup.from_value_or_none(cls, value)

    @classmethod
    def parse(cls, name: str):
        return lookup.parse(cls, name)

    @classmethod
    def parse_or_none(cls, name: str):
        return lookup.parse_or_none(cls, name)

    # Reflection

    @classmethod
    def names(cls) -> list[str]:
        return reflection.names(cls)

    @classmethod
    def values(cls) -> list:
        return reflection.values(cls)

    @classmethod
    def is_flags(cls) -> bool:
        return cls._table_.is_flags


def define_enum(name: str, members, flags: bool = False, module: Optional[str] = None):
    """
    Declare an enum type from a list of members.

    Parameters:
        name (str): Name of the new type.
        members (Iterable[str | tuple[str, int]]): Member names, numbered
            automatically, or explicit ``(name, value)`` pairs, in order.
        flags (bool): Whether the type is a flags enum.
        module (str | None): Value for the type's ``__module__``; defaults to
            the calling module.

    Returns:
        type: The new ``EnumValue`` subclass.

    Raises:
        EnumDeclarationException: If the member list is malformed.
    """
    declaration = normalize_members(name, members)
    if module is None:
        module = sys._getframe(1).f_globals.get("__name__", "__main__")

    def exec_body(namespace):
        namespace["_declaration_"] = declaration
        namespace["__module__"] = module

    return types.new_class(name, (EnumValue,), {"flags": flags}, exec_body)
