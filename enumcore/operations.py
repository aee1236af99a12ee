"""Enum value operations.

This module centralizes the operators available on enum instances. The
dunder methods of :class:`~enumcore.base.EnumValue` and its named methods
(``compare``, ``equals``, ``includes``) all route through :func:`eval_binary`
and :func:`eval_unary`, so every operator applies the same type rules.

Operators that produce a value return a new instance of the left operand's
type; instances are never modified. Values are Python integers, so
arithmetic and bitwise NOT never wrap or overflow, and the result need not be
a declared member.

Binary operators between two enum instances require both to be the same
concrete enum type and raise :class:`TypeMismatchException` otherwise.
``+`` and ``-`` take a plain integer on the right-hand side.


File: operations.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from enum import Enum

from enumcore.exceptions import TypeMismatchException, UnknownOpException


class Op(str, Enum):
    """
    Enumeration of supported enum operators.
    """

    # Arithmetic
    ADD = "+"
    SUB = "-"

    # Bitwise
    AND_BITS = "&"
    OR_BITS = "|"
    XOR_BITS = "^"
    INCLUDES = "includes"

    # Comparison
    CMP = "compare"
    EQ = "equals"
    GT = ">"
    LT = "<"
    GE = ">="
    LE = "<="

    # Unary bitwise
    NOT_BITS = "~"

    def __str__(self) -> str:  # pragma: no cover - trivial
        """
        Return the underlying string value for nicer error output.
        """
        return self.value


def _type_name(obj) -> str:
    return type(obj).__name__


def check_same_type(op: Op, lhs, rhs) -> None:
    """
    Ensure both operands are instances of the same concrete enum type.

    Raises:
        TypeMismatchException: If the operand types differ.
    """
    if type(lhs) is not type(rhs):
        raise TypeMismatchException(op, _type_name(lhs), _type_name(rhs))


def eval_binary(op: Op, lhs, rhs):
    """
    Evaluate a binary operator.

    Parameters:
        op (Op): The operator.
        lhs (EnumValue): Left operand.
        rhs (EnumValue | int): Right operand; an ``int`` for ``+``/``-``,
            an instance of the same enum type otherwise.

    Returns:
        EnumValue for arithmetic and bitwise operators, ``int`` for
        ``compare`` and ``bool`` for the remaining comparisons.

    Raises:
        TypeError: If ``+``/``-`` receive a non-integer offset.
        TypeMismatchException: If enum operands are of different types.
    """
    if op in (Op.ADD, Op.SUB):
        if not isinstance(rhs, int) or isinstance(rhs, bool):
            raise TypeError(
                f"Unsupported operand types for '{op}': "
                f"'{_type_name(lhs)}' and '{_type_name(rhs)}'"
            )
        if op == Op.ADD:
            return type(lhs)(lhs.value + rhs)
        return type(lhs)(lhs.value - rhs)

    check_same_type(op, lhs, rhs)
    left, right = lhs.value, rhs.value
    match op:
        # Bitwise
        case Op.AND_BITS:
            return type(lhs)(left & right)
        case Op.OR_BITS:
            return type(lhs)(left | right)
        case Op.XOR_BITS:
            return type(lhs)(left ^ right)
        case Op.INCLUDES:
            return (left & right) != 0
        # Comparison
        case Op.CMP:
            return (left > right) - (left < right)
        case Op.EQ:
            return left == right
        case Op.GT:
            return left > right
        case Op.LT:
            return left < right
        case Op.GE:
            return left >= right
        case Op.LE:
            return left <= right
        case _:
            raise UnknownOpException(op)


def eval_unary(op: Op, operand):
    """
    Evaluate a unary operator, returning a new instance of the operand's type.
    """
    match op:
        case Op.NOT_BITS:
            return type(operand)(~operand.value)
        case _:
            raise UnknownOpException(op)
