"""Errors.


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""


class TypeMismatchException(TypeError):
    """
    Error for binary operators applied to two different enum types.
    """
    def __init__(self, op, left, right):
        self.op = op
        self.left = left
        self.right = right
        message = (
            f"Unsupported operand types for '{op}': "
            f"'{left}' and '{right}'"
        )
        super().__init__(message)


class LookupNotFoundException(LookupError):
    """
    Error for strict lookups of a value or name the enum does not declare.
    """
    def __init__(self, enum_name, key):
        self.enum_name = enum_name
        self.key = key
        message = f"Unknown enum {enum_name} value: {key}"
        super().__init__(message)


class EnumDeclarationException(TypeError):
    """
    Error for malformed enum declarations.
    """
    def __init__(self, enum_name, reason):
        self.enum_name = enum_name
        self.reason = reason
        message = f"Invalid enum declaration '{enum_name}': {reason}"
        super().__init__(message)


class UnknownOpException(Exception):
    """
    Error for unknown operations.
    """
    def __init__(self, op):
        self.op = op
        message = f"Unknown operation '{op}'"
        super().__init__(message)
