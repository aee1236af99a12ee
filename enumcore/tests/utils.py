"""
Enum types shared across enumcore tests.
"""
from enumcore import EnumValue, auto


class Color(EnumValue):
    Red = 0
    Green = auto()
    Blue = auto()


class IOMode(EnumValue, flags=True):
    Read = auto()
    Write = auto()
    Async = auto()


class Permission(EnumValue, flags=True):
    """Flags with an overlapping composite member."""
    Read = 1
    Write = 2
    ReadWrite = 3
    Execute = 4


class Status(EnumValue):
    """Regular enum with a duplicate value and a gap."""
    Ok = 0
    Success = 0
    Failed = 10
    Retry = auto()
