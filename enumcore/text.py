"""Textual rendering.

Renders an enum instance as text. The work is done by :func:`write_to`,
which appends to any sink with a ``write(str)`` method (``io.StringIO``, an
open text file, ``sys.stdout`` ...). It writes only its own text and makes no
assumption about what the sink already holds, so it can be used inside a
larger formatted message. :func:`to_string` builds a fresh buffer and calls
:func:`write_to`.

Regular enums render the name of the first declared member with the same
value. Flags enums render ``None`` for zero, otherwise the names of every
declared member whose bits are all set, joined by ``", "``. Overlapping
members are all listed. Values that match nothing render as a decimal
number.


File: text.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import io

from enumcore.table import NONE_MEMBER


def _write_flags(table, value: int, sink) -> None:
    if value == 0:
        sink.write(NONE_MEMBER)
        return

    found = False
    for member in table.reflected:
        if member.value != 0 and (value & member.value) == member.value:
            if found:
                sink.write(", ")
            sink.write(member.name)
            found = True

    if not found:
        sink.write(str(value))


def write_to(enum_value, sink) -> None:
    """
    Append the textual form of ``enum_value`` to ``sink``.

    Parameters:
        enum_value (EnumValue): The instance to render.
        sink: Any object with a ``write(str)`` method.
    """
    table = type(enum_value)._table_
    value = enum_value.value

    if table.is_flags:
        _write_flags(table, value, sink)
        return

    member = table.find_value(value)
    sink.write(member.name if member is not None else str(value))


def to_string(enum_value) -> str:
    """
    Return the textual form of ``enum_value``.
    """
    buffer = io.StringIO()
    write_to(enum_value, buffer)
    return buffer.getvalue()


def to_repr(enum_value) -> str:
    """
    Return ``Type.Name`` for a declared member value, ``Type(value)`` otherwise.
    """
    cls = type(enum_value)
    member = cls._table_.find_value(enum_value.value)
    if member is not None:
        return f"{cls.__name__}.{member.name}"
    return f"{cls.__name__}({enum_value.value})"
