"""
Enum Inspector

This is the command-line entry point for inspecting declared enum types.

Workflow:
1. The enum type is imported from the ``module:Type`` path given on the command line.
2. Without a query, the member table is printed and an interactive prompt (REPL) starts.
3. A query that reads as an integer is rendered through the enum type, open values included.
4. Any other query is parsed as a member name, ignoring case.

Setting ``ENUMCORE_DEBUG`` to any non-empty value also dumps the raw member table.


File: enumtool.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""
import importlib
import os
import sys

from enumcore import EnumValue


def print_usage():
    """
    Print usage.
    """
    print()
    print("Enum Inspector")
    print()
    print("Usage:")
    print("    enumtool <module:Type> [query]")
    print()
    print("Arguments:")
    print("    <module:Type>")
    print("        Import path of an enum type, e.g. 'myapp.modes:IOMode'.")
    print("    [query]")
    print("        An integer to render, or a member name to look up (any case).")
    print()
    print("Example:")
    print("    enumtool myapp.modes:IOMode 3")
    print()
    print("Or run without a query to list the members and enter interactive mode (REPL).")
    print()
    print("Options:")
    print("    -h, --help")
    print("        Show this help message and exit.")


def load_enum_type(path: str) -> type:
    """
    Import an enum type from a ``module:Type`` path.

    Raises:
        ValueError: If the path is not of the form ``module:Type``.
        TypeError: If the named object is not an enum type.
    """
    module_name, sep, type_name = path.partition(":")
    if not sep or not module_name or not type_name:
        raise ValueError(f"Expected 'module:Type', got '{path}'")

    module = importlib.import_module(module_name)
    enum_type = getattr(module, type_name, None)
    if not (isinstance(enum_type, type) and issubclass(enum_type, EnumValue)):
        raise TypeError(f"'{path}' is not an enum type")
    return enum_type


def debug_print_table(enum_type: type):
    """
    Print the raw member table
    """
    table = enum_type._table_  # pylint: disable=protected-access
    reflected = set(table.reflected)
    print("\nMember table:\n")
    print(table)
    for member in table:
        print(f"    {member.name} = {member.value} reflected={member in reflected}")
    print(" ")


def print_members(enum_type: type):
    """
    Print the declared members of an enum type.
    """
    kind = "flags" if enum_type.is_flags() else "enum"
    print(f"{enum_type.__name__} ({kind})")
    for name, member in zip(enum_type.names(), enum_type.values()):
        print(f"    {name} = {member.value}")


def run_query(enum_type: type, query: str) -> str:
    """
    Resolve a single query against an enum type.

    Returns:
        str: ``<text> (declared|open)`` for integers, ``<Name> = <value>`` for names.

    Raises:
        LookupNotFoundException: If a name query matches no member.
    """
    try:
        number = int(query, 0)
    except ValueError:
        member = enum_type.parse(query)
        name = enum_type._table_.find_name(query).name  # pylint: disable=protected-access
        return f"{name} = {member.value}"

    value = enum_type(number)
    kind = "declared" if enum_type.from_value_or_none(number) is not None else "open"
    return f"{value} ({kind})"


def run_repl(enum_type: type):
    """
    Run the interactive REPL
    """
    print(f"Enum Inspector - {enum_type.__name__}")
    print("Type `exit` or `quit` to leave.")
    while True:
        try:
            line = input(">>> ").strip()
            if line in {"exit", "quit"}:
                break
            if not line:
                continue
            try:
                print(run_query(enum_type, line))
            except Exception as e:  # pylint: disable=broad-except
                print(f"{type(e).__name__}: {e}")
        except KeyboardInterrupt:
            print("\nInterrupted.")
            break
        except EOFError:
            print()
            break


def main(argv: list[str]) -> int:
    """
    Entry point for the CLI.

    Behaviour:
    - No arguments, or ``-h``/``--help``: print usage.
    - One argument: print the members of the named enum type and enter the REPL.
    - Two arguments: resolve the query against the enum type and print the result.
    - Any other pattern: print usage and return a non-zero exit code.
    """
    args = argv[1:]
    if not args or args[0] in ('-h', '--help'):
        print_usage()
        return 0 if args else 1
    if len(args) > 2:
        print_usage()
        return 1

    try:
        enum_type = load_enum_type(args[0])
        if os.environ.get('ENUMCORE_DEBUG'):
            debug_print_table(enum_type)
        if len(args) == 1:
            print_members(enum_type)
            run_repl(enum_type)
        else:
            print(run_query(enum_type, args[1]))
    except Exception as e:  # pylint: disable=broad-except
        print(f"{type(e).__name__}: {e}")
        return 1
    return 0


def main_entry():
    """
    Console script entry point.
    """
    sys.exit(main(sys.argv))


if __name__ == "__main__":
    main_entry()
