"""
Developer utilities for enumcore.

Wraps the maintenance tasks of the project behind one argparse front end.
"""

import os
import subprocess
import sys
import argparse

from scripts.generate_docstring_headers import check_docstrings, insert_docstrings
from scripts.lint import main as run_lint


# Project root
BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

# Package sources and tests
ENUMCORE_SRC = os.path.join(BASE_DIR, 'enumcore')
ENUMCORE_TESTS = os.path.join(ENUMCORE_SRC, 'tests')


def main():
    """
    Command-line interface for the enumcore developer tasks.
    """
    parser = argparse.ArgumentParser(
        description="enumcore developer utilities.",
        allow_abbrev=False,
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # docstring-headers
    p_headers = sub.add_parser(
        "docstring-headers", help="Insert docstring headers into .py source files"
    )
    p_headers.add_argument(
        "--check",
        action="store_true",
        help="Report files with a missing or stale header instead of rewriting them"
    )

    # lint-python
    sub.add_parser("lint-python", help="Lint .py source files with flake8 and pylint")

    # test
    p_test = sub.add_parser("test", help="Run the test suite with pytest")
    p_test.add_argument(
        "-k",
        dest="keyword",
        default=None,
        help="Only run tests matching the given keyword expression"
    )

    args = parser.parse_args()

    if args.command == "docstring-headers":
        if args.check:
            problems = check_docstrings(BASE_DIR)
            for path, problem in problems:
                print(f"❌ {path}: {problem}")
            if problems:
                sys.exit(1)
            print("✅ All docstring headers in place")
            return
        print("⏳ Inserting docstrings into source .py files...")
        insert_docstrings(BASE_DIR)
        return

    if args.command == "lint-python":
        sys.exit(run_lint())

    if args.command == "test":
        print("⏳ Running tests")
        cmd = [sys.executable, "-m", "pytest", ENUMCORE_TESTS]
        if args.keyword:
            cmd.extend(["-k", args.keyword])
        subprocess.run(cmd, check=True, cwd=BASE_DIR)


if __name__ == "__main__":
    main()
