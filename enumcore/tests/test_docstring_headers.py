"""
Tests for the docstring header maintenance script.
"""
from pathlib import Path

from scripts.generate_docstring_headers import (
    build_footer,
    check_docstrings,
    footer_problem,
    update_header,
)

PROJECT_ROOT = Path(__file__).resolve().parents[2]


def test_update_header_appends_footer():
    source = '"""Widgets.\n\nSome detail.\n"""\n\nX = 1\n'
    updated, action = update_header(source, "widgets.py")
    assert "appended" in action
    assert updated.startswith('"""Widgets.\n\nSome detail.\n\n\nFile: widgets.py\n')
    assert updated.endswith('License: MIT\n"""\n\nX = 1\n')
    assert footer_problem(updated, "widgets.py") is None


def test_update_header_replaces_footer():
    source = f'"""Widgets.\n\n{build_footer("old.py")}\n"""\n'
    assert footer_problem(source, "widgets.py") == "footer names 'old.py'"
    updated, action = update_header(source, "widgets.py")
    assert "updated" in action
    assert updated.count("File: ") == 1
    assert footer_problem(updated, "widgets.py") is None


def test_update_header_creates_docstring():
    updated, action = update_header("X = 1\n", "bare.py")
    assert "created" in action
    assert footer_problem("X = 1\n", "bare.py") == "no module docstring"
    assert footer_problem(updated, "bare.py") is None


def test_project_sources_have_headers():
    assert check_docstrings(str(PROJECT_ROOT)) == []
