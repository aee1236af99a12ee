"""
Maintain the footer block at the end of every module docstring.

The footer names the file and carries the author, copyright, version and
license lines. ``insert_docstrings`` rewrites it in place; ``check_docstrings``
only reports modules whose footer is missing or names the wrong file.
"""
import datetime
import os
import re

current_year = datetime.datetime.now().year

AUTHOR = "Chris Rowles <christopher.rowles@outlook.com>"
VERSION = "0.1.0"

DOCSTRING_RE = re.compile(r'("""|\'\'\')([\s\S]*?)(\1)')
FOOTER_RE = re.compile(
    r"File: (?P<file>.+?)\nAuthor: .+?\nCopyright: .+?\nVersion: .+?\nLicense: .+?$",
    re.MULTILINE
)


def should_skip(path: str) -> bool:
    """
    Determine whether a file should be skipped based on its path.

    Args:
        path (str): The full path to the file.

    Returns:
        bool: True if the file should be skipped, False otherwise.
    """
    return "__pycache__" in path or not path.endswith(".py")


def build_footer(filename: str) -> str:
    """
    Return the footer block for ``filename``.
    """
    return (
        f"File: {filename}\n"
        f"Author: {AUTHOR}\n"
        f"Copyright: © {current_year} Chris Rowles. All rights reserved.\n"
        f"Version: {VERSION}\n"
        f"License: MIT"
    )


def update_header(contents: str, filename: str) -> tuple[str, str]:
    """
    Add or replace the footer block inside the leading module docstring.

    Args:
        contents (str): Source text of the module.
        filename (str): Base name written into the footer.

    Returns:
        tuple[str, str]: The new source text and a description of the change.
    """
    new_footer = build_footer(filename)
    docstring_match = DOCSTRING_RE.match(contents)

    if not docstring_match:
        return f'"""{new_footer}\n"""\n\n' + contents, "📝 Docstring created with footer block"

    quote = docstring_match.group(1)
    body = docstring_match.group(2)

    if FOOTER_RE.search(body):
        updated_body = FOOTER_RE.sub(new_footer, body.strip())
        action = "📝 Footer block updated in"
    else:
        updated_body = body.strip() + "\n\n\n" + new_footer
        action = "📝 Footer block appended to"

    new_docstring = f"{quote}{updated_body}\n{quote}"
    return new_docstring + contents[docstring_match.end():], action


def footer_problem(contents: str, filename: str) -> str | None:
    """
    Describe what is wrong with a module's footer, or None if it is in place.
    """
    docstring_match = DOCSTRING_RE.match(contents)
    if not docstring_match:
        return "no module docstring"
    footer = FOOTER_RE.search(docstring_match.group(2))
    if not footer:
        return "no footer block"
    if footer.group("file").strip() != filename:
        return f"footer names '{footer.group('file').strip()}'"
    return None


def iter_source_files(root: str):
    """
    Yield every Python source file under ``root``, tests excluded.

    Args:
        root (str): The root directory to start from.
    """
    for dirpath, dirnames, filenames in os.walk(root):
        # Skip directories
        dirnames[:] = [d for d in dirnames if d not in ["__pycache__", "tests"]]

        for filename in filenames:
            full_path = os.path.join(dirpath, filename)
            if not should_skip(full_path):
                yield full_path


def project_sources(base_dir: str) -> list[str]:
    """
    Return the source files that carry a footer block.
    """
    sources = list(iter_source_files(os.path.join(base_dir, "enumcore")))
    sources.append(os.path.join(base_dir, "enumtool.py"))
    return sources


def insert_docstrings(base_dir: str | None = None) -> None:
    """
    Insert or refresh the footer block in every project source file.
    """
    for path in project_sources(base_dir or os.getcwd()):
        with open(path, "r", encoding="utf-8") as file:
            contents = file.read()

        new_contents, action = update_header(contents, os.path.basename(path))

        with open(path, "w", encoding="utf-8") as file:
            file.write(new_contents)

        print(f"{action}: {path}")


def check_docstrings(base_dir: str | None = None) -> list[tuple[str, str]]:
    """
    Return ``(path, problem)`` for every source file with a bad footer.
    """
    problems = []
    for path in project_sources(base_dir or os.getcwd()):
        with open(path, "r", encoding="utf-8") as file:
            problem = footer_problem(file.read(), os.path.basename(path))
        if problem is not None:
            problems.append((path, problem))
    return problems


if __name__ == "__main__":
    insert_docstrings()
