"""
Lint script runner.

Runs flake8 and then pylint over the enumcore sources and the enumtool
entry point. Both linters always run; the exit status is non-zero if
either of them reported problems.
"""
import subprocess
import sys

LINT_TARGETS = ["./enumcore", "./enumtool.py"]
MAX_LINE_LENGTH = "100"


def run_flake8(targets: list[str]) -> int:
    """
    Run flake8 and return its exit status.
    """
    print("Running flake8...")
    return subprocess.run([
        "flake8",
        *targets,
        f"--max-line-length={MAX_LINE_LENGTH}",
        "--exclude=enumcore/tests"
    ], check=False).returncode


def run_pylint(targets: list[str]) -> int:
    """
    Run pylint and return its exit status.
    """
    print("Running pylint...")
    return subprocess.run([
        "pylint",
        *targets,
        f"--max-line-length={MAX_LINE_LENGTH}",
        "--ignore=tests"
    ], check=False).returncode


def main(targets: list[str] | None = None) -> int:
    """
    Lint the enumcore project using flake8 and pylint.
    """
    targets = targets or LINT_TARGETS
    status = run_flake8(targets)
    status |= run_pylint(targets)
    if status:
        print("❌ Lint reported problems")
    else:
        print("✅ Lint passed")
    return status


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
