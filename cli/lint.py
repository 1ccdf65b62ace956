"""Code quality commands for the token import package."""

import subprocess
import sys

LINT_TARGETS = ("token_import/", "cli/", "tests/")


def _ruff(*args: str) -> int:
    return subprocess.run([sys.executable, "-m", "ruff", *args], check=False).returncode


def main() -> None:
    """Run ruff linter."""
    sys.exit(_ruff("check", *LINT_TARGETS))


def format_code() -> None:
    """Run ruff formatter."""
    sys.exit(_ruff("format", *LINT_TARGETS))


def format_check() -> None:
    """Fail when files would be reformatted."""
    sys.exit(_ruff("format", "--check", *LINT_TARGETS))
