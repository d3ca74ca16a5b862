"""
Console output helpers for the Bible reader.

info/ok go to stdout; warn/error are diagnostics and go to stderr so they
never mix with chapter text or search results.
"""

import sys


def info(msg: str) -> None:
    """Print an info message."""
    print(f"[info] {msg}")


def ok(msg: str) -> None:
    """Print a success message."""
    print(f"[ok] {msg}")


def warn(msg: str) -> None:
    """Print a warning message to stderr."""
    print(f"[warn] {msg}", file=sys.stderr)


def error(msg: str) -> None:
    """Print an error message to stderr."""
    print(f"[error] {msg}", file=sys.stderr)
