"""Command-line entry point."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence

from .samples import create_sqlite_sample_db, request_sample_content

PROGRAM = "sr2"
VERSION_INFO = (0, 0, 1)
VERSION = ".".join(str(part) for part in VERSION_INFO)

_DOCUMENTED_OPTIONS: tuple[tuple[tuple[str, ...], str], ...] = (
    (("--help", "-h"), "Show this help message"),
    (("--version", "-v"), "Show version information"),
)
_OPTION_COLUMN_WIDTH = 18


def _help_text() -> str:
    lines = [f"Usage: {PROGRAM} [options]", "", "Options:"]
    for flags, description in _DOCUMENTED_OPTIONS:
        names = ", ".join(flags)
        lines.append(f"  {names.ljust(_OPTION_COLUMN_WIDTH)}{description}")
    return "\n".join(lines) + "\n"


def _version_text() -> str:
    return f"{PROGRAM} version {VERSION}\n"


def display_help() -> str:
    """Write the usage text to standard output and return it."""
    text = _help_text()
    sys.stdout.write(text)
    return text


def display_version() -> str:
    """Write the program version to standard output and return it."""
    text = _version_text()
    sys.stdout.write(text)
    return text


_ACTIONS: dict[str, Callable[[], object]] = {
    "--help": display_help,
    "-h": display_help,
    "--version": display_version,
    "-v": display_version,
    "--test0": create_sqlite_sample_db,
    "--test1": request_sample_content,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run each recognised option in order; report the others."""
    args = sys.argv[1:] if argv is None else argv
    for arg in args:
        action = _ACTIONS.get(arg)
        if action is None:
            print(f"Unknown option: {arg}", file=sys.stderr)
        else:
            action()
    return 0


if __name__ == "__main__":
    sys.exit(main())