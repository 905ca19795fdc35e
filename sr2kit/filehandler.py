"""Reading and writing whole files as text, bytes or buffers."""

from __future__ import annotations

import os

from .buffers import RawBuffer

PathLike = str | os.PathLike


def read_text_file(path: PathLike) -> str:
    """Return the whole content of a UTF-8 text file, line endings untouched."""
    with open(path, encoding="utf-8", newline="") as handle:
        return handle.read()


def write_text_file(path: PathLike, content: str) -> None:
    """Write ``content`` to ``path`` as UTF-8, replacing any existing file."""
    with open(path, "w", encoding="utf-8", newline="") as handle:
        handle.write(content)


def read_bin_file(path: PathLike) -> bytes:
    """Return the whole content of a file as bytes."""
    with open(path, "rb") as handle:
        return handle.read()


def write_bin_file(path: PathLike, content: bytes | bytearray | memoryview) -> None:
    """Write raw bytes to ``path``, replacing any existing file."""
    with open(path, "wb") as handle:
        handle.write(content)


def read_buffer_file(path: PathLike) -> RawBuffer:
    """Return the whole content of a file wrapped in a RawBuffer."""
    return RawBuffer(read_bin_file(path))


def write_buffer_file(path: PathLike, buffer: RawBuffer) -> None:
    """Write the contents of a RawBuffer to ``path``."""
    write_bin_file(path, bytes(buffer))


def file_exists(path: PathLike) -> bool:
    """Tell whether ``path`` names a file that can be opened for reading."""
    try:
        with open(path, "rb"):
            return True
    except OSError:
        return False