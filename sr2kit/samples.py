"""Sample actions: creating a SQLite database and downloading content."""

from __future__ import annotations

import os
import sqlite3
import sys
import urllib.error
import urllib.request
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import BinaryIO

from .buffers import Chunk, RawBuffer
from .filehandler import write_buffer_file

SAMPLE_DB_PATH = "sample.sqlite3"
SAMPLE_URL = "https://pbs.twimg.com/media/GA8Wn6VXQAAZ63z?format=jpg&name=900x900"
DEFAULT_CHUNK_SIZE = 16384

MIME_EXTENSIONS: dict[str, str] = {
    "application/json": "json",
    "application/json; charset=utf-8": "json",
    "text/html": "html",
    "text/plain": "txt",
    "image/png": "png",
    "image/jpeg": "jpg",
}

_CREATE_TABLE = (
    "CREATE TABLE IF NOT EXISTS sample_table "
    "(id INTEGER PRIMARY KEY, name TEXT, age INTEGER);"
)


def extension_for_mime(content_type: str | None) -> str | None:
    """Return the file extension for an exact known MIME type, else None."""
    return MIME_EXTENSIONS.get(content_type or "")


def pack_memory_chunks(chunks: Iterable[RawBuffer]) -> RawBuffer:
    """Join the chunks, in order, into a single buffer."""
    return RawBuffer(b"".join(bytes(chunk) for chunk in chunks))


def read_chunks(stream: BinaryIO, chunk_size: int = DEFAULT_CHUNK_SIZE) -> Iterator[Chunk]:
    """Yield the stream's content as consecutively numbered chunks."""
    if chunk_size <= 0:
        raise ValueError("chunk_size must be positive")
    index = 0
    while block := stream.read(chunk_size):
        yield Chunk(index, block)
        index += 1


def create_sqlite_sample_db(path: str | os.PathLike = SAMPLE_DB_PATH) -> None:
    """Create the sample database and its table if they do not exist."""
    try:
        connection = sqlite3.connect(path)
    except sqlite3.Error as exc:
        print(f"Cannot open database: {exc}", file=sys.stderr)
        return
    try:
        print("Database opened successfully.")
        with connection:
            connection.execute(_CREATE_TABLE)
    finally:
        connection.close()


def request_sample_content(
    url: str = SAMPLE_URL, directory: str | os.PathLike = "."
) -> Path | None:
    """Download ``url`` and store it as response.<ext> when its type is known.

    Returns the path written, or None when nothing was stored.
    """
    try:
        with urllib.request.urlopen(url) as response:
            chunks = list(read_chunks(response))
            status = response.status
            content_type = response.headers.get("Content-Type")
    except urllib.error.HTTPError as exc:
        print(f"Unexpected HTTP status: {exc.code}", file=sys.stderr)
        return None
    except urllib.error.URLError as exc:
        print(f"request failed: {exc.reason}", file=sys.stderr)
        print("Unexpected HTTP status: 0", file=sys.stderr)
        return None

    if status != 200:
        print(f"Unexpected HTTP status: {status}", file=sys.stderr)
        return None

    written = None
    extension = extension_for_mime(content_type)
    if extension is not None:
        print(len(chunks))
        written = Path(directory) / f"response.{extension}"
        write_buffer_file(written, pack_memory_chunks(chunks))

    print("Response OK, MIME type matches:")
    return written