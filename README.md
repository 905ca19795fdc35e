# sr2kit

A small toolkit and a command-line program, `sr2`. It has:

- `sr2kit.buffers`: `RawBuffer` and `Chunk`. Each holds its own copy of a block of bytes.
- `sr2kit.filehandler`: reads and writes whole files as text, as bytes or as buffers.
- `sr2kit.samples`: creates a sample SQLite database. It also downloads content in chunks and saves it under a file name that follows the response's MIME type.
- `sr2kit.cli`: the `sr2` command.

It needs only the standard library.

## Installation

```
pip install .
```

## Command line

```
sr2 --help       # print the usage text
sr2 --version    # print "sr2 version 0.0.1"
sr2 --test0      # create sample.sqlite3 in the current directory, with sample_table
sr2 --test1      # download the sample content and save it as response.<ext>
```

`-h` is the same as `--help`, and `-v` is the same as `--version`. The usage text lists only `--help` and `--version`.

Options are run in the order given, and an option may be repeated. For each argument that is not an option, `sr2` prints `Unknown option: <arg>` to standard error. The exit status is always 0.

You can also run the command from Python:

```python
from sr2kit.cli import main

main(["--version"])
```

`main()` with no arguments reads `sys.argv`. `display_help()` and `display_version()` print their text and also return it.

## Buffers

```python
from sr2kit.buffers import RawBuffer, Chunk

buf = RawBuffer(b"abc")
len(buf)            # 3
bytes(buf)          # b"abc"
buf.data            # b"abc"
list(buf)           # [97, 98, 99]
buf.recreate(b"xy") # replaces the contents with a copy of b"xy"

chunk = Chunk(0, b"hello")
chunk.index         # 0
```

`RawBuffer()` with no argument is empty. A `Chunk` index must be between 0 and 0xFFFFFFFF. Any other index raises `ValueError`.

## Files

```python
from sr2kit.filehandler import (
    read_text_file, write_text_file,
    read_bin_file, write_bin_file,
    read_buffer_file, write_buffer_file,
    file_exists,
)
```

- Text files are read and written as UTF-8. Line endings are left as they are.
- The write functions replace any file that is already at the path.
- If a file cannot be opened, the read and write functions raise `OSError`, for example `FileNotFoundError`.
- `file_exists(path)` returns `True` if the path can be opened for reading and `False` otherwise.

## Samples

```python
from sr2kit.samples import (
    pack_memory_chunks, read_chunks, extension_for_mime,
    create_sqlite_sample_db, request_sample_content,
)
from sr2kit.buffers import Chunk
import io

chunks = list(read_chunks(io.BytesIO(b"hello world"), chunk_size=4))
[c.index for c in chunks]                  # [0, 1, 2]
bytes(pack_memory_chunks(chunks))          # b"hello world"
extension_for_mime("image/png")            # "png"
extension_for_mime("image/gif")            # None
```

- `read_chunks(stream, chunk_size=16384)` yields `Chunk` objects numbered from 0. A `chunk_size` that is not positive raises `ValueError`.
- `pack_memory_chunks(chunks)` joins the chunks in order into one `RawBuffer`.
- `create_sqlite_sample_db(path="sample.sqlite3")` creates the database and an empty `sample_table` (`id INTEGER PRIMARY KEY, name TEXT, age INTEGER`) if they do not exist yet. It then prints `Database opened successfully.`.
- `request_sample_content(url=SAMPLE_URL, directory=".")` downloads the URL in chunks:
  - On HTTP status 200 with a known MIME type, it prints the number of chunks and writes `response.<ext>` in `directory`.
  - It returns the path it wrote, or `None` if nothing was stored.
  - For a status other than 200, or if the request fails, it reports the problem on standard error.

MIME types must match exactly to be known:

| MIME type | Extension |
|---|---|
| `application/json` | `json` |
| `application/json; charset=utf-8` | `json` |
| `text/html` | `html` |
| `text/plain` | `txt` |
| `image/png` | `png` |
| `image/jpeg` | `jpg` |

## What it does not do

- The sample database is created with its table only. No rows are ever written to it or read from it.
- A download of any other MIME type is not saved.
- The download has no options for retries, timeouts or custom certificates.

## Tests

```
pip install .[test]
pytest
```