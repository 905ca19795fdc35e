"""Byte buffers, whole-file helpers, a sample SQLite database, chunked downloads and the sr2 command."""

__version__ = "0.0.1"
__all__ = ["buffers", "filehandler", "samples", "cli"]