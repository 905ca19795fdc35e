"""In-memory byte buffers and indexed chunks of them."""

from __future__ import annotations

from collections.abc import Iterator

_MAX_INDEX = 0xFFFFFFFF


class RawBuffer:
    """An owned copy of a block of bytes that can be replaced wholesale."""

    def __init__(self, data: bytes | bytearray | memoryview = b"") -> None:
        self._data = bytes(data)

    def recreate(self, data: bytes | bytearray | memoryview) -> None:
        """Discard the current contents and take a copy of ``data``."""
        self._data = bytes(data)

    @property
    def data(self) -> bytes:
        """The buffer contents."""
        return self._data

    def __len__(self) -> int:
        return len(self._data)

    def __bytes__(self) -> bytes:
        return self._data

    def __iter__(self) -> Iterator[int]:
        return iter(self._data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={len(self._data)})"


class Chunk(RawBuffer):
    """A buffer that remembers its position in a sequence of chunks."""

    def __init__(self, index: int, data: bytes | bytearray | memoryview = b"") -> None:
        if not 0 <= index <= _MAX_INDEX:
            raise ValueError(f"chunk index out of range: {index}")
        super().__init__(data)
        self.index = index

    def __repr__(self) -> str:
        return f"Chunk(index={self.index}, size={len(self)})"