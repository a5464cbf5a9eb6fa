"""Output sinks for rendered JSON and diff fragments.

The renderer and the diff engine write through the small ``ByteBuffer``
interface, so the same code can fill an in-process text buffer or a raw
byte array handed across a process or runtime boundary.
"""

from __future__ import annotations

from typing import List, Protocol

MIN_CAPACITY = 8


class ByteBuffer(Protocol):
    def push(self, byte: int) -> None:
        ...

    def push_str(self, text: str) -> None:
        ...


class TextBuffer:
    """Growable text sink."""

    def __init__(self) -> None:
        self._parts: List[str] = []
        self._len = 0

    def push(self, byte: int) -> None:
        self._parts.append(chr(byte))
        self._len += 1

    def push_str(self, text: str) -> None:
        if text:
            self._parts.append(text)
            self._len += len(text)

    def getvalue(self) -> str:
        return "".join(self._parts)

    def __len__(self) -> int:
        return self._len


class ByteArrayBuffer:
    """
    Growable raw byte sink with amortized doubling.

    Capacity starts at no less than ``MIN_CAPACITY`` once anything is written
    and doubles until the required size fits; existing content is copied
    forward into the new storage. Text is encoded as UTF-8.
    """

    def __init__(self, capacity: int = 0):
        self._arr = bytearray(capacity)
        self._len = 0

    @property
    def capacity(self) -> int:
        return len(self._arr)

    def _ensure_capacity(self, additional: int) -> None:
        needed = self._len + additional
        if needed <= len(self._arr):
            return
        new_cap = max(len(self._arr), MIN_CAPACITY)
        while new_cap < needed:
            new_cap *= 2
        grown = bytearray(new_cap)
        grown[: self._len] = self._arr[: self._len]
        self._arr = grown

    def push(self, byte: int) -> None:
        self._ensure_capacity(1)
        self._arr[self._len] = byte
        self._len += 1

    def push_str(self, text: str) -> None:
        data = text.encode("utf-8")
        self._ensure_capacity(len(data))
        self._arr[self._len : self._len + len(data)] = data
        self._len += len(data)

    def getvalue(self) -> bytes:
        return bytes(self._arr[: self._len])

    def __len__(self) -> int:
        return self._len
