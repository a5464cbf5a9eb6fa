from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple


class JsonValue:
    """
    Base of the parsed value tree.

    Concrete variants are frozen dataclasses. Array and Object are the only
    recursive variants; objects keep members in source order and may hold
    the same key more than once.
    """

    kind: str = "value"


@dataclass(frozen=True)
class JsonString(JsonValue):
    # Raw text between the quotes, escapes left as written.
    value: str

    kind = "string"


@dataclass(frozen=True)
class JsonNumber(JsonValue):
    value: float

    kind = "number"


@dataclass(frozen=True)
class JsonBoolean(JsonValue):
    value: bool

    kind = "boolean"


@dataclass(frozen=True)
class JsonNull(JsonValue):
    kind = "null"


@dataclass(frozen=True)
class JsonArray(JsonValue):
    items: Tuple[JsonValue, ...] = ()

    kind = "array"

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[JsonValue]:
        return iter(self.items)

    def __getitem__(self, idx: int) -> JsonValue:
        return self.items[idx]


@dataclass(frozen=True)
class JsonObject(JsonValue):
    members: Tuple[Tuple[str, JsonValue], ...] = ()

    kind = "object"

    def __len__(self) -> int:
        return len(self.members)

    def keys(self) -> Iterator[str]:
        """Keys in insertion order, duplicates included."""
        return (key for key, _ in self.members)

    def get(self, key: str) -> Optional[JsonValue]:
        """Return the value of the first member named ``key``."""
        for member_key, value in self.members:
            if member_key == key:
                return value
        return None

    def __contains__(self, key: object) -> bool:
        return any(member_key == key for member_key, _ in self.members)
