"""Stack-based JSON parser.

Consumes the token stream one token at a time and assembles a value tree on
an explicit stack, so nesting never grows the Python call stack.

Container starts push a dedicated marker rather than an empty container,
which keeps a legitimately empty array or object on the stack distinct from
an opener. Separators are not validated: commas and colons are skipped.
"""

from __future__ import annotations

import logging
import math
from typing import List, Optional, Union

from .errors import ErrorType, ParseError
from .tokenizer import Token, TokenType, tokenize
from .types import (
    JsonArray,
    JsonBoolean,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonValue,
)

logger = logging.getLogger(__name__)


class _ContainerMarker:
    """Stack entry recording where an array or object was opened."""

    __slots__ = ("token_type", "offset")

    def __init__(self, token_type: TokenType, offset: int):
        self.token_type = token_type
        self.offset = offset

    def __repr__(self) -> str:
        return f"_ContainerMarker({self.token_type.name}, offset={self.offset})"


_StackEntry = Union[JsonValue, _ContainerMarker]

_CLOSER_TO_OPENER = {
    TokenType.ARRAY_END: TokenType.ARRAY_START,
    TokenType.OBJECT_END: TokenType.OBJECT_START,
}


def parse(text: str, *, max_depth: Optional[int] = None) -> JsonValue:
    """
    Parse JSON text into a value tree.

    Args:
        text: The JSON document.
        max_depth: Optional limit on container nesting. ``None`` means unbounded.

    Returns:
        The single root value.

    Raises:
        ParseError: With one of the ``INVALID_STRUCTURE_*`` kinds.
    """
    try:
        return _parse(text, max_depth)
    except ParseError as exc:
        logger.debug("parse failed: %s", exc)
        raise


def _parse(text: str, max_depth: Optional[int]) -> JsonValue:
    stack: List[_StackEntry] = []
    depth = 0

    for token in tokenize(text):
        kind = token.token_type

        if kind is TokenType.STRING:
            # Token spans both quotes.
            stack.append(JsonString(text[token.start + 1:token.end - 1]))
        elif kind is TokenType.NUMBER:
            stack.append(_parse_number(text, token))
        elif kind is TokenType.TRUE:
            stack.append(JsonBoolean(True))
        elif kind is TokenType.FALSE:
            stack.append(JsonBoolean(False))
        elif kind is TokenType.NULL:
            stack.append(JsonNull())
        elif kind is TokenType.COMMA or kind is TokenType.COLON:
            continue
        elif kind is TokenType.ARRAY_START or kind is TokenType.OBJECT_START:
            depth += 1
            if max_depth is not None and depth > max_depth:
                raise ParseError(
                    ErrorType.INVALID_STRUCTURE_GENERAL,
                    f"depth limit of {max_depth} exceeded",
                    offset=token.start,
                )
            stack.append(_ContainerMarker(kind, token.start))
        elif kind is TokenType.ARRAY_END:
            items = _pop_until_marker(stack, token)
            depth -= 1
            stack.append(JsonArray(tuple(items)))
        elif kind is TokenType.OBJECT_END:
            items = _pop_until_marker(stack, token)
            depth -= 1
            stack.append(_build_object(items, token))

    if len(stack) != 1 or isinstance(stack[0], _ContainerMarker):
        open_marker = next(
            (e for e in stack if isinstance(e, _ContainerMarker)), None
        )
        raise ParseError(
            ErrorType.INVALID_STRUCTURE_UNCLOSED,
            f"expected exactly one root value, found {len(stack)} stack entries",
            offset=open_marker.offset if open_marker else None,
        )
    return stack[0]


def _parse_number(text: str, token: Token) -> JsonNumber:
    raw = token.text(text)
    try:
        value = float(raw)
    except ValueError:
        raise ParseError(
            ErrorType.INVALID_STRUCTURE_INVALID_NUMBER,
            f"invalid number '{raw}'",
            offset=token.start,
        ) from None
    if not math.isfinite(value):
        raise ParseError(
            ErrorType.INVALID_STRUCTURE_INVALID_NUMBER,
            f"number out of range '{raw[:32]}'",
            offset=token.start,
        )
    return JsonNumber(value)


def _pop_until_marker(stack: List[_StackEntry], closer: Token) -> List[JsonValue]:
    """Pop values down to the matching opener and return them in source order."""
    collected: List[JsonValue] = []
    while stack:
        entry = stack.pop()
        if isinstance(entry, _ContainerMarker):
            if entry.token_type is not _CLOSER_TO_OPENER[closer.token_type]:
                raise ParseError(
                    ErrorType.INVALID_STRUCTURE_UNEXPECTED_TOKEN,
                    f"'{_describe(closer.token_type)}' closes a container opened at "
                    f"offset {entry.offset}",
                    offset=closer.start,
                )
            collected.reverse()
            return collected
        collected.append(entry)
    raise ParseError(
        ErrorType.INVALID_STRUCTURE_UNEXPECTED_TOKEN,
        f"'{_describe(closer.token_type)}' without matching opener",
        offset=closer.start,
    )


def _build_object(items: List[JsonValue], closer: Token) -> JsonObject:
    if len(items) % 2:
        raise ParseError(
            ErrorType.INVALID_STRUCTURE_GENERAL,
            "object has a key without a value",
            offset=closer.start,
        )
    members = []
    for i in range(0, len(items), 2):
        key = items[i]
        if not isinstance(key, JsonString):
            raise ParseError(
                ErrorType.INVALID_STRUCTURE_OBJECT_KEY,
                f"object key must be a string, got {key.kind}",
                offset=closer.start,
            )
        members.append((key.value, items[i + 1]))
    return JsonObject(tuple(members))


def _describe(kind: TokenType) -> str:
    return "]" if kind is TokenType.ARRAY_END else "}"
