"""Compact JSON rendering of value trees.

Output has no whitespace and keeps array and object member order as held in
the tree. String escaping is minimal: only ``"``, ``\\`` and newline are
escaped, for values and keys alike.
"""

from __future__ import annotations

import math
from decimal import Decimal

from .buffer import ByteBuffer, TextBuffer
from .types import (
    JsonArray,
    JsonBoolean,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonValue,
)

_ESCAPES = str.maketrans({'"': '\\"', "\\": "\\\\", "\n": "\\n"})


def escape_string(s: str) -> str:
    """Quote ``s`` with the minimal escaping used throughout diff output."""
    return '"' + s.translate(_ESCAPES) + '"'


def format_number(value: float) -> str:
    # Integral values drop the fractional part: 1.0 renders as 1.
    if math.isfinite(value) and float(value).is_integer():
        if value == 0 and math.copysign(1.0, value) < 0:
            return "-0"
        return str(int(value))
    text = repr(value)
    if "e" in text and math.isfinite(value):
        # Small magnitudes print in positional form: 1e-05 renders as 0.00001.
        return format(Decimal(text), "f")
    return text


def render(value: JsonValue) -> str:
    buf = TextBuffer()
    render_into(value, buf)
    return buf.getvalue()


def render_into(value: JsonValue, buf: ByteBuffer) -> None:
    if isinstance(value, JsonString):
        buf.push_str(escape_string(value.value))
    elif isinstance(value, JsonNumber):
        buf.push_str(format_number(value.value))
    elif isinstance(value, JsonBoolean):
        buf.push_str("true" if value.value else "false")
    elif isinstance(value, JsonArray):
        buf.push(ord("["))
        for i, item in enumerate(value.items):
            if i:
                buf.push(ord(","))
            render_into(item, buf)
        buf.push(ord("]"))
    elif isinstance(value, JsonObject):
        buf.push(ord("{"))
        for i, (key, item) in enumerate(value.members):
            if i:
                buf.push(ord(","))
            buf.push_str(escape_string(key))
            buf.push(ord(":"))
            render_into(item, buf)
        buf.push(ord("}"))
    else:
        buf.push_str("null")
