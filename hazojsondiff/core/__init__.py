"""Core parsing, rendering and diffing for hazojsondiff."""

from .buffer import ByteArrayBuffer, ByteBuffer, TextBuffer
from .errors import ErrorType, JsonDiffError, ParseError, PropertyMissingError
from .json_diff import DiffPolicy, diff, diff_into
from .parser import parse
from .render import escape_string, render, render_into
from .tokenizer import Token, Tokenizer, TokenType, tokenize
from .types import (
    JsonArray,
    JsonBoolean,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonValue,
)

__all__ = [
    # Value tree
    "JsonValue",
    "JsonString",
    "JsonNumber",
    "JsonBoolean",
    "JsonNull",
    "JsonArray",
    "JsonObject",
    # Tokenizer
    "Token",
    "TokenType",
    "Tokenizer",
    "tokenize",
    # Parser
    "parse",
    # Rendering
    "render",
    "render_into",
    "escape_string",
    # Sinks
    "ByteBuffer",
    "TextBuffer",
    "ByteArrayBuffer",
    # Diff
    "DiffPolicy",
    "diff",
    "diff_into",
    # Errors
    "ErrorType",
    "JsonDiffError",
    "ParseError",
    "PropertyMissingError",
]
