from .core import (
    # Sinks
    ByteArrayBuffer,
    ByteBuffer,
    # Diff
    DiffPolicy,
    # Errors
    ErrorType,
    # Value tree
    JsonArray,
    JsonBoolean,
    JsonDiffError,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonValue,
    ParseError,
    PropertyMissingError,
    TextBuffer,
    # Tokenizer
    Token,
    Tokenizer,
    TokenType,
    diff,
    diff_into,
    # Parser
    parse,
    # Rendering
    render,
    render_into,
    tokenize,
)
from .dataset import DATASET_PROPERTIES, diff_dataset, diff_dataset_into
from .version import DIFF_FORMAT_VERSION, HAZOJSONDIFF_VERSION

__all__ = [
    # Version
    "HAZOJSONDIFF_VERSION",
    "DIFF_FORMAT_VERSION",
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
    # Sinks
    "ByteBuffer",
    "TextBuffer",
    "ByteArrayBuffer",
    # Diff
    "DiffPolicy",
    "diff",
    "diff_into",
    # Dataset
    "DATASET_PROPERTIES",
    "diff_dataset",
    "diff_dataset_into",
    # Errors
    "ErrorType",
    "JsonDiffError",
    "ParseError",
    "PropertyMissingError",
]
