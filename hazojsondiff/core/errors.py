"""Error taxonomy for hazojsondiff.

Every failure is terminal for the call that raised it: the parser and the
dataset diff never return partial results.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorType(Enum):
    """
    Enumerated error kinds.

    Each member carries a stable integer code. The sink-writing dataset
    variant reports failures as ``-1 - code`` instead of raising.
    """

    INVALID_STRUCTURE_OBJECT_KEY = (0, "Invalid object key: expected string key in object")
    INVALID_STRUCTURE_GENERAL = (1, "Invalid JSON structure")
    PROPERTY_MISSING = (2, "Required property missing from dataset")
    INVALID_STRUCTURE_UNCLOSED = (3, "Unclosed JSON structure: expected exactly one root value")
    INVALID_STRUCTURE_UNEXPECTED_TOKEN = (4, "Unexpected token")
    INVALID_STRUCTURE_INVALID_NUMBER = (5, "Invalid number")

    def __init__(self, code: int, description: str):
        self.code = code
        self.description = description

    @property
    def sentinel(self) -> int:
        return -1 - self.code


class JsonDiffError(Exception):
    """Base exception for hazojsondiff errors."""

    def __init__(self, error_type: ErrorType, message: Optional[str] = None):
        super().__init__(message or error_type.description)
        self.error_type = error_type

    def __str__(self) -> str:
        return f"{self.error_type.name}: {self.args[0]}"


class ParseError(JsonDiffError):
    """
    Raised when JSON text cannot be assembled into a single value tree.

    ``offset`` is the position of the offending token in the input, when the
    failure can be pinned to one.
    """

    def __init__(
        self,
        error_type: ErrorType,
        message: Optional[str] = None,
        offset: Optional[int] = None,
    ):
        super().__init__(error_type, message)
        self.offset = offset

    def __str__(self) -> str:
        text = super().__str__()
        if self.offset is not None:
            text += f" (at offset {self.offset})"
        return text


class PropertyMissingError(JsonDiffError):
    """Raised when a dataset document lacks one of the required sections."""

    def __init__(self, property_name: str, side: str):
        super().__init__(
            ErrorType.PROPERTY_MISSING,
            f"property '{property_name}' missing from {side} document",
        )
        self.property_name = property_name
        self.side = side
