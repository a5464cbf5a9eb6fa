"""Lexical scanner for hazojsondiff.

Turns JSON text into a lazy, forward-only stream of tokens. Tokens are views:
they hold character offsets into the input and never copy text.

Scanning rules:
- Whitespace and any unrecognised character outside a string are skipped
- Inside a string, a backslash skips the next character (escapes are not decoded)
- ``true``, ``false`` and ``null`` are recognised only when fully in bounds
- Numbers start at a digit or ``-`` and extend over digits and ``.``
- String tokens span both quotes; an unterminated string yields no token
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

_DIGITS = "0123456789"


class TokenType(Enum):
    STRING = "string"
    NUMBER = "number"
    TRUE = "true"
    FALSE = "false"
    NULL = "null"
    OBJECT_START = "object_start"
    OBJECT_END = "object_end"
    ARRAY_START = "array_start"
    ARRAY_END = "array_end"
    COMMA = "comma"
    COLON = "colon"


_PUNCTUATION = {
    "{": TokenType.OBJECT_START,
    "}": TokenType.OBJECT_END,
    "[": TokenType.ARRAY_START,
    "]": TokenType.ARRAY_END,
    ",": TokenType.COMMA,
    ":": TokenType.COLON,
}

_LITERALS = {
    "t": ("true", TokenType.TRUE),
    "f": ("false", TokenType.FALSE),
    "n": ("null", TokenType.NULL),
}


@dataclass(frozen=True)
class Token:
    """Half-open span ``[start, end)`` of the input, in character offsets, and its kind."""

    start: int
    end: int
    token_type: TokenType

    def text(self, source: str) -> str:
        return source[self.start:self.end]


class Tokenizer:
    """
    Iterator over the tokens of ``source``.

    Single pass: once exhausted it stays exhausted. Build a new Tokenizer to
    scan again from the beginning.
    """

    def __init__(self, source: str):
        self._src = source
        self._i = 0
        self._in_string = False
        self._string_start = 0

    def __iter__(self) -> "Tokenizer":
        return self

    def __next__(self) -> Token:
        token = self._scan()
        if token is None:
            raise StopIteration
        return token

    def _scan(self) -> Optional[Token]:
        src = self._src
        n = len(src)
        while self._i < n:
            c = src[self._i]

            if self._in_string:
                if c == "\\":
                    self._i += 2
                    continue
                if c == '"':
                    self._in_string = False
                    self._i += 1
                    return Token(self._string_start, self._i, TokenType.STRING)
                self._i += 1
                continue

            if c == '"':
                self._in_string = True
                self._string_start = self._i
                self._i += 1
                continue

            kind = _PUNCTUATION.get(c)
            if kind is not None:
                self._i += 1
                return Token(self._i - 1, self._i, kind)

            literal = _LITERALS.get(c)
            if literal is not None:
                word, kind = literal
                end = self._i + len(word)
                if end <= n and src[self._i:end] == word:
                    start = self._i
                    self._i = end
                    return Token(start, end, kind)

            if c in _DIGITS or c == "-":
                start = self._i
                self._i += 1
                while self._i < n and (src[self._i] in _DIGITS or src[self._i] == "."):
                    self._i += 1
                return Token(start, self._i, TokenType.NUMBER)

            self._i += 1
        return None


def tokenize(source: str) -> Tokenizer:
    """Return a fresh token stream over ``source``."""
    return Tokenizer(source)
