"""Helpers for reading and writing PHP data literals.

Covers the small subset of PHP the plugin manifest uses: single-quoted
strings and nested `array(...)` literals with optional `=>` keys.
"""

import re
from typing import Any

_OPEN_TAG = "<?php"

_TOKEN_PATTERN = re.compile(
    r"""
    (?P<space>\s+)
    | (?P<comment>//[^\n]*|\#[^\n]*|/\*.*?\*/)
    | (?P<string>'(?:[^'\\]|\\.)*')
    | (?P<array>array\s*\()
    | (?P<keyword>return\b)
    | (?P<arrow>=>)
    | (?P<symbol>[(),;])
    """,
    re.VERBOSE | re.DOTALL | re.IGNORECASE,
)

Token = tuple[str, str]


class PhpParseError(ValueError):
    """Raised when a PHP data literal cannot be parsed."""


def quote(value: str) -> str:
    """Return value as a single-quoted PHP string literal."""
    escaped = value.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def _unquote(literal: str) -> str:
    # single-quoted strings only know the \\ and \' escapes
    return re.sub(r"\\([\\'])", r"\1", literal[1:-1])


def _tokenize(source: str) -> list[Token]:
    tokens: list[Token] = []
    position = 0

    while position < len(source):
        match = _TOKEN_PATTERN.match(source, position)
        if not match:
            snippet = source[position : position + 20]
            raise PhpParseError(f"Unexpected input at offset {position}: {snippet!r}")

        kind = match.lastgroup or ""
        if kind not in ("space", "comment"):
            tokens.append((kind, match.group().lower() if kind == "keyword" else match.group()))
        position = match.end()

    return tokens


class _Parser:
    """Recursive descent parser over a token list."""

    def __init__(self, tokens: list[Token]) -> None:
        self.tokens = tokens
        self.index = 0

    def peek(self) -> Token | None:
        return self.tokens[self.index] if self.index < len(self.tokens) else None

    def expect(self, kind: str, text: str | None = None) -> str:
        token = self.peek()
        if token is None or token[0] != kind or (text is not None and token[1] != text):
            found = token[1] if token else "end of input"
            raise PhpParseError(f"Expected {text or kind}, got {found!r}")
        self.index += 1
        return token[1]

    def value(self) -> Any:
        token = self.peek()
        if token is not None and token[0] == "string":
            self.index += 1
            return _unquote(token[1])
        if token is not None and token[0] == "array":
            return self.array()

        found = token[1] if token else "end of input"
        raise PhpParseError(f"Expected a string or array, got {found!r}")

    def array(self) -> dict[str, Any] | list[Any]:
        self.expect("array")
        keyed: dict[str, Any] = {}
        items: list[Any] = []

        while self.peek() != ("symbol", ")"):
            value = self.value()
            if self.peek() == ("arrow", "=>"):
                self.index += 1
                if not isinstance(value, str):
                    raise PhpParseError("Array keys must be strings")
                keyed[value] = self.value()
            else:
                items.append(value)

            if self.peek() == ("symbol", ","):
                self.index += 1
            elif self.peek() != ("symbol", ")"):
                raise PhpParseError("Expected ',' or ')' in array literal")

        self.expect("symbol", ")")

        if keyed and items:
            raise PhpParseError("Mixed keyed and list array literals are not supported")
        return keyed if keyed else items


def parse_return_array(source: str) -> dict[str, Any] | list[Any]:
    """Parse a PHP data file of the form `<?php return array(...);`.

    Args:
        source: The PHP source code.

    Returns:
        A dict for keyed arrays, a list otherwise (including empty arrays).

    Raises:
        PhpParseError: If the source is not such a data file.
    """
    body = source.lstrip()
    if not body.startswith(_OPEN_TAG):
        raise PhpParseError(f"Missing '{_OPEN_TAG}' open tag")

    parser = _Parser(_tokenize(body[len(_OPEN_TAG) :]))
    parser.expect("keyword", "return")
    result = parser.array()
    parser.expect("symbol", ";")

    if parser.peek() is not None:
        raise PhpParseError("Unexpected content after return statement")

    return result
