"""
Flat JSON-subset codec for payment request fields.

Only single-level objects of primitive values are supported. The parser
scans quoted strings with their escapes, so values may contain the
delimiter characters `,` `:` `}` and `"` without corrupting the result.
Unquoted tokens are typed as: null, booleans (any case), decimal numbers
(always float), and otherwise left as raw text.
"""

import math
import re
from typing import Dict, List, Mapping, Tuple

from .base import Value
from .errors import CanonicalFormatError

NUMBER_PATTERN = re.compile(r"^-?\d+(\.\d+)?$")

ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}
UNESCAPES = {
    "\\": "\\",
    '"': '"',
    "/": "/",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "b": "\b",
    "f": "\f",
}


def escape(text: str) -> str:
    return "".join(ESCAPES.get(c, c) for c in text)


def serialize_value(value: Value) -> str:
    if value is None:
        return "null"
    # bool before int, bool is an int
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError(f"cannot serialize non-finite number {value!r}")
    if isinstance(value, (int, float)):
        return repr(value)
    if isinstance(value, str):
        return f'"{escape(value)}"'
    raise TypeError(f"cannot serialize value of type {type(value).__name__}")


def serialize(data: Mapping[str, Value]) -> str:
    pairs = [f'"{escape(key)}":{serialize_value(value)}' for key, value in data.items()]
    return "{" + ",".join(pairs) + "}"


def infer_value(token: str) -> Value:
    """Types an unquoted token."""
    lowered = token.lower()
    if lowered == "null":
        return None
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    if NUMBER_PATTERN.match(token):
        return float(token)
    return token


class _Scanner:
    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def error(self, message: str) -> CanonicalFormatError:
        return CanonicalFormatError(f"{message} at position {self.pos}")

    def skip_whitespace(self):
        while self.pos < len(self.text) and self.text[self.pos] in " \t\r\n":
            self.pos += 1

    def peek(self) -> str:
        self.skip_whitespace()
        if self.pos >= len(self.text):
            raise self.error("unexpected end of payload")
        return self.text[self.pos]

    def expect(self, char: str):
        if self.peek() != char:
            raise self.error(f"expected {char!r}")
        self.pos += 1

    def string(self) -> str:
        self.expect('"')
        chars: List[str] = []
        while self.pos < len(self.text):
            c = self.text[self.pos]
            self.pos += 1
            if c == '"':
                return "".join(chars)
            if c != "\\":
                chars.append(c)
                continue
            if self.pos >= len(self.text):
                break
            e = self.text[self.pos]
            self.pos += 1
            if e == "u":
                code = self.text[self.pos : self.pos + 4]
                if len(code) != 4 or not all(h in "0123456789abcdefABCDEF" for h in code):
                    raise self.error("invalid unicode escape")
                chars.append(chr(int(code, 16)))
                self.pos += 4
            elif e in UNESCAPES:
                chars.append(UNESCAPES[e])
            else:
                raise self.error(f"invalid escape '\\{e}'")
        raise self.error("unterminated string")

    def token(self) -> str:
        start = self.pos
        while self.pos < len(self.text) and self.text[self.pos] not in ",}":
            self.pos += 1
        token = self.text[start : self.pos].strip()
        if not token:
            raise self.error("missing value")
        return token

    def value(self) -> Value:
        if self.peek() == '"':
            return self.string()
        if self.peek() in "{[":
            raise self.error("nested values are not supported")
        return infer_value(self.token())

    def pairs(self) -> List[Tuple[str, Value]]:
        self.expect("{")
        result: List[Tuple[str, Value]] = []
        if self.peek() == "}":
            self.pos += 1
            return result
        while True:
            key = self.string()
            self.expect(":")
            result.append((key, self.value()))
            if self.peek() == ",":
                self.pos += 1
                continue
            self.expect("}")
            return result


def parse(text: str) -> Dict[str, Value]:
    scanner = _Scanner(text)
    data = dict(scanner.pairs())
    scanner.skip_whitespace()
    if scanner.pos != len(text):
        raise scanner.error("trailing data after object")
    return data
