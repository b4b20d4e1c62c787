from __future__ import annotations

import re

from ..core.exceptions import ParseError

# Plain console numbers only: no digit separators, exponents, nan or inf.
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_DECIMAL_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")


def parse_int(raw: str, message: str = "Expected a whole number.") -> int:
    text = raw.strip() if isinstance(raw, str) else ""
    if not _INT_PATTERN.fullmatch(text):
        raise ParseError(message)
    return int(text)


def parse_float(raw: str, message: str = "Expected a number.") -> float:
    text = raw.strip() if isinstance(raw, str) else ""
    if not _DECIMAL_PATTERN.fullmatch(text):
        raise ParseError(message)
    return float(text)
