from __future__ import annotations

import math
import re
from typing import Optional

from .errors import FormatError
from .reader import TokenCursor

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def parse_int(token: str, expected: str = "int", *, index: Optional[int] = None) -> int:
    if _INT_RE.fullmatch(token) is None:
        raise FormatError(token, expected, index=index)
    try:
        return int(token)
    except ValueError as e:
        # int() caps the number of digits it converts
        raise FormatError(token, expected, index=index, reason=str(e)) from None


class IntDecoder:
    """Base-10 signed integer, one token."""

    kind = "int"

    def decode(self, cursor: TokenCursor) -> int:
        index = cursor.tokens_consumed()
        return parse_int(cursor.next(), self.kind, index=index)


class FloatDecoder:
    """Finite decimal number, one token."""

    kind = "float"

    def decode(self, cursor: TokenCursor) -> float:
        index = cursor.tokens_consumed()
        token = cursor.next()
        if _FLOAT_RE.fullmatch(token) is None:
            raise FormatError(token, self.kind, index=index)
        value = float(token)
        if not math.isfinite(value):
            raise FormatError(token, self.kind, index=index, reason="out of range")
        return value


class StrDecoder:
    """One token, verbatim."""

    kind = "str"

    def decode(self, cursor: TokenCursor) -> str:
        return cursor.next()


INT = IntDecoder()
FLOAT = FloatDecoder()
STR = StrDecoder()
