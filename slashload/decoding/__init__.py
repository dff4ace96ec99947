"""
Composable decoders that rebuild typed values from a flat token stream.

Every decoder shares one `TokenCursor` and drains exactly the tokens its
format requires; sequences and records are built by nesting decoders.
"""

from .base import Decoder  # noqa: F401
from .errors import DecodeError, ExhaustedInputError, FormatError  # noqa: F401
from .primitives import (  # noqa: F401
    FLOAT,
    INT,
    STR,
    FloatDecoder,
    IntDecoder,
    StrDecoder,
)
from .reader import LayoutEntry, TokenCursor  # noqa: F401
from .records import RecordDecoder  # noqa: F401
from .sequence import SequenceDecoder  # noqa: F401

__all__ = [
    "Decoder",
    "DecodeError",
    "ExhaustedInputError",
    "FormatError",
    "FLOAT",
    "INT",
    "STR",
    "FloatDecoder",
    "IntDecoder",
    "StrDecoder",
    "LayoutEntry",
    "TokenCursor",
    "RecordDecoder",
    "SequenceDecoder",
]
