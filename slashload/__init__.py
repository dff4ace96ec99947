"""slashload - rebuild typed values from slash-delimited token strings."""

from .catalog import decoder_for  # noqa: F401
from .config import LoaderConfig, load_config  # noqa: F401
from .decoding import (  # noqa: F401
    FLOAT,
    INT,
    STR,
    Decoder,
    DecodeError,
    ExhaustedInputError,
    FormatError,
    RecordDecoder,
    SequenceDecoder,
    TokenCursor,
)
from .loader import load, open_cursor, tokenize  # noqa: F401
from .models import COMPANY, EMPLOYEE, Company, Employee  # noqa: F401
from .render import render  # noqa: F401

__version__ = "0.1.0"

__all__ = [
    "decoder_for",
    "LoaderConfig",
    "load_config",
    "FLOAT",
    "INT",
    "STR",
    "Decoder",
    "DecodeError",
    "ExhaustedInputError",
    "FormatError",
    "RecordDecoder",
    "SequenceDecoder",
    "TokenCursor",
    "load",
    "open_cursor",
    "tokenize",
    "COMPANY",
    "EMPLOYEE",
    "Company",
    "Employee",
    "render",
]
