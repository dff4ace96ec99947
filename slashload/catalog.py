"""Lookup of decoders by name, used by the command line driver."""

from __future__ import annotations

from typing import Any, Dict

from .decoding import FLOAT, INT, STR, Decoder, SequenceDecoder
from .models import COMPANY, EMPLOYEE

SEQ_PREFIX = "seq:"

NAMED_DECODERS: Dict[str, Decoder[Any]] = {
    "int": INT,
    "str": STR,
    "float": FLOAT,
    "employee": EMPLOYEE,
    "company": COMPANY,
}


def decoder_for(name: str) -> Decoder[Any]:
    """Resolve `name`, where `seq:<name>` wraps the inner decoder in a sequence."""
    key = name.strip().casefold()
    if key.startswith(SEQ_PREFIX):
        return SequenceDecoder(decoder_for(key[len(SEQ_PREFIX) :]))
    try:
        return NAMED_DECODERS[key]
    except KeyError:
        raise KeyError(
            f"Unknown decoder {name!r} (expected one of: {sorted(NAMED_DECODERS)}, "
            f"optionally prefixed with {SEQ_PREFIX!r})"
        ) from None


def decoder_names() -> list[str]:
    return sorted(NAMED_DECODERS)
