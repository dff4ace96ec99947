from __future__ import annotations

import logging
from typing import List, Optional, TypeVar, Union

from .config import load_config
from .decoding import Decoder, TokenCursor
from .decoding.base import kind_of

logger = logging.getLogger(__name__)

T = TypeVar("T")


def tokenize(source: str, delimiter: Optional[str] = None) -> List[str]:
    """Split `source` on the delimiter. An empty source is one empty token."""
    if delimiter is None:
        delimiter = load_config().delimiter
    if not delimiter:
        raise ValueError("Delimiter must not be empty")
    return source.split(delimiter)


def open_cursor(
    source: str,
    *,
    delimiter: Optional[str] = None,
    trace: Optional[bool] = None,
    record_layout: Optional[bool] = None,
) -> TokenCursor:
    config = load_config()
    return TokenCursor(
        tokenize(source, delimiter if delimiter is not None else config.delimiter),
        trace=config.trace if trace is None else trace,
        record_layout=config.record_layout if record_layout is None else record_layout,
    )


def load(source: Union[str, TokenCursor], decoder: Decoder[T], **options) -> T:
    """
    Decode one value with `decoder`.

    A string is split into a fresh cursor first; an existing cursor is
    decoded in place and left just after the value. Tokens left over after
    the value are ignored.
    """
    if isinstance(source, str):
        cursor = open_cursor(source, **options)
    elif options:
        raise TypeError("Cursor options only apply when decoding from a string")
    else:
        cursor = source
    logger.debug(
        "decoding %s from %d remaining tokens", kind_of(decoder), cursor.remaining()
    )
    return decoder.decode(cursor)
