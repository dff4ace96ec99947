from __future__ import annotations

from typing import Generic, List, TypeVar

from .base import Decoder, kind_of
from .errors import FormatError
from .primitives import parse_int
from .reader import TokenCursor

T = TypeVar("T")


class SequenceDecoder(Generic[T]):
    """
    Count-prefixed homogeneous list: `<n> <elem> ... <elem>`.

    A negative count is rejected right after the count token, before any
    element is read.
    """

    def __init__(self, element: Decoder[T]) -> None:
        self.element = element

    @property
    def kind(self) -> str:
        return f"seq[{kind_of(self.element)}]"

    def decode(self, cursor: TokenCursor) -> List[T]:
        index = cursor.tokens_consumed()
        token = cursor.next()
        count = parse_int(token, index=index)
        if count < 0:
            raise FormatError(token, "sequence count", index=index, reason="negative length")
        return [self.element.decode(cursor) for _ in range(count)]

    def __repr__(self) -> str:
        return f"SequenceDecoder({self.element!r})"
