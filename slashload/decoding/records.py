from __future__ import annotations

from typing import Any, Callable, Dict, Generic, Optional, Tuple, TypeVar

from .base import Decoder, kind_of
from .reader import TokenCursor

T = TypeVar("T")


class RecordDecoder(Generic[T]):
    """
    Positional record: fields are decoded in declaration order and passed to
    `factory` as keyword arguments.

    e.g. `RecordDecoder(Employee, name=STR, age=INT)`.

    The first failing field aborts the whole record; no partial value is built.
    """

    def __init__(
        self,
        factory: Callable[..., T],
        kind: Optional[str] = None,
        /,
        **fields: Decoder[Any],
    ) -> None:
        if not fields:
            raise ValueError("A record needs at least one field")
        self.factory = factory
        self.fields: Tuple[Tuple[str, Decoder[Any]], ...] = tuple(fields.items())
        self.kind = kind or getattr(factory, "__name__", "record")

    def decode(self, cursor: TokenCursor) -> T:
        values: Dict[str, Any] = {}
        for key, field_decoder in self.fields:
            start = cursor.tokens_consumed()
            values[key] = field_decoder.decode(cursor)
            if cursor.record_layout:
                cursor.record_field(
                    f"{self.kind}.{key}",
                    kind_of(field_decoder),
                    offset=start,
                    length_tokens=cursor.tokens_consumed() - start,
                )
        return self.factory(**values)

    def __repr__(self) -> str:
        inner = ", ".join(f"{key}={kind_of(dec)}" for key, dec in self.fields)
        return f"RecordDecoder({self.kind}: {inner})"
