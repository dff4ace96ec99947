from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

from .reader import TokenCursor

T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class Decoder(Protocol[T_co]):
    """
    Strategy that turns the next slice of a cursor into a value.

    Implementations hold no mutable state of their own; composed decoders
    only keep the sub-decoders they were built from. A new decodable type
    needs nothing more than a new object with `decode`. A `kind` string is
    optional and only used for messages and layout entries.
    """

    def decode(self, cursor: TokenCursor) -> T_co:
        ...


def kind_of(decoder: object) -> str:
    """Readable name of a decoder; `decode`-only objects fall back to their class name."""
    return getattr(decoder, "kind", None) or type(decoder).__name__
