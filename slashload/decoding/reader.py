from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Sequence

from .errors import ExhaustedInputError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LayoutEntry:
    key: str
    kind: str
    meta: Dict[str, object]


@dataclass(eq=False)
class TokenCursor:
    """
    Sequential, exactly-once reader over a flat list of string tokens.

    The position only ever moves forward. Decoders share one cursor for the
    whole traversal, so it must be passed along, never copied.
    """

    tokens: Sequence[str]
    trace: bool = False
    record_layout: bool = False
    _idx: int = field(default=0, init=False)
    _layout: List[LayoutEntry] = field(default_factory=list, init=False)

    def next(self) -> str:
        if self._idx >= len(self.tokens):
            raise ExhaustedInputError(self._idx)
        token = self.tokens[self._idx]
        if self.trace:
            logger.debug("token #%d: %r", self._idx, token)
        self._idx += 1
        return token

    def tokens_consumed(self) -> int:
        return self._idx

    def remaining(self) -> int:
        return len(self.tokens) - self._idx

    def record_field(self, key: str, kind: str, **meta) -> None:
        if not self.record_layout:
            return
        self._layout.append(LayoutEntry(key=key, kind=kind, meta=dict(meta)))

    def snapshot_layout(self) -> tuple[LayoutEntry, ...]:
        return tuple(self._layout)
