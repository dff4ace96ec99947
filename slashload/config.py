from __future__ import annotations

from dataclasses import dataclass
import os

DEFAULT_DELIMITER = "/"


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    normalized = raw.strip().casefold()
    return normalized not in {"0", "false", "off", ""}


@dataclass(frozen=True)
class LoaderConfig:
    delimiter: str = DEFAULT_DELIMITER
    trace: bool = False
    record_layout: bool = False


def load_config() -> LoaderConfig:
    return LoaderConfig(
        delimiter=os.getenv("SLASHLOAD_DELIMITER") or DEFAULT_DELIMITER,
        trace=_env_flag("SLASHLOAD_TRACE", default=False),
        record_layout=_env_flag("SLASHLOAD_RECORD_LAYOUT", default=False),
    )


__all__ = ["DEFAULT_DELIMITER", "LoaderConfig", "load_config"]
