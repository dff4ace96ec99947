from __future__ import annotations

from typing import Any


def render(value: Any) -> str:
    """Format decoded values for the console: `[a, b]`, `(name=x, age=1)`."""
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(render(item) for item in value) + "]"
    return str(value)
