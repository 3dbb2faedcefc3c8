"""Logger contract consumed by the Service Layer.

A ``structlog`` bound logger already satisfies ``ILogger``; use-cases
receive one through their constructor so tests can substitute a double.
"""

from __future__ import annotations

from typing import Any, Protocol

import structlog


class ILogger(Protocol):
    def debug(self, event: str, **fields: Any) -> Any: ...

    def info(self, event: str, **fields: Any) -> Any: ...

    def warning(self, event: str, **fields: Any) -> Any: ...

    def error(self, event: str, **fields: Any) -> Any: ...


def get_logger(name: str) -> ILogger:
    """Return the structlog logger used in production wiring."""
    return structlog.get_logger(name)
