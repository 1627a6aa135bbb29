"""Boundary protocols and the use-case error model."""
from __future__ import annotations

from typing import Protocol

from .entities import ListChange


# ---- Error model ----
class UseCaseError(Exception):
    """Base class for use case level errors."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


# ---- Ports ----
class ListObserver(Protocol):
    """Receives ordered deltas from an ``ObservableList``."""

    def __call__(self, change: ListChange) -> None: ...


__all__ = ["ListObserver", "UseCaseError"]
