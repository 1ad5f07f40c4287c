"""Exception hierarchy for libdtf."""
from __future__ import annotations

from typing import Any


class LibdtfError(RuntimeError):
    """Base exception that carries structured context."""

    def __init__(self, message: str, *, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.context = context or {}


class ContractViolationError(LibdtfError):
    """Raised when a document tree contains a node outside the value model."""


class DocumentLoadError(LibdtfError):
    """Raised when a source document cannot be read or parsed."""


class ConfigError(LibdtfError):
    """Raised when configuration validation fails."""


__all__ = [
    "LibdtfError",
    "ContractViolationError",
    "DocumentLoadError",
    "ConfigError",
]
