"""Excuse engine error hierarchy."""

from __future__ import annotations

from typing import Any


class ExcuseEngineError(Exception):
    """Base exception for excuse engine errors."""

    code = "EXCUSE_ENGINE_ERROR"

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details
        super().__init__(message)


class InvalidInputError(ExcuseEngineError, ValueError):
    """A value is outside its allowed enumeration or range."""

    code = "EXCUSE_ENGINE_INVALID_INPUT"


def require_choice(value: Any, allowed: tuple[str, ...] | frozenset[str], name: str) -> str:
    """Return ``value`` as a stripped string or raise if it is not allowed."""

    normalized = str(value).strip() if value is not None else ""
    if normalized not in allowed:
        raise InvalidInputError(
            f"Invalid {name} '{normalized}'",
            details={"field": name, "allowed": sorted(allowed)},
        )
    return normalized
