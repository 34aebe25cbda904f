"""Exception hierarchy for resultkit."""

from __future__ import annotations

from typing import Any


class ResultKitError(Exception):
    """Base exception for all resultkit errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class UnwrapError(ResultKitError):
    """A payload was forced out of the wrong variant.

    Raised only by the unsafe accessors (``unwrap``, ``expect``,
    ``unwrap_err``, ``expect_err``). ``cause`` holds the payload of the
    variant that was actually present, which may be any value; when it is an
    exception the accessor also chains it as ``__cause__``.
    """

    def __init__(
        self,
        message: str,
        *,
        cause: Any = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.cause = cause


class ConfigurationError(ResultKitError):
    """Configuration validation or resolution failed."""
