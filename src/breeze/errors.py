from __future__ import annotations

from typing import Any


class BreezeError(Exception):
    """Base exception for all breeze errors."""


class PreconditionViolation(BreezeError, RuntimeError):
    """An accessor was called for the variant that is not active."""

    def __init__(self, message: str, *, accessor: str) -> None:
        super().__init__(message)
        self.accessor = accessor


class AmbiguousFailableError(BreezeError, TypeError):
    def __init__(self, success_type: Any) -> None:
        name: str = getattr(success_type, "__name__", None) or repr(success_type)
        super().__init__(
            f"cannot tell success from failure when the success type is "
            f"{name!r}; use of_success() or of_failure()"
        )
        self.success_type = success_type
