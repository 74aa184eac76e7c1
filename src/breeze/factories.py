"""Free functions for building failables.

Handy where the constructor's class would otherwise have to be spelled out.
The success type of a failure cannot be inferred from its argument, so
annotate the receiving variable::

    missing: Failable[bytes, OSError] = failure(FileNotFoundError(path))
"""

from __future__ import annotations

from typing import TypeVar

from .result import Failable
from .text import TextFailable

S = TypeVar("S")
F = TypeVar("F")


def success(value: S) -> Failable[S, F]:
    return Failable.of_success(value)


def failure(value: F) -> Failable[S, F]:
    return Failable.of_failure(value)


def text_success(value: S) -> TextFailable[S]:
    return TextFailable.of_success(value)  # type: ignore[return-value]


def text_failure(message: str) -> TextFailable[S]:
    return TextFailable.of_failure(message)


__all__ = ["failure", "success", "text_failure", "text_success"]
