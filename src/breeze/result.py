"""The two-variant container for operations that can predictably fail.

A :class:`Failable` holds either a success payload or a failure payload. Use
it for failures the caller cannot rule out up front (a missing file, a locked
record); use exceptions for broken preconditions. Chain follow-up work with
:meth:`Failable.bind`, :meth:`Failable.map` or :meth:`Failable.if_success`;
a failure short-circuits the chain and travels to the caller unchanged.

There is intentionally no bind or map on the failure side. To enrich a
failure, branch on :meth:`Failable.is_success` and build a new failure::

    user = load_user(42)
    if not user.is_success():
        return Failable.of_failure(f"login: {user.get_failure()}")
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, TypeVar, overload

from .errors import PreconditionViolation

log = logging.getLogger(__name__)

S = TypeVar("S")
F = TypeVar("F")
S2 = TypeVar("S2")


class Tag(Enum):
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class Failable(Generic[S, F]):
    """Either a success payload of type ``S`` or a failure payload of type ``F``.

    Build instances with :meth:`of_success` / :meth:`of_failure` or the
    helpers in :mod:`breeze.factories`, never with the initializer.
    """

    _tag: Tag
    _payload: Any

    @classmethod
    def of_success(cls, value: S) -> "Failable[S, F]":
        return cls(Tag.SUCCESS, value)

    @classmethod
    def of_failure(cls, value: F) -> "Failable[S, F]":
        return cls(Tag.FAILURE, value)

    @property
    def tag(self) -> Tag:
        return self._tag

    def is_success(self) -> bool:
        return self._tag is Tag.SUCCESS

    def is_failure(self) -> bool:
        return self._tag is Tag.FAILURE

    def get_success(self) -> S:
        if self._tag is not Tag.SUCCESS:
            log.debug("get_success() called on %r", self)
            raise PreconditionViolation(
                "precondition violated: called success accessor on a failure",
                accessor="get_success",
            )
        return self._payload

    def get_failure(self) -> F:
        if self._tag is not Tag.FAILURE:
            log.debug("get_failure() called on %r", self)
            raise PreconditionViolation(
                "precondition violated: called failure accessor on a success",
                accessor="get_failure",
            )
        return self._payload

    def bind(self, transform: Callable[[S], "Failable[S2, F]"]) -> "Failable[S2, F]":
        """Monadic bind: feed the success payload to ``transform`` and return its result.

        On a failure ``transform`` is not called and a new failure with the
        same payload is returned.
        """
        if self._tag is Tag.FAILURE:
            return self._propagate()
        result: object = transform(self._payload)
        if not isinstance(result, Failable):
            raise TypeError(
                f"bind() transform must return a Failable, got {type(result).__name__}"
            )
        return self._flatten(result)

    def map(self, transform: Callable[[S], S2]) -> "Failable[S2, F]":
        if self._tag is Tag.FAILURE:
            return self._propagate()
        return type(self)(Tag.SUCCESS, transform(self._payload))

    @overload
    def if_success(self, transform: Callable[[S], "Failable[S2, F]"]) -> "Failable[S2, F]": ...

    @overload
    def if_success(self, transform: Callable[[S], S2]) -> "Failable[S2, F]": ...

    def if_success(self, transform: Callable[[S], Any]) -> "Failable[Any, F]":
        """Bind or map, depending on what ``transform`` returns.

        A returned ``Failable`` is passed through as-is, any other value is
        wrapped as a success. When the success payload is meant to be a
        ``Failable`` itself, call :meth:`map` instead.
        """
        if self._tag is Tag.FAILURE:
            return self._propagate()
        result: object = transform(self._payload)
        if isinstance(result, Failable):
            return self._flatten(result)
        return type(self)(Tag.SUCCESS, result)

    def _propagate(self) -> "Failable[Any, F]":
        return type(self)(Tag.FAILURE, self._payload)

    def _flatten(self, result: "Failable[S2, F]") -> "Failable[S2, F]":
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Failable):
            return NotImplemented
        if self._tag is not other._tag:
            return False
        return bool(self._payload == other._payload)

    def __hash__(self) -> int:
        return hash(self._payload)

    def __repr__(self) -> str:
        return f"{type(self).__name__}.{self._tag.value}({self._payload!r})"


__all__ = ["Failable", "Tag"]
