from __future__ import annotations

import functools
import types
from typing import Any, Callable, ParamSpec, TypeVar, Union, get_args, get_origin, overload

from .errors import AmbiguousFailableError
from .result import Failable, Tag

S = TypeVar("S")
S2 = TypeVar("S2")
P = ParamSpec("P")


class TextFailable(Failable[S, str]):
    """A :class:`Failable` whose failure payload is always a message string.

    Chains started from a ``TextFailable`` stay ``TextFailable`` so the
    failure type never has to be restated.
    """

    __slots__ = ()

    @classmethod
    def of_failure(cls, value: str) -> "TextFailable[S]":
        if not isinstance(value, str):
            raise TypeError(f"failure message must be a str, got {type(value).__name__}")
        return cls(Tag.FAILURE, value)

    @classmethod
    def adopt(cls, result: Failable[S, str]) -> "TextFailable[S]":
        """Re-tag a plain ``Failable[S, str]`` as a ``TextFailable``."""
        if isinstance(result, TextFailable):
            return result
        if result.is_success():
            return cls(Tag.SUCCESS, result.get_success())
        return cls.of_failure(result.get_failure())

    @classmethod
    def coerce(cls, value: "S | str | Failable[S, str]", success_type: type[S]) -> "TextFailable[S]":
        """Pick the variant from the runtime type of ``value``.

        A ``Failable`` is adopted, a ``str`` becomes a failure and an
        instance of ``success_type`` becomes a success.

        Raises:
            AmbiguousFailableError: if a ``str`` could also be a success.
            TypeError: if ``value`` fits none of the above.
        """
        classes: tuple[type, ...] = _runtime_classes(success_type)
        if isinstance(value, Failable):
            return cls.adopt(value)
        if isinstance(value, str):
            return cls(Tag.FAILURE, value)
        if isinstance(value, classes):
            return cls(Tag.SUCCESS, value)
        raise TypeError(
            f"expected {_type_name(success_type)}, str or Failable, got {type(value).__name__}"
        )

    def bind(self, transform: Callable[[S], Failable[S2, str]]) -> "TextFailable[S2]":
        return super().bind(transform)  # type: ignore[return-value]

    def map(self, transform: Callable[[S], S2]) -> "TextFailable[S2]":
        return super().map(transform)  # type: ignore[return-value]

    @overload
    def if_success(self, transform: Callable[[S], Failable[S2, str]]) -> "TextFailable[S2]": ...

    @overload
    def if_success(self, transform: Callable[[S], S2]) -> "TextFailable[S2]": ...

    def if_success(self, transform: Callable[[S], Any]) -> "TextFailable[Any]":
        return super().if_success(transform)  # type: ignore[return-value]

    def _flatten(self, result: Failable[S2, str]) -> "TextFailable[S2]":
        return TextFailable.adopt(result)


def _runtime_classes(success_type: Any) -> tuple[type, ...]:
    classes: tuple[type, ...] = _classes_of(success_type)
    # a bare str must not fit both variants
    if any(issubclass(cls, str) or issubclass(str, cls) for cls in classes):
        raise AmbiguousFailableError(success_type)
    return classes


def _classes_of(tp: Any) -> tuple[type, ...]:
    # list[int] checks as list, int | None as (int, NoneType)
    origin = get_origin(tp)
    if origin is Union or origin is types.UnionType:
        return tuple(cls for arg in get_args(tp) for cls in _classes_of(arg))
    if tp is None:
        return (type(None),)
    cls = origin if isinstance(origin, type) else tp
    if not isinstance(cls, type):
        raise TypeError(f"cannot check values against {tp!r}")
    return (cls,)


def _type_name(success_type: Any) -> str:
    return getattr(success_type, "__name__", None) or repr(success_type)


def text_failable(
    success_type: type[S],
) -> Callable[[Callable[P, "S | str | Failable[S, str]"]], Callable[P, TextFailable[S]]]:
    """Let a function return a bare payload for success or a bare message for failure.

    ::

        @text_failable(User)
        def find_user(name: str) -> User | str:
            if name not in users:
                return f"no such user: {name}"
            return users[name]

    The success type is checked once, when the decorator is applied.
    """
    _runtime_classes(success_type)

    def decorate(func: Callable[P, "S | str | Failable[S, str]"]) -> Callable[P, TextFailable[S]]:
        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> TextFailable[S]:
            return TextFailable.coerce(func(*args, **kwargs), success_type)

        return wrapper

    return decorate


__all__ = ["TextFailable", "text_failable"]
