"""Result[T, E] — Ok and Err variants for recoverable failures."""

from __future__ import annotations

import functools
from typing import Callable, Generic, NoReturn, ParamSpec, TypeVar

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E", bound=Exception)
P = ParamSpec("P")


class Ok(Generic[T]):
    """Successful result variant."""

    __slots__ = ("_value",)

    def __init__(self, value: T) -> None:
        self._value = value

    @property
    def value(self) -> T:
        return self._value

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self._value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        return self._value

    def unwrap_err(self) -> NoReturn:
        raise ValueError(f"Called unwrap_err() on {self!r}")

    def map(self, func: Callable[[T], U]) -> "Ok[U]":
        return Ok(func(self._value))

    def flat_map(self, func: "Callable[[T], Result[U, E]]") -> "Result[U, E]":
        return func(self._value)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Ok) and self._value == other._value

    def __hash__(self) -> int:
        return hash(("Ok", self._value))

    def __repr__(self) -> str:
        return f"Ok({self._value!r})"


class Err(Generic[E]):
    """Error result variant."""

    __slots__ = ("_error",)

    def __init__(self, error: E) -> None:
        self._error = error

    @property
    def error(self) -> E:
        return self._error

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise self._error

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_err(self) -> E:
        return self._error

    def map(self, func: Callable[[T], U]) -> "Err[E]":  # noqa: ARG002
        return self

    def flat_map(self, func: "Callable[[T], Result[U, E]]") -> "Err[E]":  # noqa: ARG002
        return self

    def __repr__(self) -> str:
        return f"Err({self._error!r})"


type Result[T, E] = Ok[T] | Err[E]


def capture(
    func: Callable[P, T],
    *errors: type[E],
) -> Callable[P, "Result[T, E]"]:
    """Wrap *func* so that the listed exception types come back as ``Err``.

    Exceptions not listed in *errors* propagate unchanged::

        safe_parse = capture(parse_utc, FormatError)
        safe_parse("garbage")   # Err(FormatError(...))
    """

    @functools.wraps(func)
    def _wrapped(*args: P.args, **kwargs: P.kwargs) -> "Result[T, E]":
        try:
            return Ok(func(*args, **kwargs))
        except errors as exc:
            return Err(exc)

    return _wrapped


__all__ = ["Err", "Ok", "Result", "capture"]
