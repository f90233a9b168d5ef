"""Unit tests for the Result type."""

from __future__ import annotations

import pytest

from civiltime.kernel.errors import FormatError
from civiltime.kernel.types import Err, Ok, capture


class TestResultMonad:
    def test_ok_unwrap(self) -> None:
        assert Ok(42).unwrap() == 42

    def test_ok_is_ok(self) -> None:
        assert Ok(1).is_ok()
        assert not Ok(1).is_err()

    def test_err_unwrap_raises(self) -> None:
        with pytest.raises(ValueError, match="boom"):
            Err(ValueError("boom")).unwrap()

    def test_err_unwrap_or(self) -> None:
        assert Err(ValueError()).unwrap_or(99) == 99

    def test_ok_unwrap_or_ignores_default(self) -> None:
        assert Ok(1).unwrap_or(99) == 1

    def test_unwrap_err(self) -> None:
        error = ValueError("x")
        assert Err(error).unwrap_err() is error
        with pytest.raises(ValueError):
            Ok(1).unwrap_err()

    def test_ok_map(self) -> None:
        assert Ok(2).map(lambda x: x * 3).unwrap() == 6

    def test_err_map_is_noop(self) -> None:
        err = Err(ValueError())
        assert err.map(lambda x: x * 3) is err

    def test_ok_flat_map_can_return_err(self) -> None:
        result = Ok(0).flat_map(lambda x: Err(ValueError("zero")) if x == 0 else Ok(x))
        assert result.is_err()

    def test_ok_equality(self) -> None:
        assert Ok(1) == Ok(1)
        assert Ok(1) != Ok(2)

    def test_repr(self) -> None:
        assert repr(Ok(1)) == "Ok(1)"


class TestCapture:
    def test_success_wrapped_in_ok(self) -> None:
        safe = capture(int, ValueError)
        assert safe("3") == Ok(3)

    def test_listed_error_wrapped_in_err(self) -> None:
        def fail(text: str) -> str:
            raise FormatError("bad", text=text)

        result = capture(fail, FormatError)("x")
        assert result.is_err()
        assert isinstance(result.unwrap_err(), FormatError)

    def test_unlisted_error_propagates(self) -> None:
        def fail() -> None:
            raise KeyError("nope")

        with pytest.raises(KeyError):
            capture(fail, FormatError)()

    def test_keeps_name(self) -> None:
        def parse() -> None:
            """Doc."""

        wrapped = capture(parse)
        assert wrapped.__name__ == "parse"
        assert wrapped.__doc__ == "Doc."
