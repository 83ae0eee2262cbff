"""Tests for ts.core.result module."""

import pytest

from ts.core.result import Err, Ok, Result


class TestOk:
    def test_value(self) -> None:
        assert Ok(42).value == 42

    def test_repr(self) -> None:
        assert repr(Ok("dist")) == "Ok('dist')"

    def test_equality(self) -> None:
        assert Ok(1) == Ok(1)
        assert Ok(1) != Err(1)


class TestErr:
    def test_error(self) -> None:
        assert Err("boom").error == "boom"

    def test_repr(self) -> None:
        assert repr(Err("boom")) == "Err('boom')"


class TestMatching:
    def test_pattern_matching(self) -> None:
        result: Result[int, str] = Err("missing")
        match result:
            case Ok(value):
                pytest.fail(f"unexpected Ok({value})")
            case Err(error):
                assert error == "missing"

    def test_isinstance_narrowing(self) -> None:
        result: Result[int, str] = Ok(3)
        assert isinstance(result, Ok)
        assert result.value + 1 == 4
