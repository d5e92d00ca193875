"""Tests for result rendering (cli/formatting.py)."""

from __future__ import annotations

import pytest

from intcalc.cli import exit_codes
from intcalc.cli.formatting import exit_code_for, format_error, format_result, format_value
from intcalc.core.models import (
    INT64_MIN,
    UINT64_MAX,
    Err,
    ErrorKind,
    NumericKind,
    Ok,
    Operation,
)


class TestFormatValue:
    @pytest.mark.parametrize(
        ("result", "expected"),
        [
            (Ok(5), "5"),
            (Ok(-5), "-5"),
            (Ok(INT64_MIN), "-9223372036854775808"),
            (Ok(UINT64_MAX, NumericKind.UINT64), "18446744073709551615"),
        ],
    )
    def test_plain_decimal(self, result: Ok, expected: str) -> None:
        assert format_value(result) == expected


class TestFormatError:
    @pytest.mark.parametrize(
        ("op", "error", "expected"),
        [
            (Operation.DIV, ErrorKind.DIVISION_BY_ZERO, "div: division by zero"),
            (Operation.MUL, ErrorKind.OVERFLOW, "mul: overflow"),
            (Operation.FACT, ErrorKind.OVERFLOW, "fact: overflow"),
            (Operation.POW, ErrorKind.DOMAIN_ERROR, "pow: domain error"),
        ],
    )
    def test_names_operation_and_reason(
        self, op: Operation, error: ErrorKind, expected: str,
    ) -> None:
        assert format_error(op, Err(error)) == expected


class TestFormatResult:
    def test_ok(self) -> None:
        assert format_result(Operation.ADD, Ok(5)) == "5"

    def test_err(self) -> None:
        assert format_result(Operation.DIV, Err(ErrorKind.DIVISION_BY_ZERO)) == (
            "div: division by zero"
        )

    def test_rejects_non_result(self) -> None:
        with pytest.raises(TypeError):
            format_result(Operation.ADD, 5)  # type: ignore[arg-type]


class TestExitCodeFor:
    def test_ok_is_success(self) -> None:
        assert exit_code_for(Ok(0)) == exit_codes.SUCCESS

    @pytest.mark.parametrize("error", list(ErrorKind))
    def test_every_error_is_math_error(self, error: ErrorKind) -> None:
        assert exit_code_for(Err(error)) == exit_codes.MATH_ERROR
