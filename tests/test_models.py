"""Tests for domain models (core/models.py).

Results and requests are frozen dataclasses — these tests verify
immutability, the tagged-union contract, and operation metadata.
"""

from __future__ import annotations

import pytest

from intcalc.core.models import (
    INT64_MAX,
    INT64_MIN,
    UINT64_MAX,
    CalcRequest,
    Err,
    ErrorKind,
    NumericKind,
    Ok,
    Operation,
)


# ---------------------------------------------------------------------------
# Bounds
# ---------------------------------------------------------------------------

class TestBounds:
    def test_int64_bounds(self) -> None:
        assert INT64_MIN == -9_223_372_036_854_775_808
        assert INT64_MAX == 9_223_372_036_854_775_807

    def test_uint64_max(self) -> None:
        assert UINT64_MAX == 18_446_744_073_709_551_615

    @pytest.mark.parametrize(
        ("kind", "value", "expected"),
        [
            (NumericKind.INT64, INT64_MIN, True),
            (NumericKind.INT64, INT64_MAX, True),
            (NumericKind.INT64, INT64_MAX + 1, False),
            (NumericKind.INT64, INT64_MIN - 1, False),
            (NumericKind.UINT64, 0, True),
            (NumericKind.UINT64, UINT64_MAX, True),
            (NumericKind.UINT64, -1, False),
            (NumericKind.UINT64, UINT64_MAX + 1, False),
        ],
    )
    def test_contains(self, kind: NumericKind, value: int, expected: bool) -> None:
        assert kind.contains(value) is expected


# ---------------------------------------------------------------------------
# Operation
# ---------------------------------------------------------------------------

class TestOperation:
    @pytest.mark.parametrize(
        "op",
        [Operation.ADD, Operation.SUB, Operation.MUL, Operation.DIV, Operation.POW],
    )
    def test_binary_operations_need_b(self, op: Operation) -> None:
        assert op.needs_b

    def test_fact_is_unary(self) -> None:
        assert not Operation.FACT.needs_b

    def test_none_is_not_selectable(self) -> None:
        assert Operation.NONE not in Operation.selectable()

    def test_selectable_order_matches_help(self) -> None:
        names = [op.value for op in Operation.selectable()]
        assert names == ["add", "sub", "mul", "div", "pow", "fact"]


# ---------------------------------------------------------------------------
# Ok / Err
# ---------------------------------------------------------------------------

class TestOk:
    def test_defaults_to_int64(self) -> None:
        assert Ok(5).kind is NumericKind.INT64

    def test_is_ok(self) -> None:
        assert Ok(5).is_ok is True

    def test_frozen(self) -> None:
        r = Ok(5)
        with pytest.raises(AttributeError):
            r.value = 6  # type: ignore[misc]

    def test_equality_includes_kind(self) -> None:
        assert Ok(5) == Ok(5, NumericKind.INT64)
        assert Ok(5) != Ok(5, NumericKind.UINT64)

    def test_rejects_unrepresentable_value(self) -> None:
        with pytest.raises(ValueError, match="not representable"):
            Ok(INT64_MAX + 1)

    def test_uint64_accepts_values_above_int64(self) -> None:
        r = Ok(INT64_MAX + 1, NumericKind.UINT64)
        assert r.value == 2**63

    def test_pattern_matching(self) -> None:
        match Ok(7):
            case Ok(value, kind):
                assert value == 7
                assert kind is NumericKind.INT64
            case _:
                pytest.fail("Ok did not match")


class TestErr:
    def test_is_not_ok(self) -> None:
        assert Err(ErrorKind.OVERFLOW).is_ok is False

    def test_carries_no_value(self) -> None:
        assert not hasattr(Err(ErrorKind.OVERFLOW), "value")

    def test_frozen(self) -> None:
        e = Err(ErrorKind.OVERFLOW)
        with pytest.raises(AttributeError):
            e.error = ErrorKind.DIVISION_BY_ZERO  # type: ignore[misc]

    def test_error_text(self) -> None:
        assert ErrorKind.DIVISION_BY_ZERO.value == "division by zero"
        assert ErrorKind.OVERFLOW.value == "overflow"
        assert ErrorKind.DOMAIN_ERROR.value == "domain error"


# ---------------------------------------------------------------------------
# CalcRequest
# ---------------------------------------------------------------------------

class TestCalcRequest:
    def test_b_defaults_to_none(self) -> None:
        req = CalcRequest(operation=Operation.FACT, a=5)
        assert req.b is None

    def test_frozen(self) -> None:
        req = CalcRequest(operation=Operation.ADD, a=1, b=2)
        with pytest.raises(AttributeError):
            req.a = 3  # type: ignore[misc]
