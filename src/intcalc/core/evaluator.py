"""Core calculator service — domain checks and engine dispatch.

This is the central service class consumed by the CLI layer.  It takes
a validated :class:`~intcalc.core.models.CalcRequest`, rejects operands
outside an operation's mathematical domain, and hands the rest to the
checked arithmetic engine in :mod:`intcalc.core.mathlib`.

Guarantees
----------
* Pure orchestration — no I/O, no ``print()``, no filesystem access.
* Division by zero and overflow come back as :class:`Err` results.
* Only :class:`~intcalc.exceptions.IntCalcError` subclasses escape.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from types import MappingProxyType

from intcalc.core import mathlib
from intcalc.core.models import CalcRequest, Operation, Result
from intcalc.exceptions import DomainError, UsageError

logger = logging.getLogger(__name__)

BinaryOp = Callable[[int, int], Result]

_BINARY_DISPATCH: Mapping[Operation, BinaryOp] = MappingProxyType(
    {
        Operation.ADD: mathlib.add,
        Operation.SUB: mathlib.sub,
        Operation.MUL: mathlib.mul,
        Operation.DIV: mathlib.div,
        Operation.POW: mathlib.pow,
    }
)


class CalculatorService:
    """Stateless service that evaluates one request at a time.

    Instances hold no state; a single module-level instance may be
    shared freely between threads.
    """

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def evaluate(self, request: CalcRequest) -> Result:
        """Evaluate *request* and return the engine's tagged result.

        Raises
        ------
        DomainError
            If ``pow`` receives a negative exponent or ``fact`` a
            negative argument.
        UsageError
            If the request carries no operation, or the operand count
            does not match the operation.
        """
        self._check_arity(request)
        self._check_domain(request)

        logger.debug(
            "dispatching %s a=%d b=%s",
            request.operation.value,
            request.a,
            request.b,
        )

        if request.b is None:
            result = mathlib.fact(request.a)
        else:
            result = _BINARY_DISPATCH[request.operation](request.a, request.b)

        logger.debug("%s -> %r", request.operation.value, result)
        return result

    # ------------------------------------------------------------------
    # Request validation
    # ------------------------------------------------------------------

    @staticmethod
    def _check_arity(request: CalcRequest) -> None:
        """Raise :class:`UsageError` for malformed requests."""
        op = request.operation
        if op is Operation.NONE:
            raise UsageError("unknown operation")
        if op.needs_b and request.b is None:
            raise UsageError(f"{op.value}: missing second operand")
        if not op.needs_b and request.b is not None:
            raise UsageError(f"{op.value}: takes a single operand")

    @staticmethod
    def _check_domain(request: CalcRequest) -> None:
        """Raise :class:`DomainError` for operands the engine must not see."""
        if request.operation is Operation.POW and request.b is not None and request.b < 0:
            raise DomainError("pow: domain error (b must be >= 0)")
        if request.operation is Operation.FACT and request.a < 0:
            raise DomainError("fact: domain error (a must be >= 0)")
