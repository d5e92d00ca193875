"""Core / service layer — pure arithmetic and request evaluation.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli``.
* The arithmetic engine (``mathlib``) does not log.
"""

from intcalc.core.evaluator import CalculatorService
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
    Result,
)

__all__: list[str] = [
    "INT64_MAX",
    "INT64_MIN",
    "UINT64_MAX",
    "CalcRequest",
    "CalculatorService",
    "Err",
    "ErrorKind",
    "NumericKind",
    "Ok",
    "Operation",
    "Result",
]
