"""Shared pytest fixtures and configuration for the intcalc test suite.

Guidelines
----------
* Core tests must be pure — no side effects.
* CLI tests go through ``main()``/``cli()`` and read output via ``capsys``.
* Tests must not depend on OS state or terminal capabilities.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator

import pytest
from hypothesis import Verbosity, settings

settings.register_profile("ci", max_examples=500, deadline=None)
settings.register_profile("dev", max_examples=100, deadline=None)
settings.register_profile("debug", max_examples=10, verbosity=Verbosity.verbose)
settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "dev"))


@pytest.fixture(autouse=True)
def _reset_intcalc_logger() -> Iterator[None]:
    """Drop handlers installed by ``configure_logging`` between tests."""
    yield
    logger = logging.getLogger("intcalc")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
