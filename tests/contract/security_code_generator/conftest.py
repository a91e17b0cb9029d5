"""Fixtures for security code generator contract tests."""

from collections.abc import Iterable

import pytest

from storefront.adapters.security import (
    RandomSecurityCodeGenerator,
    SequentialSecurityCodeGenerator,
)
from storefront.interfaces.security import SecurityCodeGenerator


@pytest.fixture(params=["random", "sequential"])
def code_generator(request: pytest.FixtureRequest) -> Iterable[SecurityCodeGenerator]:
    """Return a fresh SecurityCodeGenerator for the requested backend.

    Supported params:
      - `"random"` → RandomSecurityCodeGenerator
      - `"sequential"` → SequentialSecurityCodeGenerator
    """
    match request.param:
        case "random":
            yield RandomSecurityCodeGenerator()
        case "sequential":
            yield SequentialSecurityCodeGenerator()
        case _:
            raise ValueError(f"unknown code generator type: {request.param}")
