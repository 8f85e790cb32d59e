"""conftest.py for benchmarks.

Provides request/response fixtures and a handler factory shared by the
dispatch benchmarks.
"""

from __future__ import annotations

from typing import Any

import pytest

from mp_middleware.testing.fakes import FakeRequest, FakeResponse


@pytest.fixture(scope="session")
def fake_request() -> FakeRequest:
    return FakeRequest(path="/bench")


@pytest.fixture(scope="session")
def fake_response() -> FakeResponse:
    return FakeResponse()


@pytest.fixture(scope="session")
def passthrough():
    """Handler that forwards to the next entry untouched."""

    def handler(request: Any, response: Any, next_: Any) -> Any:
        return next_(request, response)

    return handler
