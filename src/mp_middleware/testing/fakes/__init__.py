"""Testing fakes – in-memory doubles for pipeline values."""
from mp_middleware.testing.fakes.http import FakeRequest, FakeResponse

__all__ = ["FakeRequest", "FakeResponse"]
