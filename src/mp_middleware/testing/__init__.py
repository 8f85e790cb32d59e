"""Testing support – in-memory request/response doubles."""

from mp_middleware.testing.fakes import FakeRequest, FakeResponse

__all__ = ["FakeRequest", "FakeResponse"]
