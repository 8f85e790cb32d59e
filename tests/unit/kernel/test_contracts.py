"""Unit tests for the Response capability tag."""

from __future__ import annotations

from mp_middleware.kernel.contracts import Response, is_response
from mp_middleware.testing.fakes import FakeResponse


class TestIsResponse:
    def test_subclass_is_response(self) -> None:
        assert is_response(FakeResponse())

    def test_none_is_never_a_response(self) -> None:
        assert not is_response(None)
        assert not is_response(None, object)

    def test_plain_values_rejected(self) -> None:
        assert not is_response({"status": 200})
        assert not is_response("200")

    def test_registered_class_accepted(self) -> None:
        class ForeignResponse:
            pass

        Response.register(ForeignResponse)
        assert is_response(ForeignResponse())

    def test_custom_response_type(self) -> None:
        assert is_response({"status": 200}, dict)
        assert is_response([], (dict, list))
        assert not is_response(FakeResponse(), dict)
