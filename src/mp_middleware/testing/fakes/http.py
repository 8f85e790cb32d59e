"""Testing fakes – FakeRequest, FakeResponse."""
from __future__ import annotations

import dataclasses
from typing import Any

from mp_middleware.kernel.contracts import Response


@dataclasses.dataclass(frozen=True)
class FakeRequest:
    """Minimal request value; middleware only reads it."""

    method: str = "GET"
    path: str = "/"
    headers: dict[str, str] = dataclasses.field(default_factory=dict)
    attributes: dict[str, Any] = dataclasses.field(default_factory=dict)

    def header(self, name: str, default: str | None = None) -> str | None:
        """Case-insensitive header lookup."""
        lowered = name.lower()
        for key, value in self.headers.items():
            if key.lower() == lowered:
                return value
        return default


@dataclasses.dataclass(frozen=True)
class FakeResponse(Response):
    """Immutable response; every ``with_*`` call returns a modified copy."""

    status_code: int = 200
    headers: dict[str, str] = dataclasses.field(default_factory=dict)
    body: str = ""

    def with_status(self, status_code: int) -> FakeResponse:
        return dataclasses.replace(self, status_code=status_code)

    def with_header(self, name: str, value: str) -> FakeResponse:
        return dataclasses.replace(self, headers={**self.headers, name: value})

    def with_body(self, body: str) -> FakeResponse:
        return dataclasses.replace(self, body=body)

    def has_header(self, name: str) -> bool:
        return any(key.lower() == name.lower() for key in self.headers)


__all__ = ["FakeRequest", "FakeResponse"]
