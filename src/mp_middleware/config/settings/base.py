"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses


@dataclasses.dataclass
class Settings:
    """Base class for settings read from the environment.

    Each field maps to ``<_prefix>_<FIELD>``; with ``_prefix = "MIDDLEWARE"``
    the field ``log_steps`` is read from ``MIDDLEWARE_LOG_STEPS``.
    """

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""

    @classmethod
    def env_key(cls, field_name: str) -> str:
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")


__all__ = ["Settings"]
