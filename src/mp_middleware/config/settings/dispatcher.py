"""Config settings – DispatcherSettings."""
from __future__ import annotations

import dataclasses
import logging

from mp_middleware.config.settings.base import Settings
from mp_middleware.config.validation import InvalidSettingValueError

_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclasses.dataclass
class DispatcherSettings(Settings):
    """Runtime switches for :class:`~mp_middleware.application.pipeline.Dispatcher`.

    Loaded from ``MIDDLEWARE_*`` environment variables::

        settings = EnvSettingsLoader().load(DispatcherSettings)
    """

    _prefix: dataclasses.ClassVar[str] = "MIDDLEWARE"

    log_steps: bool = False
    warn_on_reentry: bool = True
    log_level: str = "INFO"

    def _validate(self) -> None:
        self.log_level = self.log_level.upper()
        if self.log_level not in _LEVELS:
            raise InvalidSettingValueError(
                "log_level", self.log_level, "unknown log level", choices=_LEVELS
            )

    @property
    def level(self) -> int:
        return logging.getLevelNamesMapping()[self.log_level]


__all__ = ["DispatcherSettings"]
