"""Config validation errors."""
from __future__ import annotations

from collections.abc import Sequence

from mp_middleware.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Settings could not be loaded or failed validation."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A field without default has no environment variable."""
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(
            f"Required setting '{setting_name}' is missing",
            detail={"setting": setting_name},
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting is present but not one of the accepted values."""
    default_code = "invalid_setting_value"

    def __init__(
        self,
        setting_name: str,
        value: object,
        reason: str,
        *,
        choices: Sequence[str] = (),
    ) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}",
            detail={"setting": setting_name, "value": value, "choices": list(choices)},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason
        self.choices = tuple(choices)


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
