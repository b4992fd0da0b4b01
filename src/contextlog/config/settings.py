"""Config settings – process-level defaults read from ``LOG_*`` variables."""
from __future__ import annotations

import dataclasses
import os
from typing import Any, ClassVar, Mapping

from contextlog.errors import ConfigError


class EnvSettingsLoader:
    """Fill a settings dataclass from ``<PREFIX>_<FIELD>`` variables.

    Values are taken as strings. Unset variables keep the field default.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def load(self, settings_class: Any) -> Any:
        environ = os.environ if self._environ is None else self._environ
        values: dict[str, str] = {}
        for field in dataclasses.fields(settings_class):
            key = f"{settings_class.prefix}_{field.name}".upper()
            if key in environ:
                values[field.name] = environ[key]
        return settings_class(**values)


@dataclasses.dataclass(frozen=True)
class LoggingSettings:
    """``LOG_ENV``, ``LOG_NAME`` and ``LOG_SLACK_API_TOKEN``.

    ``env`` picks the entry of :data:`~contextlog.config.DEFAULT_ENV_CONFIGS`
    (or of the user's ``environments``) a logger resolves when no environment
    is passed explicitly.
    """

    prefix: ClassVar[str] = "LOG"

    env: str = "local"
    name: str = "unknown-api"
    slack_api_token: str | None = None

    def __post_init__(self) -> None:
        if not self.env:
            raise ConfigError(f"{self.prefix}_ENV must not be empty")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "LoggingSettings":
        return EnvSettingsLoader(environ).load(cls)


__all__ = ["EnvSettingsLoader", "LoggingSettings"]
