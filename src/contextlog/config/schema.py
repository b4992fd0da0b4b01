"""Config schema – environment-keyed stream and notification configuration.

One configuration shape is supported::

    LogConfig(
        name="orders-api",
        slack_api_token="xoxb-...",
        environments={
            "production": EnvironmentConfig(
                streams=[StreamConfig(level="info")],
                slack=SlackConfig(level="error", default_channel="#orders-alerts"),
            ),
        },
    )

Environments missing from ``environments`` fall back to
:data:`DEFAULT_ENV_CONFIGS`.
"""
from __future__ import annotations

import dataclasses
from typing import Any, Mapping

from contextlog.errors import ConfigError, MissingStreamPathError, UnknownEnvironmentError, UnknownStreamTypeError
from contextlog.levels import LogLevel

STREAM_TYPES: frozenset[str] = frozenset({"stdout", "file"})


@dataclasses.dataclass(frozen=True)
class StreamConfig:
    """One primary output destination."""

    level: LogLevel | str = LogLevel.INFO
    type: str = "stdout"
    path: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "level", LogLevel.parse(self.level))

    def validate(self) -> None:
        if self.type not in STREAM_TYPES:
            raise UnknownStreamTypeError(self.type)
        if self.type == "file" and not self.path:
            raise MissingStreamPathError()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "StreamConfig":
        return cls(
            level=data.get("level", LogLevel.INFO),
            type=data.get("type", "stdout"),
            path=data.get("path"),
        )


@dataclasses.dataclass(frozen=True)
class SlackConfig:
    """Level gate and default channel for chat notifications."""

    level: LogLevel | str = LogLevel.WARN
    default_channel: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "level", LogLevel.parse(self.level))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SlackConfig":
        return cls(
            level=data.get("level", LogLevel.WARN),
            default_channel=_pick(data, "default_channel", "defaultChannel"),
        )


@dataclasses.dataclass(frozen=True)
class EnvironmentConfig:
    """Streams and optional notification settings for one environment."""

    streams: tuple[StreamConfig, ...] = ()
    slack: SlackConfig | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "streams", tuple(self.streams))

    def validate(self) -> None:
        for stream in self.streams:
            stream.validate()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "EnvironmentConfig":
        slack = data.get("slack")
        return cls(
            streams=tuple(StreamConfig.from_dict(s) for s in data.get("streams") or ()),
            slack=SlackConfig.from_dict(slack) if slack is not None else None,
        )


@dataclasses.dataclass(frozen=True)
class LogConfig:
    """Top-level logger configuration."""

    name: str
    environments: Mapping[str, EnvironmentConfig] = dataclasses.field(default_factory=dict)
    slack_api_token: str | None = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ConfigError("Logger name must not be empty")
        object.__setattr__(self, "environments", dict(self.environments))

    def resolve(self, environment: str) -> EnvironmentConfig:
        """Merge the user config for *environment* over the built-in default.

        User ``streams`` replace the default streams when given; user
        ``slack`` fields override the default ``slack`` fields.
        """
        default = DEFAULT_ENV_CONFIGS.get(environment)
        override = self.environments.get(environment)
        if default is None and override is None:
            raise UnknownEnvironmentError(environment)
        if override is None:
            return default  # type: ignore[return-value]
        if default is None:
            return override

        streams = override.streams or default.streams
        slack = default.slack
        if override.slack is not None:
            slack = override.slack if default.slack is None else _merge_slack(default.slack, override.slack)
        return EnvironmentConfig(streams=streams, slack=slack)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LogConfig":
        """Build from plain data such as parsed JSON or YAML.

        Keys may be camelCase or snake_case. Environment entries live under
        ``environments``.
        """
        environments = {
            env: EnvironmentConfig.from_dict(env_data)
            for env, env_data in (data.get("environments") or {}).items()
        }
        return cls(
            name=data.get("name", ""),
            environments=environments,
            slack_api_token=_pick(data, "slack_api_token", "slackApiToken"),
        )


def _merge_slack(base: SlackConfig, override: SlackConfig) -> SlackConfig:
    return SlackConfig(
        level=override.level,
        default_channel=override.default_channel or base.default_channel,
    )


def _pick(data: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if data.get(key) is not None:
            return data[key]
    return None


DEFAULT_ENV_CONFIGS: dict[str, EnvironmentConfig] = {
    "test": EnvironmentConfig(streams=(StreamConfig(level=LogLevel.FATAL),)),
    "local": EnvironmentConfig(streams=(StreamConfig(level=LogLevel.INFO),)),
    "localhost": EnvironmentConfig(streams=(StreamConfig(level=LogLevel.INFO),)),
    "staging": EnvironmentConfig(
        streams=(StreamConfig(level=LogLevel.INFO),),
        slack=SlackConfig(level=LogLevel.WARN, default_channel="#staging-logs"),
    ),
    "production": EnvironmentConfig(
        streams=(StreamConfig(level=LogLevel.INFO),),
        slack=SlackConfig(level=LogLevel.WARN, default_channel="#prod-alerts"),
    ),
}


__all__ = [
    "DEFAULT_ENV_CONFIGS",
    "EnvironmentConfig",
    "LogConfig",
    "STREAM_TYPES",
    "SlackConfig",
    "StreamConfig",
]
