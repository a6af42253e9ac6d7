"""Environment-driven settings for chartconfig.

Settings are read on demand from environment variables; nothing is cached, so
each call to `load_settings` or `load_color_format` reflects the current
environment.

Variables:
    CHARTCONFIG_COLOR_FORMAT: Default color rendering, "rgba" or "hex".
    CHARTCONFIG_LOG_FORMAT: Log output format, "json" or "plain".
    CHARTCONFIG_LOG_LEVEL: Root log level name (DEBUG, INFO, ...).
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Final, Literal, cast

from .color import COLOR_FORMATS, ColorFormat
from .exceptions import ConfigurationError

LogFormat = Literal["json", "plain"]

LOG_FORMATS: Final[tuple[LogFormat, ...]] = ("json", "plain")
LOG_LEVELS: Final[tuple[str, ...]] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True, slots=True)
class ChartConfigSettings:
    """Resolved settings.

    Args:
        color_format: Color rendering used when callers do not pass one.
        log_format: Formatter used by `configure_logging`.
        log_level: Numeric root log level.
    """

    color_format: ColorFormat = "rgba"
    log_format: LogFormat = "json"
    log_level: int = logging.INFO


def _env_choice(environ: Mapping[str, str], name: str, *, choices: tuple[str, ...], default: str) -> str:
    """Parse an environment variable restricted to a set of choices.

    Args:
        environ: Mapping to read from.
        name: Environment variable name.
        choices: Accepted values (compared case-insensitively).
        default: Value when the variable is not set or blank.

    Returns:
        The normalized (lowercased) value.

    Raises:
        ConfigurationError: If the value is not one of `choices`.
    """

    raw = environ.get(name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value not in {choice.lower() for choice in choices}:
        raise ConfigurationError(f"{name}={raw!r} is not supported; expected one of {', '.join(choices)}.")
    return value


def load_color_format(environ: Mapping[str, str] | None = None) -> ColorFormat:
    """Read only `CHARTCONFIG_COLOR_FORMAT`.

    Encoding uses this instead of `load_settings` so that a bad logging
    variable cannot break serialization.

    Raises:
        ConfigurationError: If the variable holds an unsupported value.
    """

    env = os.environ if environ is None else environ
    return cast(ColorFormat, _env_choice(env, "CHARTCONFIG_COLOR_FORMAT", choices=COLOR_FORMATS, default="rgba"))


def load_settings(environ: Mapping[str, str] | None = None) -> ChartConfigSettings:
    """Load settings from the environment.

    Args:
        environ: Optional mapping used instead of `os.environ` (useful in tests).

    Returns:
        ChartConfigSettings with defaults applied for unset variables.

    Raises:
        ConfigurationError: If a variable holds an unsupported value.
    """

    env = os.environ if environ is None else environ
    log_format = _env_choice(env, "CHARTCONFIG_LOG_FORMAT", choices=LOG_FORMATS, default="json")
    level_name = _env_choice(env, "CHARTCONFIG_LOG_LEVEL", choices=LOG_LEVELS, default="info")
    return ChartConfigSettings(
        color_format=load_color_format(env),
        log_format=cast(LogFormat, log_format),
        log_level=logging.getLevelNamesMapping()[level_name.upper()],
    )
