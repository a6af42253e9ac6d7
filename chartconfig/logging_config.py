"""Root logger setup for scripts that embed chartconfig.

The library only emits records through module loggers and never installs
handlers on import; applications call `configure_logging` once at startup.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from pythonjsonlogger.json import JsonFormatter

from .settings import LogFormat, load_settings

LOG_PATTERN = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(
    level: int | None = None,
    force_format: LogFormat | None = None,
    environ: Mapping[str, str] | None = None,
) -> None:
    """Install a single stream handler on the root logger.

    Explicit arguments win over `CHARTCONFIG_LOG_FORMAT` and
    `CHARTCONFIG_LOG_LEVEL`, which in turn default to JSON output at INFO.

    Args:
        level: Numeric log level; overrides the environment.
        force_format: "json" or "plain"; overrides the environment.
        environ: Optional mapping used instead of `os.environ`.

    Raises:
        ConfigurationError: If a logging variable holds an unsupported value.
    """

    settings = load_settings(environ)
    format_mode = force_format if force_format is not None else settings.log_format

    root = logging.getLogger()
    root.setLevel(level if level is not None else settings.log_level)

    handler = logging.StreamHandler()
    if format_mode == "plain":
        formatter: logging.Formatter = logging.Formatter(LOG_PATTERN)
    else:
        formatter = JsonFormatter(LOG_PATTERN)
    handler.setFormatter(formatter)

    # Replace existing handlers so repeated calls do not duplicate output.
    root.handlers.clear()
    root.addHandler(handler)
