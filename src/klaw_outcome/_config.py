"""Package configuration: Config dataclass, environment defaults, and init()."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Any

from klaw_outcome._logging import configure_logging, get_logger

__all__ = [
    "Config",
    "get_config",
    "init",
    "reset",
]

logger = get_logger(__name__)

ENV_LOG_LEVEL = "KLAW_OUTCOME_LOG_LEVEL"
ENV_JSON_LOGS = "KLAW_OUTCOME_JSON_LOGS"
ENV_MAX_PAYLOAD_CHARS = "KLAW_OUTCOME_MAX_PAYLOAD_CHARS"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_TRUTHY = ("1", "true", "yes", "on")
_FALSY = ("0", "false", "no", "off")


@dataclass(frozen=True)
class Config:
    """Configuration for klaw-outcome.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
        json_logs: Render logs as JSON (True) or as colored console output (False).
        max_payload_chars: Longest payload rendering used in unwrap error
            messages before truncation. 0 (the default) disables truncation.
    """

    log_level: str | None = None
    json_logs: bool = True
    max_payload_chars: int = 0


# Process configuration (set by init() or lazily from the environment)
_config: Config | None = None


def _log_level_from_env() -> str | None:
    raw = os.environ.get(ENV_LOG_LEVEL, "").strip()
    if not raw:
        return None
    if raw.upper() not in _LOG_LEVELS:
        logger.warning("config.invalid_env", variable=ENV_LOG_LEVEL, value=raw)
        return None
    return raw.upper()


def _json_logs_from_env() -> bool:
    raw = os.environ.get(ENV_JSON_LOGS, "").strip().lower()
    if not raw:
        return True
    if raw in _TRUTHY:
        return True
    if raw in _FALSY:
        return False
    logger.warning("config.invalid_env", variable=ENV_JSON_LOGS, value=raw)
    return True


def _max_payload_chars_from_env() -> int:
    raw = os.environ.get(ENV_MAX_PAYLOAD_CHARS, "").strip()
    default = Config.max_payload_chars
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("config.invalid_env", variable=ENV_MAX_PAYLOAD_CHARS, value=raw)
        return default
    if value < 0:
        logger.warning("config.invalid_env", variable=ENV_MAX_PAYLOAD_CHARS, value=raw)
        return default
    return value


def _from_env() -> Config:
    """Build a Config from KLAW_OUTCOME_* environment variables.

    Unset variables keep the dataclass defaults; invalid ones are logged and
    ignored.
    """
    return Config(
        log_level=_log_level_from_env(),
        json_logs=_json_logs_from_env(),
        max_payload_chars=_max_payload_chars_from_env(),
    )


def init(config: Config | None = None, **overrides: Any) -> Config:
    """Install the process configuration.

    Args:
        config: Explicit configuration. Defaults to one built from the environment.
        **overrides: Field overrides applied on top of `config`.

    Returns:
        The installed configuration.

    Raises:
        ValueError: If max_payload_chars is negative or log_level is unknown.

    Example:
        ```python
        import klaw_outcome

        klaw_outcome.init(log_level="DEBUG", json_logs=False)
        ```
    """
    global _config

    base = config if config is not None else _from_env()
    resolved = replace(base, **overrides) if overrides else base

    if resolved.max_payload_chars < 0:
        raise ValueError(f"max_payload_chars must be >= 0, got {resolved.max_payload_chars}")
    if resolved.log_level is not None and resolved.log_level.upper() not in _LOG_LEVELS:
        raise ValueError(f"Unknown log level: {resolved.log_level!r}")

    if resolved.log_level is not None and resolved.log_level != resolved.log_level.upper():
        resolved = replace(resolved, log_level=resolved.log_level.upper())

    if resolved.log_level is not None:
        configure_logging(resolved.log_level, json_output=resolved.json_logs)

    _config = resolved
    return resolved


def get_config() -> Config:
    """Return the installed configuration, reading the environment on first use."""
    global _config

    if _config is None:
        _config = _from_env()
    return _config


def reset() -> None:
    """Forget the installed configuration. The next get_config() rereads the environment."""
    global _config

    _config = None
