"""
Paramount - Configuration Loader

Loads and validates configuration from environment variables and .env files.
Provides a singleton configuration instance for the runtime.
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import ValidationError

from ..errors import ConfigurationError
from .schemas import ParamountConfig

logger = logging.getLogger(__name__)

_config_instance: ParamountConfig | None = None


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def load_config(
    env_file: str | None = None,
    reload: bool = False,
) -> ParamountConfig:
    """
    Load configuration from environment variables and .env file.

    Args:
        env_file: Path to .env file (default: .env in current directory)
        reload: Force reload even if config already loaded

    Returns:
        Validated ParamountConfig instance

    Raises:
        ConfigurationError: If configuration is invalid
    """
    global _config_instance

    if _config_instance is not None and not reload:
        return _config_instance

    env_path = Path(env_file) if env_file else Path.cwd() / ".env"

    if env_path.exists():
        logger.info(f"Loading environment from {env_path}")
        try:
            load_dotenv(env_path, override=True)
        except Exception as e:
            logger.error(
                f"Failed to load .env file from {env_path}: {e}",
                extra={"path": str(env_path), "error": str(e)},
                exc_info=True,
            )
            raise ConfigurationError(
                f"Failed to load environment file: {e}",
                details={"path": str(env_path), "error": str(e)},
            ) from e
    else:
        logger.debug("No .env file found, using environment variables only")

    config_dict = {
        "environment": os.getenv("PARAMOUNT_ENVIRONMENT", "development").strip().lower(),
        "log_level": os.getenv("PARAMOUNT_LOG_LEVEL", "INFO").strip().upper(),
        "json_logs": _env_flag("PARAMOUNT_JSON_LOGS", "false"),
        "enabled": _env_flag("PARAMOUNT_ENABLED", "true"),
        "reporter": os.getenv("PARAMOUNT_REPORTER", "raise").strip().lower(),
    }

    try:
        _config_instance = ParamountConfig(**config_dict)  # type: ignore[arg-type]
    except ValidationError as e:
        logger.error(
            f"Configuration validation failed: {e}",
            extra={"validation_errors": e.errors()},
        )
        raise ConfigurationError(
            "Configuration validation failed. Check your PARAMOUNT_* environment variables.",
            details={"validation_errors": e.errors()},
        ) from e

    logger.debug(
        f"Configuration loaded (environment: {_config_instance.environment.value})",
        extra={"environment": _config_instance.environment.value, "reporter_mode": _config_instance.reporter.value},
    )
    return _config_instance


def get_config() -> ParamountConfig:
    """
    Get the current configuration instance, loading it on first access.

    Returns:
        Current ParamountConfig instance
    """
    if _config_instance is None:
        return load_config()

    return _config_instance


def reload_config(env_file: str | None = None) -> ParamountConfig:
    """
    Force reload configuration.

    Args:
        env_file: Optional path to .env file

    Returns:
        Reloaded ParamountConfig instance
    """
    return load_config(env_file=env_file, reload=True)
