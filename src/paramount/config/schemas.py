"""
Paramount - Configuration Schemas

Defines typed configuration models using Pydantic for validation and type safety.
All configuration is read from environment variables (optionally via a .env file).
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Environment(str, Enum):
    """Runtime environment."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TEST = "test"


class LogLevel(str, Enum):
    """Log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class ReporterMode(str, Enum):
    """Initial process-wide error reporter."""

    RAISE = "raise"  # Abort the call on the first violation
    LOG = "log"  # Log a warning and let the call proceed


class ParamountConfig(BaseModel):
    """Main configuration for the argument validation layer."""

    model_config = ConfigDict(frozen=True)

    environment: Environment = Field(default=Environment.DEVELOPMENT, description="Runtime environment")
    log_level: LogLevel = Field(default=LogLevel.INFO, description="Log level for the paramount logger")
    json_logs: bool = Field(default=False, description="Emit structured JSON log lines")

    enabled: bool = Field(
        default=True,
        description="Build validation gates in require(); when false, facades only delegate",
    )
    reporter: ReporterMode = Field(default=ReporterMode.RAISE, description="Initial error reporter")
