"""Configuration management for Shelly."""

from typing import Optional

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigurationError
from .logging_utils import LogProfile, configure_logging
from .types import AnalysisSettings


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="SHELLY_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Analysis Configuration
    allow_whitespace_in_paths: bool = Field(default=False, description="Tolerate variable whitespace in arguments")
    use_fixed_paths: bool = Field(default=False, description="Generate exact full-line patterns")

    # Output Configuration
    default_format: Optional[str] = Field(None, description="Export format used when none is given")

    # Logging Configuration
    log_level: str = Field(default="WARNING", description="Log level")

    def analysis(
        self,
        *,
        allow_whitespace_in_paths: Optional[bool] = None,
        use_fixed_paths: Optional[bool] = None,
    ) -> AnalysisSettings:
        """Build analysis settings, letting explicit values override configured ones."""
        return AnalysisSettings(
            allow_whitespace_in_paths=(
                self.allow_whitespace_in_paths if allow_whitespace_in_paths is None else allow_whitespace_in_paths
            ),
            use_fixed_paths=self.use_fixed_paths if use_fixed_paths is None else use_fixed_paths,
        )


def get_settings(profile: LogProfile = "default") -> Settings:
    """Get application settings.

    Args:
        profile: Logging profile to configure once settings are loaded

    Returns:
        Settings instance

    Raises:
        ConfigurationError: a SHELLY_* value cannot be used
    """
    # pydantic-settings reads SHELLY_* variables and the optional .env file
    try:
        settings = Settings()
    except ValidationError as exc:
        problems = "; ".join(
            f"SHELLY_{str(error['loc'][0]).upper()}: {error['msg']}" if error["loc"] else error["msg"]
            for error in exc.errors()
        )
        raise ConfigurationError(problems) from exc

    try:
        configure_logging(level=settings.log_level, profile=profile)
    except ValueError as exc:
        raise ConfigurationError(f"SHELLY_LOG_LEVEL: {exc}") from exc
    return settings
