"""Configuration for the content blocker using pydantic-settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RulesSettings(BaseSettings):
    """Settings for loading rule lists."""

    model_config = SettingsConfigDict(
        env_prefix="RULES_",
    )

    rules_file: str | None = Field(
        default=None,
        description="Path to a JSON content blocker list",
    )


class BlockerSettings(BaseSettings):
    """Global settings for the content blocker."""

    model_config = SettingsConfigDict(
        env_prefix="CONTENTBLOCK_",
    )

    rules: RulesSettings = Field(default_factory=RulesSettings)


# Global settings instance that can be accessed throughout the application
_settings: BlockerSettings | None = None


def get_settings() -> BlockerSettings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = BlockerSettings()
    return _settings


def set_settings(settings: BlockerSettings) -> None:
    """Set the global settings instance."""
    global _settings
    _settings = settings
