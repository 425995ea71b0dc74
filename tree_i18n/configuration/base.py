"""Shared base classes and utilities for settings modules."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class FeatureSettings(BaseSettings):
    """Base class for feature settings.

    All feature settings should inherit from this class to ensure
    consistent configuration behavior (env file loading, case sensitivity).
    Fields may be populated either by their environment alias or by name,
    which keeps explicit construction in tests and host code readable.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
    )
