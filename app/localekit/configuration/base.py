"""Shared base classes for settings modules."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class I18nBaseSettings(BaseSettings):
    """Base class for i18n core settings.

    Core settings control the translation service itself: languages,
    fallback behaviour, store sharing and the loader worker pool.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
    )


class LoaderSettings(BaseSettings):
    """Base class for translation loader settings.

    All loader settings should inherit from this class to ensure
    consistent configuration behavior (env file loading, case sensitivity).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
    )
