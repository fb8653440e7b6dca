"""localekit configuration settings - main aggregator."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from localekit.configuration.i18n import I18nSettings
from localekit.configuration.loaders import FileLoaderSettings, HttpLoaderSettings


class Settings(BaseSettings):
    """localekit configuration settings - main aggregator.

    Aggregates all domain-specific settings into a single configuration object:

    - **i18n**: Translation service behaviour (languages, isolation, workers)
    - **Loaders**: HTTP and file system loader configuration

    Environment Variables:
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        ENVIRONMENT: Deployment environment; anything but "production"
            renders logs for the console

    Example:
        ```python
        from localekit.configuration import get_settings

        settings = get_settings()

        default_lang = settings.i18n.default_language
        if settings.http_loader.base_url:
            # Fetch translations over HTTP...
        ```
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: str = "production"

    i18n: I18nSettings
    http_loader: HttpLoaderSettings
    file_loader: FileLoaderSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production.

        Returns:
            True if ENVIRONMENT is "production", False otherwise.
        """
        return self.ENVIRONMENT.lower() == "production"

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            "i18n": I18nSettings,
            "http_loader": HttpLoaderSettings,
            "file_loader": FileLoaderSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)


@lru_cache
def get_settings() -> Settings:
    """Get process-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.
    Tests that need different values should build ``Settings(...)`` directly
    and pass it to ``create_translate_service``.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()
