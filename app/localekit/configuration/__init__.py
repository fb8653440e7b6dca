"""localekit configuration module - public API.

Centralized configuration management using Pydantic BaseSettings with
domain-based organization.

Exports:
    get_settings: Cached Settings singleton (main configuration object)
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Translation service settings
    HttpLoaderSettings: HTTP loader settings
    FileLoaderSettings: File loader settings

Example:
    ```python
    from localekit.configuration import get_settings

    settings = get_settings()

    workers = settings.i18n.max_workers
    if settings.is_production:
        # Production-specific logic...
    ```
"""

from localekit.configuration.i18n import I18nSettings
from localekit.configuration.loaders import FileLoaderSettings, HttpLoaderSettings
from localekit.configuration.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
    "I18nSettings",
    "HttpLoaderSettings",
    "FileLoaderSettings",
]
