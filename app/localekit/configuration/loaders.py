"""Translation loader settings."""

from typing import Optional

from pydantic import Field, field_validator

from localekit.configuration.base import LoaderSettings


class HttpLoaderSettings(LoaderSettings):
    """HTTP translation loader configuration.

    Translations for a language are fetched from
    ``{base_url}{prefix}{lang}{suffix}``.

    Environment Variables:
        I18N_HTTP_BASE_URL: Server base URL (default: unset, HTTP loader disabled)
        I18N_HTTP_PREFIX: Path prefix (default: /i18n/)
        I18N_HTTP_SUFFIX: Path suffix (default: .json)
        I18N_HTTP_TIMEOUT: Request timeout in seconds (default: 10)

    Example:
        ```python
        from localekit.configuration import get_settings

        settings = get_settings()
        url = settings.http_loader.url_for("el")
        ```
    """

    base_url: Optional[str] = Field(
        default=None,
        alias="I18N_HTTP_BASE_URL",
        description="Base URL of the server hosting translation files",
    )
    prefix: str = Field(
        default="/i18n/",
        alias="I18N_HTTP_PREFIX",
        description="Path prefix prepended to the language tag",
    )
    suffix: str = Field(
        default=".json",
        alias="I18N_HTTP_SUFFIX",
        description="Path suffix appended to the language tag",
    )
    timeout: float = Field(
        default=10.0,
        gt=0,
        alias="I18N_HTTP_TIMEOUT",
        description="Request timeout (seconds)",
    )

    @field_validator("base_url", mode="before")
    @classmethod
    def strip_trailing_slash(cls, v):
        """Drop trailing slashes so the prefix controls the path."""
        if not v:
            return None
        return str(v).rstrip("/")

    def url_for(self, lang: str) -> str:
        """Build the translation file URL for a language."""
        return f"{self.base_url or ''}{self.prefix}{lang}{self.suffix}"


class FileLoaderSettings(LoaderSettings):
    """File system translation loader configuration.

    Environment Variables:
        I18N_TRANSLATIONS_DIR: Directory holding ``<lang>.json`` or
            ``<lang>.yml`` files (default: unset, file loader disabled)
    """

    translations_dir: Optional[str] = Field(
        default=None,
        alias="I18N_TRANSLATIONS_DIR",
        description="Directory containing per-language translation files",
    )
