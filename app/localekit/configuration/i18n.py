"""Translation service settings."""

from pydantic import Field, field_validator

from localekit.configuration.base import I18nBaseSettings


class I18nSettings(I18nBaseSettings):
    """Translation service configuration.

    Environment Variables:
        I18N_DEFAULT_LANGUAGE: Language seeded as the default (fallback)
            language when a service is created (default: unset)
        I18N_USE_DEFAULT_LANG: Render from the default language when the
            current language lacks a key (default: True)
        I18N_ISOLATE: Give each service a private store (default: False)
        I18N_EXTEND: Merge implicitly triggered loads into the existing
            table instead of replacing it (default: False)
        I18N_LOADER_MAX_WORKERS: Worker threads running loader calls
            (default: 4)

    Example:
        ```python
        from localekit.configuration import get_settings

        settings = get_settings()

        if settings.i18n.isolate:
            # Private store per service...
        ```
    """

    default_language: str = Field(
        default="",
        alias="I18N_DEFAULT_LANGUAGE",
        description="Default (fallback) language seeded at construction",
    )
    use_default_lang: bool = Field(
        default=True,
        alias="I18N_USE_DEFAULT_LANG",
        description="Fall back to the default language for missing keys",
    )
    isolate: bool = Field(
        default=False,
        alias="I18N_ISOLATE",
        description="Use a private store instead of the shared one",
    )
    extend: bool = Field(
        default=False,
        alias="I18N_EXTEND",
        description="Merge implicitly triggered loads into existing tables",
    )
    max_workers: int = Field(
        default=4,
        ge=1,
        alias="I18N_LOADER_MAX_WORKERS",
        description="Worker threads used to run loader calls",
    )

    @field_validator("default_language", mode="before")
    @classmethod
    def strip_default_language(cls, v):
        """Normalize the default language tag."""
        if v is None:
            return ""
        return str(v).strip()
