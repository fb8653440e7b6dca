"""Factory functions for creating i18n components.

Provides convenience functions for building a TranslateService from
settings, picking the loader and the store the configuration asks for.
"""

from pathlib import Path
from typing import Optional

from localekit.configuration import Settings, get_settings
from localekit.i18n.compiler import TranslateCompiler
from localekit.i18n.loader import (
    FileTranslateLoader,
    HttpTranslateLoader,
    StaticTranslateLoader,
    TranslateLoader,
)
from localekit.i18n.parser import TranslateParser
from localekit.i18n.service import TranslateService
from localekit.i18n.store import TranslateStore, get_shared_store
from localekit.logging import get_module_logger

logger = get_module_logger()


def create_loader(settings: Optional[Settings] = None) -> TranslateLoader:
    """Create the loader described by the settings.

    Resolution order:
    1. HttpTranslateLoader when I18N_HTTP_BASE_URL is set
    2. FileTranslateLoader when I18N_TRANSLATIONS_DIR is set
    3. StaticTranslateLoader serving empty tables

    Args:
        settings: Settings to read (default: get_settings()).

    Returns:
        TranslateLoader instance.

    Raises:
        ValueError: If the configured translations directory does not exist.
    """
    settings = settings or get_settings()

    if settings.http_loader.base_url:
        logger.info("selected_http_loader", base_url=settings.http_loader.base_url)
        return HttpTranslateLoader(settings=settings.http_loader)
    if settings.file_loader.translations_dir:
        logger.info(
            "selected_file_loader",
            translations_dir=settings.file_loader.translations_dir,
        )
        return FileTranslateLoader(Path(settings.file_loader.translations_dir))

    logger.info("selected_static_loader")
    return StaticTranslateLoader()


def create_translate_service(
    settings: Optional[Settings] = None,
    loader: Optional[TranslateLoader] = None,
    store: Optional[TranslateStore] = None,
    parser: Optional[TranslateParser] = None,
    compiler: Optional[TranslateCompiler] = None,
) -> TranslateService:
    """Create and configure a TranslateService.

    Unless a store is passed, isolated services get a private store and
    non-isolated services share the process-wide one. Services sharing a
    store do not share pending loads, so two of them can load the same
    language at the same time.

    Args:
        settings: Settings to read (default: get_settings()).
        loader: Loader override (default: create_loader(settings)).
        store: Store override.
        parser: Parser override.
        compiler: Compiler override.

    Returns:
        TranslateService: Configured service

    Usage:
        # Use environment configuration
        service = create_translate_service()

        # Private store with an in-memory loader
        settings = Settings(i18n=I18nSettings(isolate=True))
        service = create_translate_service(
            settings=settings,
            loader=StaticTranslateLoader({"en": {"hello": "Hello"}}),
        )
    """
    settings = settings or get_settings()

    if store is None:
        store = TranslateStore() if settings.i18n.isolate else get_shared_store()

    service = TranslateService(
        store=store,
        loader=loader or create_loader(settings),
        parser=parser,
        compiler=compiler,
        options=settings.i18n,
    )
    logger.info(
        "translate_service_created",
        isolate=settings.i18n.isolate,
        shared_store=store is get_shared_store(),
    )
    return service
