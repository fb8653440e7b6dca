"""i18n core - runtime translation with deduplicated loading.

Provides per-language translation tables loaded on demand, current and
default language coordination, and parameter interpolation.

Main components:
- parameters: TranslateParameters, the small ordered parameter map
- models: Translations, TranslationsDictionary, TranslateString
- store: TranslateStore, the shared state and notification channels
- service: TranslateService, loading, language switching and lookup
- loader: TranslateLoader with static, HTTP and file implementations
- parser / compiler: template rendering and load-time transforms
- factory: create_translate_service() from settings
"""

from localekit.i18n.compiler import DefaultTranslateCompiler, TranslateCompiler
from localekit.i18n.exceptions import I18nError, TranslationLoadError
from localekit.i18n.factory import create_loader, create_translate_service
from localekit.i18n.loader import (
    FileTranslateLoader,
    HttpTranslateLoader,
    StaticTranslateLoader,
    TranslateLoader,
)
from localekit.i18n.models import TranslateString, Translations, TranslationsDictionary
from localekit.i18n.parameters import TranslateParameters
from localekit.i18n.parser import DefaultTranslateParser, TranslateParser
from localekit.i18n.service import TranslateService
from localekit.i18n.store import TranslateStore, get_shared_store

__all__ = [
    "TranslateParameters",
    "Translations",
    "TranslationsDictionary",
    "TranslateString",
    "TranslateStore",
    "get_shared_store",
    "TranslateService",
    "TranslateLoader",
    "StaticTranslateLoader",
    "HttpTranslateLoader",
    "FileTranslateLoader",
    "TranslateParser",
    "DefaultTranslateParser",
    "TranslateCompiler",
    "DefaultTranslateCompiler",
    "I18nError",
    "TranslationLoadError",
    "create_loader",
    "create_translate_service",
]
