"""Translation store.

Process-wide mutable state shared by the services that use it: the tables
per language, the current and default language, the known languages, and
the three notification channels.
"""

from typing import Set

from localekit.events import (
    DEFAULT_LANG_CHANGED,
    LANG_CHANGED,
    TRANSLATION_CHANGED,
    EventChannel,
)
from localekit.i18n.models import TranslationsDictionary


class TranslateStore:
    """State holder for one or more TranslateService instances.

    The store is passive: services mutate it and emit on its channels.

    Attributes:
        default_lang: Fallback language; empty string when unset.
        current_lang: Language used for unqualified lookups; empty when unset.
        translations: Auto-vivifying mapping of language to Translations.
        langs: Known language tags.
        loaded: Languages whose table holds loaded or wholesale-set content.
            Reading an absent language creates an empty table, so presence
            in ``translations`` alone does not mean a language is loaded.
        on_translation_change: Fired when a table is set or edited.
        on_lang_change: Fired when the current language changes.
        on_default_lang_change: Fired when the default language changes.
    """

    def __init__(self, default_lang: str = ""):
        """Initialize the store.

        Args:
            default_lang: Optional language seeded as both current and
                default language.
        """
        self.default_lang = default_lang
        self.current_lang = default_lang
        self.translations = TranslationsDictionary()
        self.langs: Set[str] = set()
        self.loaded: Set[str] = set()
        if default_lang:
            self.langs.add(default_lang)

        self.on_translation_change = EventChannel(TRANSLATION_CHANGED)
        self.on_lang_change = EventChannel(LANG_CHANGED)
        self.on_default_lang_change = EventChannel(DEFAULT_LANG_CHANGED)

    def is_loaded(self, lang: str) -> bool:
        """Check whether a language's table has been loaded or set."""
        return lang in self.loaded

    def __repr__(self) -> str:
        return (
            f"TranslateStore(current_lang={self.current_lang!r}, "
            f"default_lang={self.default_lang!r}, langs={sorted(self.langs)!r})"
        )


_shared_store = TranslateStore()


def get_shared_store() -> TranslateStore:
    """Return the process-wide store used by non-isolated services."""
    return _shared_store


def reset_shared_store() -> TranslateStore:
    """Replace the process-wide store with a fresh one.

    WARNING: This is intended for testing only.

    Returns:
        The new shared store.
    """
    global _shared_store
    _shared_store = TranslateStore()
    return _shared_store
