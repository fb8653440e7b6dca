"""Translation service.

Coordinates language switching, key lookup and loading on top of a
TranslateStore. Concurrent requests for a language that is not loaded yet
share a single loader call; the first language ever set becomes both the
current and the default language.
"""

from concurrent.futures import Future, ThreadPoolExecutor
from threading import RLock
from typing import Callable, Dict, List, Mapping, Optional, Tuple

from localekit.configuration import I18nSettings
from localekit.events import EventChannel, TranslationChangeEvent
from localekit.i18n.compiler import TranslateCompiler, default_compiler
from localekit.i18n.flights import LoadFlights
from localekit.i18n.loader import StaticTranslateLoader, TranslateLoader
from localekit.i18n.models import Translations
from localekit.i18n.parser import TranslateParser, default_parser
from localekit.i18n.store import TranslateStore
from localekit.logging import get_module_logger

logger = get_module_logger()

PendingEvents = List[Tuple[EventChannel, TranslationChangeEvent]]


def _resolved(value) -> Future:
    future = Future()
    future.set_result(value)
    return future


def _then(pending: Future, fn: Callable) -> Future:
    """Return a Future resolved with fn(result) once ``pending`` settles."""
    chained = Future()

    def _settle(done: Future) -> None:
        error = done.exception()
        if error is not None:
            chained.set_exception(error)
            return
        try:
            chained.set_result(fn(done.result()))
        except Exception as e:
            chained.set_exception(e)

    pending.add_done_callback(_settle)
    return chained


class TranslateService:
    """Runtime translation service.

    Loads tables through a TranslateLoader on a worker pool, caches them in a
    TranslateStore and renders keys with a TranslateParser. Every method is
    safe to call from any thread. Methods that may need a load return a
    ``concurrent.futures.Future``; call ``.result()`` to wait.

    Usage:
        service = TranslateService(loader=HttpTranslateLoader())

        service.set_current_lang("el").result()
        service.instant("menu.open")                       # "Άνοιγμα"
        service.get("greeting", {"name": "Ada"}).result()  # "Γεια Ada"

        service.on_lang_change.subscribe(lambda e: print(e.lang))

    Attributes:
        store: State shared with other non-isolated services.
        loader: Supplies tables per language.
        parser: Renders templates with parameters.
        compiler: Transforms loaded tables before they are stored.
        options: I18nSettings controlling fallback, extend and workers.
    """

    def __init__(
        self,
        store: Optional[TranslateStore] = None,
        loader: Optional[TranslateLoader] = None,
        parser: Optional[TranslateParser] = None,
        compiler: Optional[TranslateCompiler] = None,
        options: Optional[I18nSettings] = None,
        executor: Optional[ThreadPoolExecutor] = None,
    ):
        """Initialize the translation service.

        Args:
            store: Store to use; a private one is created when omitted.
            loader: Loader to use (default: StaticTranslateLoader, empty tables).
            parser: Parser to use (default: DefaultTranslateParser).
            compiler: Compiler to use (default: identity).
            options: Service settings (default: I18nSettings from environment).
            executor: Worker pool for loader calls. When omitted the service
                creates and owns one sized by ``options.max_workers``.
        """
        self.store = store or TranslateStore()
        self.loader = loader or StaticTranslateLoader()
        self.parser = parser or default_parser
        self.compiler = compiler or default_compiler
        self.options = options or I18nSettings()

        self._lock = RLock()
        self._flights = LoadFlights()
        self._transitions: Dict[Tuple[str, str], Tuple[Future, Future]] = {}
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(
            max_workers=self.options.max_workers,
            thread_name_prefix="localekit-loader",
        )

        if self.options.default_language:
            self.store.default_lang = self.options.default_language

        logger.info(
            "initialized_translate_service",
            loader=type(self.loader).__name__,
            default_lang=self.store.default_lang,
            use_default_lang=self.options.use_default_lang,
            extend=self.options.extend,
        )

    # State accessors

    @property
    def default_lang(self) -> str:
        """The language to fall back to when the current one lacks a key."""
        return self.store.default_lang

    @property
    def current_lang(self) -> str:
        """The language used for lookups."""
        return self.store.current_lang

    @property
    def translations(self):
        """Tables per language."""
        return self.store.translations

    @property
    def default(self) -> Translations:
        """Table of the default language."""
        return self.store.translations[self.store.default_lang]

    @property
    def current(self) -> Translations:
        """Table of the current language."""
        return self.store.translations[self.store.current_lang]

    @property
    def langs(self):
        """Known language tags."""
        return self.store.langs

    @property
    def on_translation_change(self) -> EventChannel:
        return self.store.on_translation_change

    @property
    def on_lang_change(self) -> EventChannel:
        return self.store.on_lang_change

    @property
    def on_default_lang_change(self) -> EventChannel:
        return self.store.on_default_lang_change

    # Language transitions

    def set_default_lang(self, lang: str) -> Future:
        """Set the default (fallback) language, loading it if needed.

        When no default language is set yet, it is assigned right away so
        readers see a default while the load is outstanding.

        Args:
            lang: Language tag.

        Returns:
            Future resolved with the language's table once the change has
            been applied; fails with the loader's error if the load fails.
        """
        events: PendingEvents = []
        with self._lock:
            transition = self._pending_transition("default", lang)
            if transition is not None:
                return transition
            if lang == self.store.default_lang and self.store.is_loaded(lang):
                return _resolved(self.store.translations[lang])
            pending = self.retrieve_translations(lang)
            if pending is None:
                self._apply_default_lang(lang, events)
                translations = self.store.translations[lang]
            else:
                if not self.store.default_lang:
                    self.store.default_lang = lang
                transition, created = self._join_transition("default", lang, pending)

        if pending is None:
            self._emit(events)
            return _resolved(translations)
        if created:
            self._apply_after_load(
                "default", lang, pending, transition, self._change_default_lang
            )
        return transition

    def set_current_lang(self, lang: str) -> Future:
        """Set the current language, loading it if needed.

        When no current language is set yet, it is assigned right away so
        readers see it while the load is outstanding.

        Args:
            lang: Language tag.

        Returns:
            Future resolved with the language's table once the change has
            been applied; fails with the loader's error if the load fails.
        """
        events: PendingEvents = []
        with self._lock:
            transition = self._pending_transition("current", lang)
            if transition is not None:
                return transition
            if lang == self.store.current_lang and self.store.is_loaded(lang):
                return _resolved(self.store.translations[lang])
            pending = self.retrieve_translations(lang)
            if pending is None:
                self._apply_lang(lang, events)
                translations = self.store.translations[lang]
            else:
                if not self.store.current_lang:
                    self.store.current_lang = lang
                transition, created = self._join_transition("current", lang, pending)

        if pending is None:
            self._emit(events)
            return _resolved(translations)
        if created:
            self._apply_after_load("current", lang, pending, transition, self._change_lang)
        return transition

    use = set_current_lang

    def _pending_transition(self, kind: str, lang: str) -> Optional[Future]:
        """Return the transition Future still waiting to apply, if any.

        A transition stays registered from the moment its load is requested
        until its change has run, including the window after the load has
        settled. Entries belonging to a load that a reset has superseded are
        ignored. Callers must hold the lock.
        """
        entry = self._transitions.get((kind, lang))
        if entry is None:
            return None
        flight = self._flights.get(lang)
        if flight is not None and flight is not entry[0]:
            return None
        return entry[1]

    def _join_transition(self, kind: str, lang: str, pending: Future) -> Tuple[Future, bool]:
        """Return the transition Future for ``pending``, registering it if new.

        Every caller asking for the same transition while the same load is
        pending receives the same Future, so the change runs and notifies
        exactly once. Callers must hold the lock.

        Returns:
            (transition, created) where created is True for the first caller,
            which must then pass it to _apply_after_load().
        """
        key = (kind, lang)
        entry = self._transitions.get(key)
        if entry is not None and entry[0] is pending:
            return entry[1], False
        transition = Future()
        self._transitions[key] = (pending, transition)
        return transition, True

    def _apply_after_load(
        self,
        kind: str,
        lang: str,
        pending: Future,
        transition: Future,
        change: Callable[[str], None],
    ) -> None:
        """Run ``change(lang)`` when ``pending`` settles, then settle ``transition``."""
        key = (kind, lang)

        def _forget() -> None:
            with self._lock:
                entry = self._transitions.get(key)
                if entry is not None and entry[0] is pending:
                    del self._transitions[key]

        def _settle(done: Future) -> None:
            error = done.exception()
            if error is None:
                try:
                    change(lang)
                except Exception as e:
                    logger.exception("lang_transition_failed", kind=kind, lang=lang)
                    error = e
            _forget()
            if error is not None:
                transition.set_exception(error)
            else:
                transition.set_result(done.result())

        pending.add_done_callback(_settle)

    def _change_lang(self, lang: str) -> None:
        events: PendingEvents = []
        with self._lock:
            self._apply_lang(lang, events)
        self._emit(events)

    def _change_default_lang(self, lang: str) -> None:
        events: PendingEvents = []
        with self._lock:
            self._apply_default_lang(lang, events)
        self._emit(events)

    def _apply_lang(self, lang: str, events: PendingEvents) -> None:
        self.store.current_lang = lang
        events.append(
            (
                self.store.on_lang_change,
                TranslationChangeEvent(lang, self.store.translations[lang]),
            )
        )
        # the first language ever set also becomes the default
        if not self.store.default_lang:
            self._apply_default_lang(lang, events)

    def _apply_default_lang(self, lang: str, events: PendingEvents) -> None:
        self.store.default_lang = lang
        events.append(
            (
                self.store.on_default_lang_change,
                TranslationChangeEvent(lang, self.store.translations[lang]),
            )
        )
        if not self.store.current_lang:
            self._apply_lang(lang, events)

    def _emit(self, events: PendingEvents) -> None:
        for channel, event in events:
            if channel is self.store.on_default_lang_change:
                logger.info("default_lang_changed", channel=channel.name, lang=event.lang)
            else:
                logger.info("lang_changed", channel=channel.name, lang=event.lang)
            channel.emit(event)

    # Loading

    def retrieve_translations(self, lang: str) -> Optional[Future]:
        """Return the pending load for a language, starting one if needed.

        Args:
            lang: Language tag.

        Returns:
            None when the language is already loaded, otherwise the Future
            shared by every caller waiting on this language.
        """
        with self._lock:
            if self.store.is_loaded(lang):
                return None
            pending = self._flights.get(lang)
            if pending is not None:
                return pending
            return self.load_translation(lang, merge=self.options.extend)

    def load_translation(self, lang: str, merge: bool = False) -> Future:
        """Load a language's table with the loader.

        A pending load for the language is shared rather than repeated, and
        a language that is already loaded is served from the store. Use
        reload_lang() to force a new load.

        Args:
            lang: Language tag.
            merge: Merge the loaded table into the stored one instead of
                replacing it.

        Returns:
            Future resolved with the stored table, or failed with the
            loader's error.
        """
        with self._lock:
            self.store.langs.add(lang)
            if lang not in self._flights and self.store.is_loaded(lang):
                return _resolved(self.store.translations[lang])

            pending, started = self._flights.get_or_start(lang, Future)
            if not started:
                return pending

            logger.info("translation_load_started", lang=lang, merge=merge)
            try:
                self._executor.submit(self._run_load, lang, merge, pending)
            except RuntimeError:
                self._flights.discard(lang, pending)
                logger.error("translation_load_rejected", lang=lang)
                raise
            return pending

    def _run_load(self, lang: str, merge: bool, pending: Future) -> None:
        try:
            fetched = self.compiler.compile_translations(
                Translations(self.loader.get_translation(lang)), lang
            )
        except Exception as e:
            with self._lock:
                self._flights.discard(lang, pending)
            logger.error(
                "translation_load_failed",
                lang=lang,
                error=str(e),
                error_type=type(e).__name__,
            )
            pending.set_exception(e)
            return

        with self._lock:
            if merge:
                self.store.translations[lang].merge(fetched)
            else:
                self.store.translations[lang] = fetched
            self.store.loaded.add(lang)
            self._flights.discard(lang, pending)
            translations = self.store.translations[lang]

        logger.info(
            "translation_load_completed",
            lang=lang,
            merge=merge,
            key_count=len(translations),
        )
        pending.set_result(translations)

    def reload_lang(self, lang: str, merge: bool = False) -> Future:
        """Discard a language's table and pending load, then load it again.

        Args:
            lang: Language tag.
            merge: Merge into the (now empty) stored table instead of
                replacing it.

        Returns:
            Future of the new load.
        """
        with self._lock:
            self.reset_lang(lang)
            return self.load_translation(lang, merge)

    def reset_lang(self, lang: str) -> None:
        """Forget a language's pending load and empty its table in place.

        A loader call already running is not cancelled; its result is still
        written when it settles.

        Args:
            lang: Language tag.
        """
        with self._lock:
            self._flights.discard(lang)
            self.store.loaded.discard(lang)
            self.store.translations[lang].clear()
        logger.info("translation_reset", lang=lang)

    def set_translation(
        self,
        lang: str,
        translations: Mapping[str, str],
        should_merge: bool = False,
    ) -> None:
        """Manually set the table of a language.

        Args:
            lang: Language tag.
            translations: Table to set.
            should_merge: Merge into the stored table instead of replacing it.
        """
        with self._lock:
            self.store.langs.add(lang)
            if should_merge:
                self.store.translations[lang].merge(translations)
            else:
                self.store.translations[lang] = Translations(translations)
            self.store.loaded.add(lang)
            table = self.store.translations[lang]
        self.store.on_translation_change.emit(TranslationChangeEvent(lang, table))

    def add_langs(self, *langs: str) -> None:
        """Register available languages without loading them."""
        with self._lock:
            self.store.langs.update(langs)

    def get_langs(self) -> List[str]:
        """Return the known language tags, sorted."""
        with self._lock:
            return sorted(self.store.langs)

    def set(self, key: str, value: str, lang: Optional[str] = None) -> None:
        """Set the translated value of one key.

        Args:
            key: Translation key.
            value: Translated value.
            lang: Language to write to (default: current language).
        """
        with self._lock:
            lang = self.store.current_lang if lang is None else lang
            table = self.store.translations[lang]
            table[key] = value
        self.store.on_translation_change.emit(TranslationChangeEvent(lang, table))

    # Lookup

    def get(self, key: str, parameters: Optional[Mapping] = None) -> Future:
        """Translate a key, waiting for the current language to load.

        Args:
            key: Translation key.
            parameters: Optional interpolation parameters.

        Returns:
            Future resolved with the rendered string. Missing keys render as
            the key itself. Fails only if the pending load fails.
        """
        with self._lock:
            lang = self.store.current_lang
            pending = self.retrieve_translations(lang) if lang else None
            if pending is None:
                return _resolved(self.instant(key, parameters))
        return _then(
            pending, lambda translations: self._render(translations, key, parameters)
        )

    def instant(self, key: str, parameters: Optional[Mapping] = None) -> str:
        """Translate a key from whatever is loaded right now.

        Never waits for a load; returns the key itself (rendered) when the
        current language has nothing for it yet.

        Args:
            key: Translation key.
            parameters: Optional interpolation parameters.

        Returns:
            Rendered string.
        """
        lang = self.store.current_lang
        translations = self.store.translations[lang] if lang else Translations()
        return self._render(translations, key, parameters)

    def _render(
        self,
        translations: Translations,
        key: str,
        parameters: Optional[Mapping],
    ) -> str:
        template = translations.get(key)
        if template is None and self.options.use_default_lang:
            fallback = self.store.translations.get(self.store.default_lang)
            if fallback is not None and fallback is not translations:
                template = fallback.get(key)
        if template is None:
            template = key
        return self.parser.interpolate(template, parameters)

    # Lifecycle

    def shutdown(self, wait: bool = True) -> None:
        """Stop the worker pool if the service owns it.

        Args:
            wait: If True, wait for running loads to settle.
        """
        if self._owns_executor:
            self._executor.shutdown(wait=wait)
            logger.debug("translate_service_shut_down", wait=wait)

    def __enter__(self) -> "TranslateService":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown()
