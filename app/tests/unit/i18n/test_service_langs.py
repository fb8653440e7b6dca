"""Tests for TranslateService current/default language transitions."""

# pylint: disable=protected-access

import threading
import time
from unittest.mock import MagicMock

import pytest

from localekit.i18n import TranslateService, TranslateStore

pytestmark = pytest.mark.unit

CONCURRENT_CALLERS = 2_000
SWITCHING_CALLERS = 16


class TestFirstLanguageCoupling:
    """The first language set becomes both current and default."""

    def test_set_current_lang_sets_both(self, service, loader, recorded_events):
        """set_current_lang() on a fresh service sets both languages."""
        pending = service.set_current_lang("en")
        loader.complete_load()
        pending.result(timeout=5)

        assert service.current_lang == "en"
        assert service.default_lang == "en"
        assert recorded_events == [("current", "en"), ("default", "en")]

    def test_set_default_lang_sets_both(self, service, loader, recorded_events):
        """set_default_lang() on a fresh service sets both languages."""
        pending = service.set_default_lang("en")
        loader.complete_load()
        pending.result(timeout=5)

        assert service.current_lang == "en"
        assert service.default_lang == "en"
        assert recorded_events == [("default", "en"), ("current", "en")]

    def test_events_carry_table(self, service, loader):
        """Change events carry the language's stored table."""
        events = []
        service.on_lang_change.subscribe(events.append)
        loader.complete_load()

        service.set_current_lang("el").result(timeout=5)

        assert events[0].lang == "el"
        assert events[0].translations is service.translations["el"]
        assert events[0].event_type == "lang.changed"

    def test_already_loaded_language(self, service, recorded_events):
        """Languages already loaded switch immediately."""
        service.set_translation("en", {"a": "b"})

        pending = service.set_current_lang("en")

        assert pending.done()
        assert pending.result() is service.translations["en"]
        assert recorded_events == [("current", "en"), ("default", "en")]

    def test_use_alias(self, service, loader):
        """use() is an alias of set_current_lang()."""
        loader.complete_load()
        service.use("el").result(timeout=5)
        assert service.current_lang == "el"


class TestOptimisticAssignment:
    """Languages are visible while their first load is outstanding."""

    def test_default_assigned_before_settlement(self, service, loader, recorded_events):
        """An unset default is assigned immediately, without events."""
        pending = service.set_default_lang("el")

        assert service.default_lang == "el"
        assert service.current_lang == ""
        assert not pending.done()
        assert recorded_events == []

        loader.complete_load()
        pending.result(timeout=5)
        assert recorded_events == [("default", "el"), ("current", "el")]

    def test_current_assigned_before_settlement(self, service, loader):
        """An unset current language is assigned immediately."""
        pending = service.set_current_lang("el")

        assert service.current_lang == "el"
        assert service.default_lang == ""

        loader.complete_load()
        pending.result(timeout=5)
        assert service.default_lang == "el"

    def test_set_default_keeps_existing_until_loaded(self, service, loader):
        """A set default is only replaced once the new language loads."""
        service.set_translation("en", {"a": "b"})
        service.set_default_lang("en")

        pending = service.set_default_lang("el")
        assert service.default_lang == "en"

        loader.complete_load()
        pending.result(timeout=5)
        assert service.default_lang == "el"
        assert service.current_lang == "en"

    def test_failed_load_applies_no_transition(self, service, loader, recorded_events):
        """A failing load fails the caller and fires no events."""
        loader.fail_next(RuntimeError("offline"))
        pending = service.set_current_lang("el")
        loader.complete_load()

        with pytest.raises(RuntimeError):
            pending.result(timeout=5)

        assert recorded_events == []
        assert service.current_lang == "el"
        assert service.default_lang == ""


class TestTransitionsUnderConcurrency:
    """Concurrent requests for the same transition apply it once."""

    def test_set_default_lang_loads_and_notifies_once(self, service, loader, callers):
        """Concurrent set_default_lang() calls load once and notify once."""
        events = []
        service.on_default_lang_change.subscribe(events.append)

        calls = [
            callers.submit(service.set_default_lang, "el")
            for _ in range(CONCURRENT_CALLERS)
        ]
        pending = [call.result(timeout=5) for call in calls]
        loader.complete_load()
        tables = [future.result(timeout=5) for future in pending]

        assert loader.count == 1
        assert len(events) == 1
        assert all(table is tables[0] for table in tables)
        assert service.default_lang == "el"

    def test_set_current_lang_loads_and_notifies_once(self, service, loader, callers):
        """Concurrent set_current_lang() calls load once and notify once."""
        events = []
        service.on_lang_change.subscribe(events.append)

        calls = [
            callers.submit(service.set_current_lang, "el")
            for _ in range(CONCURRENT_CALLERS)
        ]
        pending = [call.result(timeout=5) for call in calls]
        loader.complete_load()
        for future in pending:
            future.result(timeout=5)

        assert loader.count == 1
        assert len(events) == 1
        assert service.current_lang == "el"
        assert service.default_lang == "el"

    def test_waiters_observe_applied_state(self, service, loader, callers):
        """When a caller's Future resolves the transition has been applied."""
        pending = [service.set_current_lang("el") for _ in range(100)]
        loader.complete_load()

        def _observe(future):
            future.result(timeout=5)
            return service.current_lang, service.default_lang

        observed = [callers.submit(_observe, future).result(timeout=5) for future in pending]
        assert set(observed) == {("el", "el")}

    def test_join_after_load_before_transition(self, service, loader, recorded_events):
        """A request made once the load settled waits for the pending change."""
        observed = []
        flight = service.load_translation("en")

        def _join(_):
            joined = service.set_current_lang("en")
            observed.append((joined, joined.done(), service.default_lang))

        # runs after the table is stored but before the transition is applied
        flight.add_done_callback(_join)
        first = service.set_current_lang("en")
        loader.complete_load()
        first.result(timeout=5)

        joined, done, default_lang = observed[0]
        assert joined is first
        assert done is False
        assert default_lang == ""
        assert joined.result(timeout=5) is service.translations["en"]
        assert recorded_events == [("current", "en"), ("default", "en")]

    def test_switch_to_loaded_language_notifies_once(
        self, service, loader, callers, monkeypatch
    ):
        """Concurrent switches to a loaded language apply and notify once."""
        loader.complete_load()
        service.set_default_lang("en").result(timeout=5)
        service.load_translation("el").result(timeout=5)

        events = []
        service.on_default_lang_change.subscribe(events.append)

        apply_default_lang = service._apply_default_lang

        def _slow_apply(lang, pending_events):
            time.sleep(0.01)
            apply_default_lang(lang, pending_events)

        monkeypatch.setattr(service, "_apply_default_lang", _slow_apply)
        barrier = threading.Barrier(SWITCHING_CALLERS)

        def _switch():
            barrier.wait(timeout=5)
            return service.set_default_lang("el")

        calls = [callers.submit(_switch) for _ in range(SWITCHING_CALLERS)]
        for call in calls:
            call.result(timeout=5).result(timeout=5)

        assert len(events) == 1
        assert service.default_lang == "el"
        assert service.current_lang == "en"


class TestConstruction:
    """Options and store seeding."""

    def test_default_language_option(self, loader, i18n_settings):
        """default_language seeds the store's default without loading."""
        options = i18n_settings.model_copy(update={"default_language": "en"})
        with TranslateService(loader=loader, options=options) as service:
            assert service.default_lang == "en"
            assert service.current_lang == ""
            assert loader.count == 0
            loader.complete_load()

    def test_store_seeding(self, loader, i18n_settings):
        """TranslateStore(default_lang) seeds both languages."""
        store = TranslateStore("en")
        with TranslateService(store=store, loader=loader, options=i18n_settings) as service:
            assert service.default_lang == "en"
            assert service.current_lang == "en"
            assert "en" in service.langs
            loader.complete_load()

    def test_same_default_and_loaded_returns_cached(self, service, loader, recorded_events):
        """Re-setting the loaded default returns the table without events."""
        loader.complete_load()
        service.set_default_lang("en").result(timeout=5)
        recorded_events.clear()

        pending = service.set_default_lang("en")

        assert pending.done()
        assert pending.result() is service.translations["en"]
        assert recorded_events == []


class TestTransitionLogging:
    """Language changes are logged per channel."""

    def test_default_change_logged_separately(self, service, monkeypatch):
        """Current and default changes log distinct events."""
        mock_logger = MagicMock()
        monkeypatch.setattr("localekit.i18n.service.logger", mock_logger)
        service.set_translation("en", {"a": "b"})

        service.set_current_lang("en")

        logged = [c.args[0] for c in mock_logger.info.call_args_list]
        assert logged == ["lang_changed", "default_lang_changed"]
