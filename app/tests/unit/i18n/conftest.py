"""Feature-level fixtures for i18n core tests."""

from concurrent.futures import ThreadPoolExecutor

import pytest
import yaml

from localekit.i18n import TranslateService, TranslateStore
from tests.factories.i18n import ControlledLoader


@pytest.fixture
def loader():
    """Loader serving English and Greek tables once released."""
    return ControlledLoader(
        {
            "en": {"greeting": "Hello {name}", "menu.open": "Open", "only.en": "English"},
            "el": {"greeting": "Γεια {name}", "menu.open": "Άνοιγμα"},
        }
    )


@pytest.fixture
def service(loader, i18n_settings):
    """TranslateService with a private store and a controlled loader."""
    service = TranslateService(store=TranslateStore(), loader=loader, options=i18n_settings)
    yield service
    loader.complete_load()
    service.shutdown()


@pytest.fixture
def callers():
    """Thread pool used to issue many concurrent calls."""
    pool = ThreadPoolExecutor(max_workers=32)
    yield pool
    pool.shutdown(wait=True)


@pytest.fixture
def recorded_events(service):
    """Events from the lang and default lang channels, in emission order."""
    events = []
    service.on_lang_change.subscribe(lambda e: events.append(("current", e.lang)))
    service.on_default_lang_change.subscribe(lambda e: events.append(("default", e.lang)))
    return events


@pytest.fixture
def translations_dir(tmp_path):
    """Directory with JSON and YAML translation files.

    - en.json       {"menu": {"open": "Open"}, "greeting": "Hello {name}"}
    - errors.en.yml {"errors": {"not_found": "Not found"}}
    - el.yml        {"menu": {"open": "Άνοιγμα"}}
    """
    (tmp_path / "en.json").write_text(
        '{"menu": {"open": "Open"}, "greeting": "Hello {name}"}', encoding="utf-8"
    )
    with open(tmp_path / "errors.en.yml", "w", encoding="utf-8") as f:
        yaml.dump({"errors": {"not_found": "Not found"}}, f)
    with open(tmp_path / "el.yml", "w", encoding="utf-8") as f:
        yaml.dump({"menu": {"open": "Άνοιγμα"}}, f, allow_unicode=True)
    return tmp_path
