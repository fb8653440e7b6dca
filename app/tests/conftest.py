"""Shared fixtures for the localekit test suite."""

import pytest

from localekit.configuration import FileLoaderSettings, HttpLoaderSettings, I18nSettings, Settings
from localekit.i18n.store import reset_shared_store


@pytest.fixture
def i18n_settings():
    """I18nSettings with library defaults, independent of the environment."""
    return I18nSettings(
        default_language="",
        use_default_lang=True,
        isolate=False,
        extend=False,
        max_workers=4,
    )


@pytest.fixture
def settings(i18n_settings):
    """Settings with no loader configured."""
    return Settings(
        LOG_LEVEL="INFO",
        ENVIRONMENT="test",
        i18n=i18n_settings,
        http_loader=HttpLoaderSettings(base_url=None),
        file_loader=FileLoaderSettings(translations_dir=None),
    )


@pytest.fixture
def shared_store():
    """Fresh process-wide store, replaced again after the test."""
    store = reset_shared_store()
    yield store
    reset_shared_store()
