"""Tests for localekit.i18n.loader module."""

from unittest.mock import MagicMock

import pytest
import requests

from localekit.configuration import HttpLoaderSettings
from localekit.i18n import (
    FileTranslateLoader,
    HttpTranslateLoader,
    StaticTranslateLoader,
    TranslationLoadError,
    Translations,
)

pytestmark = pytest.mark.unit


class TestStaticTranslateLoader:
    """Tests for StaticTranslateLoader."""

    def test_returns_configured_table(self):
        """get_translation() returns the table for the language."""
        loader = StaticTranslateLoader({"en": {"hello": "Hello"}})
        result = loader.get_translation("en")

        assert isinstance(result, Translations)
        assert result == {"hello": "Hello"}

    def test_unknown_language_is_empty(self):
        """Unknown languages load as empty tables."""
        assert StaticTranslateLoader().get_translation("fr") == {}

    def test_returns_fresh_copies(self):
        """Mutating a returned table does not change the source."""
        loader = StaticTranslateLoader({"en": {"hello": "Hello"}})
        first = loader.get_translation("en")
        first["hello"] = "Changed"

        assert loader.get_translation("en")["hello"] == "Hello"
        assert loader.get_translation("en") is not first


@pytest.fixture
def http_settings():
    return HttpLoaderSettings(
        base_url="https://cdn.example.com/",
        prefix="/i18n/",
        suffix=".json",
        timeout=2.5,
    )


@pytest.fixture
def mock_session():
    session = MagicMock(spec=requests.Session)
    session.headers = {}
    return session


class TestHttpTranslateLoader:
    """Tests for HttpTranslateLoader."""

    def test_requests_language_url(self, http_settings, mock_session):
        """The language file URL is built from the settings."""
        mock_session.get.return_value.json.return_value = {"hello": "Hello"}
        loader = HttpTranslateLoader(settings=http_settings, session=mock_session)

        loader.get_translation("el")

        mock_session.get.assert_called_once_with(
            "https://cdn.example.com/i18n/el.json", timeout=2.5
        )
        assert mock_session.headers["Accept"] == "application/json"

    def test_flattens_nested_documents(self, http_settings, mock_session):
        """Nested JSON documents become dot separated keys."""
        mock_session.get.return_value.json.return_value = {
            "menu": {"open": "Open", "close": "Close"},
            "enabled": True,
        }
        loader = HttpTranslateLoader(settings=http_settings, session=mock_session)

        result = loader.get_translation("en")

        assert result == {"menu.open": "Open", "menu.close": "Close", "enabled": "true"}

    def test_http_error_raises_load_error(self, http_settings, mock_session):
        """HTTP errors surface as TranslationLoadError."""
        mock_session.get.return_value.raise_for_status.side_effect = requests.HTTPError(
            "404 Client Error"
        )
        loader = HttpTranslateLoader(settings=http_settings, session=mock_session)

        with pytest.raises(TranslationLoadError) as exc_info:
            loader.get_translation("xx")

        assert exc_info.value.lang == "xx"
        assert "404" in str(exc_info.value)

    def test_connection_error_raises_load_error(self, http_settings, mock_session):
        """Connection failures surface as TranslationLoadError."""
        mock_session.get.side_effect = requests.ConnectionError("refused")
        loader = HttpTranslateLoader(settings=http_settings, session=mock_session)

        with pytest.raises(TranslationLoadError):
            loader.get_translation("en")

    def test_invalid_json_raises_load_error(self, http_settings, mock_session):
        """Undecodable bodies surface as TranslationLoadError."""
        mock_session.get.return_value.json.side_effect = ValueError("Expecting value")
        loader = HttpTranslateLoader(settings=http_settings, session=mock_session)

        with pytest.raises(TranslationLoadError, match="invalid JSON"):
            loader.get_translation("en")

    def test_non_object_document_is_empty(self, http_settings, mock_session):
        """A JSON scalar loads as an empty table."""
        mock_session.get.return_value.json.return_value = "nope"
        loader = HttpTranslateLoader(settings=http_settings, session=mock_session)

        assert loader.get_translation("en") == {}


class TestFileTranslateLoader:
    """Tests for FileTranslateLoader."""

    def test_initialization_nonexistent_directory(self, tmp_path):
        """FileTranslateLoader raises ValueError for a missing directory."""
        with pytest.raises(ValueError):
            FileTranslateLoader(tmp_path / "nonexistent")

    def test_merges_language_and_domain_files(self, translations_dir):
        """en.json and errors.en.yml are merged into one flat table."""
        loader = FileTranslateLoader(translations_dir)
        result = loader.get_translation("en")

        assert result == {
            "menu.open": "Open",
            "greeting": "Hello {name}",
            "errors.not_found": "Not found",
        }

    def test_yaml_only_language(self, translations_dir):
        """A language with only a YAML file loads from it."""
        loader = FileTranslateLoader(translations_dir)
        assert loader.get_translation("el") == {"menu.open": "Άνοιγμα"}

    def test_missing_language_raises_load_error(self, translations_dir):
        """A language without files raises TranslationLoadError."""
        loader = FileTranslateLoader(translations_dir)
        with pytest.raises(TranslationLoadError) as exc_info:
            loader.get_translation("fr")
        assert exc_info.value.lang == "fr"

    def test_parse_error_raises_load_error(self, tmp_path):
        """Malformed files raise TranslationLoadError."""
        (tmp_path / "en.json").write_text("{not json", encoding="utf-8")
        loader = FileTranslateLoader(tmp_path)

        with pytest.raises(TranslationLoadError, match="failed to parse"):
            loader.get_translation("en")

    def test_empty_file_is_skipped(self, tmp_path):
        """Empty YAML files contribute nothing."""
        (tmp_path / "en.yml").write_text("", encoding="utf-8")
        (tmp_path / "extra.en.yml").write_text("hello: Hello\n", encoding="utf-8")
        loader = FileTranslateLoader(tmp_path)

        assert loader.get_translation("en") == {"hello": "Hello"}
