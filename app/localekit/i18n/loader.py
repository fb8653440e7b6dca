"""Translation loading interface and implementations.

Defines the contract for loading a language's table and provides
in-memory, HTTP and file system loaders. Loaders never cache: caching and
deduplication belong to TranslateService.
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Mapping, Optional

import requests
import yaml

from localekit.configuration import HttpLoaderSettings
from localekit.i18n.exceptions import TranslationLoadError
from localekit.i18n.models import Translations
from localekit.logging import get_module_logger

logger = get_module_logger()


class TranslateLoader(ABC):
    """Abstract base for translation loaders.

    Implementations fetch the table for one language. The call may block;
    TranslateService runs it on a worker thread.
    """

    @abstractmethod
    def get_translation(self, lang: str) -> Translations:
        """Load translations for a language.

        Args:
            lang: Language tag (e.g. "en", "el").

        Returns:
            Flat Translations table.

        Raises:
            TranslationLoadError: If the table cannot be produced.
        """
        pass


class StaticTranslateLoader(TranslateLoader):
    """Serves tables from memory.

    Unknown languages load as empty tables. Every call returns a fresh copy
    so the service can merge into or clear what it stores.

    Attributes:
        tables: Mapping of language tag to its table.
    """

    def __init__(self, tables: Optional[Mapping[str, Mapping[str, str]]] = None):
        self.tables: Dict[str, Mapping[str, str]] = dict(tables or {})

    def get_translation(self, lang: str) -> Translations:
        return Translations(self.tables.get(lang, {}))


class HttpTranslateLoader(TranslateLoader):
    """Fetches JSON translation files over HTTP.

    Requests ``{base_url}{prefix}{lang}{suffix}`` and flattens the decoded
    document with Translations.from_json().

    Attributes:
        settings: HttpLoaderSettings with URL parts and timeout.
        session: Requests session with connection pooling.
    """

    def __init__(
        self,
        settings: Optional[HttpLoaderSettings] = None,
        session: Optional[requests.Session] = None,
    ):
        """Initialize HTTP translation loader.

        Args:
            settings: URL parts and timeout (default: from environment).
            session: Optional pre-configured requests session.
        """
        self.settings = settings or HttpLoaderSettings()
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/json"})

    def get_translation(self, lang: str) -> Translations:
        url = self.settings.url_for(lang)
        try:
            response = self.session.get(url, timeout=self.settings.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as e:
            logger.error("http_translation_fetch_failed", lang=lang, url=url, error=str(e))
            raise TranslationLoadError(lang, str(e)) from e
        except ValueError as e:
            logger.error("http_translation_decode_failed", lang=lang, url=url, error=str(e))
            raise TranslationLoadError(lang, f"invalid JSON from {url}") from e

        translations = Translations.from_json(data)
        logger.info(
            "fetched_translations",
            lang=lang,
            url=url,
            key_count=len(translations),
        )
        return translations


class FileTranslateLoader(TranslateLoader):
    """Loads JSON or YAML translation files from a directory.

    For a language ``el`` the loader reads ``el.json``, ``el.yml`` and
    ``el.yaml`` plus any domain files named ``<domain>.el.json|yml|yaml``.
    Matching files are merged in sorted order; later files override earlier
    ones.

    Attributes:
        translations_dir: Path to the directory with translation files.
    """

    EXTENSIONS = (".json", ".yml", ".yaml")

    def __init__(self, translations_dir: Path):
        """Initialize file translation loader.

        Args:
            translations_dir: Directory containing translation files.

        Raises:
            ValueError: If the directory does not exist.
        """
        self.translations_dir = Path(translations_dir)

        if not self.translations_dir.is_dir():
            raise ValueError(
                f"Translations directory not found: {self.translations_dir}"
            )

        logger.info(
            "initialized_file_loader",
            translations_dir=str(self.translations_dir),
        )

    def _files_for(self, lang: str) -> list:
        files = []
        for extension in self.EXTENSIONS:
            files.extend(self.translations_dir.glob(f"{lang}{extension}"))
            files.extend(self.translations_dir.glob(f"*.{lang}{extension}"))
        return sorted(set(files))

    def get_translation(self, lang: str) -> Translations:
        files = self._files_for(lang)
        if not files:
            raise TranslationLoadError(
                lang, f"no translation files in {self.translations_dir}"
            )

        translations = Translations()
        for path in files:
            try:
                with open(path, "r", encoding="utf-8") as f:
                    if path.suffix == ".json":
                        data = json.load(f)
                    else:
                        data = yaml.safe_load(f)
            except (yaml.YAMLError, json.JSONDecodeError) as e:
                logger.error("translation_parse_error", file=str(path), error=str(e))
                raise TranslationLoadError(lang, f"failed to parse {path}: {e}") from e

            if data is None:
                continue
            if not isinstance(data, (dict, list)):
                logger.warning("invalid_translation_format", file=str(path), expected="dict")
                continue
            translations.merge(Translations.from_json(data))

        logger.info(
            "loaded_translation_files",
            lang=lang,
            file_count=len(files),
            key_count=len(translations),
        )
        return translations
