"""Translation models for the i18n core.

Defines the per-language translation table, the auto-vivifying mapping of
languages to tables, and the lazily rendered lookup result.
"""

import re
from collections.abc import Mapping
from typing import Any, Optional

from localekit.i18n.parameters import TranslateParameters
from localekit.i18n.parser import TranslateParser, default_parser

PLACEHOLDER = re.compile(r"{[^\n ]+}")


class Translations(dict):
    """Flat key to translated string table for one language.

    Reading a missing key with ``table[key]`` returns the key itself, so a
    lookup never fails. ``table.get(key)`` keeps the plain dict behaviour and
    can be used to tell a missing key from a translated one.
    """

    def __missing__(self, key: str) -> str:
        return key

    def merge(self, values: Mapping) -> None:
        """Merge another table into this one.

        Entries from ``values`` override existing ones.

        Args:
            values: Mapping of keys to translated strings.
        """
        for key, value in values.items():
            self[key] = value

    def get_parsed_result(
        self,
        key: str,
        parameters: Optional[Mapping] = None,
        parser: Optional[TranslateParser] = None,
    ) -> "TranslateString":
        """Return the lazily rendered translation for a key.

        Args:
            key: Translation key.
            parameters: Optional interpolation parameters.
            parser: Parser to render with (default: DefaultTranslateParser).

        Returns:
            TranslateString that renders on ``str()``.
        """
        return TranslateString(self[key], parameters, parser)

    @classmethod
    def from_json(cls, data: Any) -> "Translations":
        """Build a flat table from decoded JSON or YAML data.

        Nested objects and arrays are flattened into dot separated keys:
        ``{"menu": {"open": "Open"}, "tips": ["a"]}`` becomes
        ``{"menu.open": "Open", "tips.0": "a"}``. Null values are skipped.

        Args:
            data: Decoded document (dict, list or anything else).

        Returns:
            Translations; empty when ``data`` is neither a dict nor a list.
        """
        translations = cls()
        if isinstance(data, (dict, list)):
            _flatten(translations, "", data)
        return translations


def _flatten(translations: Translations, prefix: str, node: Any) -> None:
    if isinstance(node, dict):
        children = ((str(name), child) for name, child in node.items())
    else:
        children = ((str(index), child) for index, child in enumerate(node))

    for name, child in children:
        key = f"{prefix}{name}"
        if isinstance(child, (dict, list)):
            _flatten(translations, f"{key}.", child)
        elif child is None:
            continue
        elif isinstance(child, bool):
            translations[key] = "true" if child else "false"
        else:
            translations[key] = str(child)


class TranslationsDictionary(dict):
    """Mapping of language tag to Translations.

    Reading an absent language creates, stores and returns an empty table.
    Assigning a plain mapping wraps it in Translations.
    """

    def __init__(self, *args, **kwargs):
        super().__init__()
        for lang, translations in dict(*args, **kwargs).items():
            self[lang] = translations

    def __missing__(self, lang: str) -> Translations:
        return self.setdefault(lang, Translations())

    def __setitem__(self, lang: str, translations: Mapping) -> None:
        if not isinstance(translations, Translations):
            translations = Translations(translations)
        super().__setitem__(lang, translations)


class TranslateString:
    """A translation template bound to its interpolation parameters.

    Rendering is deferred until ``str()`` is called.

    Example:
        greeting = table.get_parsed_result("greeting").add("name", "Ada")
        str(greeting)  # "Hello Ada"

        # or with the pipe shorthand
        str(table.get_parsed_result("greeting") | ("name", "Ada"))
    """

    __slots__ = ("value", "parameters", "parser")

    def __init__(
        self,
        value: str,
        parameters: Optional[Mapping] = None,
        parser: Optional[TranslateParser] = None,
    ):
        self.value = value
        self.parameters = parameters
        self.parser = parser or default_parser

    def add(self, key: str, value: str) -> "TranslateString":
        """Return a copy with one more parameter.

        Templates without any placeholder are returned unchanged.
        """
        if self.parameters:
            parameters = TranslateParameters(self.parameters)
        elif PLACEHOLDER.search(self.value):
            parameters = TranslateParameters()
        else:
            return self
        parameters.set(key, value)
        return TranslateString(self.value, parameters, self.parser)

    def __or__(self, parameter) -> "TranslateString":
        key, value = parameter
        return self.add(key, value)

    def __str__(self) -> str:
        return self.parser.interpolate(self.value, self.parameters)

    def __eq__(self, other) -> bool:
        if isinstance(other, (str, TranslateString)):
            return str(self) == str(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(str(self))

    def __repr__(self) -> str:
        return f"TranslateString({self.value!r}, {self.parameters!r})"
