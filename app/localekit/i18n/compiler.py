"""Translation compilers.

A compiler transforms freshly loaded tables before they are stored.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from localekit.i18n.models import Translations


class TranslateCompiler(ABC):
    """Abstract base for translation compilers."""

    @abstractmethod
    def compile(self, value: str, lang: str) -> str:
        """Compile a single translated value."""
        pass

    @abstractmethod
    def compile_translations(
        self, translations: "Translations", lang: str
    ) -> "Translations":
        """Compile a whole table for a language."""
        pass


class DefaultTranslateCompiler(TranslateCompiler):
    """Identity compiler."""

    def compile(self, value: str, lang: str) -> str:
        return value

    def compile_translations(
        self, translations: "Translations", lang: str
    ) -> "Translations":
        return translations


default_compiler = DefaultTranslateCompiler()
