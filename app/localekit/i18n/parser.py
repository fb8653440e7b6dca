"""Interpolation parsers.

A parser renders a translation template with the parameters of a lookup.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Optional


class TranslateParser(ABC):
    """Abstract base for interpolation parsers."""

    @abstractmethod
    def interpolate(self, expr: str, parameters: Optional[Mapping] = None) -> str:
        """Render a template.

        Args:
            expr: Template string, e.g. "Hello {name}".
            parameters: TranslateParameters or any mapping of names to values.

        Returns:
            Rendered string.
        """
        pass


class DefaultTranslateParser(TranslateParser):
    """Replaces every literal ``{key}`` with the matching parameter value.

    Placeholders without a matching parameter are left as they are.
    """

    def interpolate(self, expr: str, parameters: Optional[Mapping] = None) -> str:
        if not parameters:
            return expr
        for key, value in parameters.items():
            expr = expr.replace(f"{{{key}}}", str(value))
        return expr


default_parser = DefaultTranslateParser()
