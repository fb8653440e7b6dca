"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import ControlledLoader, make_parameters, make_translations

__all__ = [
    "ControlledLoader",
    "make_parameters",
    "make_translations",
]
