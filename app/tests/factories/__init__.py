"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    SampleDictionary,
    make_dictionaries,
    make_en_dictionary,
    make_ru_dictionary,
    make_translator,
)

__all__ = [
    "SampleDictionary",
    "make_dictionaries",
    "make_en_dictionary",
    "make_ru_dictionary",
    "make_translator",
]
