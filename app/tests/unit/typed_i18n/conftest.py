"""Feature-level fixtures for i18n system tests."""

import pytest

from tests.factories.i18n import (
    make_dictionaries,
    make_en_dictionary,
    make_ru_dictionary,
    make_translator,
)


@pytest.fixture
def en_dictionary():
    return make_en_dictionary()


@pytest.fixture
def ru_dictionary():
    return make_ru_dictionary()


@pytest.fixture
def dictionaries():
    """en and ru dictionaries, en first in iteration order."""
    return make_dictionaries()


@pytest.fixture
def translator(dictionaries):
    """Translator over en/ru with ru as the default language."""
    return make_translator("ru", dictionaries)


@pytest.fixture
def empty_translator():
    """Translator with no dictionaries at all."""
    return make_translator("ru", {})
