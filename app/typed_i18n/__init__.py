"""typed-i18n - statically declared message dictionaries with language fallback.

Main components:
- models: MessageTemplate, MessageField, message, Dictionary
- translator: Translator with requested -> default -> first available fallback
- lazy: TranslatableString for rendering once the language is known
- factory: create_translator
- service: TranslationService facade for dependency injection
"""

from typed_i18n.exceptions import (
    DictionaryError,
    I18nError,
    SignatureMismatchError,
    TemplateError,
    UnknownSelectorError,
)
from typed_i18n.factory import create_translator
from typed_i18n.lazy import TranslatableString
from typed_i18n.models import Dictionary, MessageField, MessageTemplate, message
from typed_i18n.service import TranslationService
from typed_i18n.translator import Translator

__all__ = [
    "Dictionary",
    "MessageField",
    "MessageTemplate",
    "message",
    "Translator",
    "TranslatableString",
    "TranslationService",
    "create_translator",
    "I18nError",
    "SignatureMismatchError",
    "TemplateError",
    "DictionaryError",
    "UnknownSelectorError",
]
