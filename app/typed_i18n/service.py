"""Translation service for dependency injection.

Provides a class-based interface to the i18n system for easier DI and testing.
"""

from typing import Any, List, Optional

from typed_i18n.lazy import TranslatableString
from typed_i18n.models import MessageField
from typed_i18n.translator import Translator


class TranslationService:
    """Class-based translation service.

    Thin facade over a shared Translator so handlers can depend on a service
    that is easy to replace with a mock.

    Usage:
        service = TranslationService(translator)
        service.translate(AppDictionary.app_started, language="en")
        notice = service.lazy(AppDictionary.transfer_money_to_account, 10, "John")
    """

    def __init__(self, translator: Translator):
        self._translator = translator

    def translate(
        self,
        selector: MessageField,
        *args: Any,
        language: Optional[str] = None,
    ) -> str:
        """Translate a message.

        Args:
            selector: Message selector
            *args: Message arguments
            language: Requested language (default: translator's default language)

        Returns:
            Formatted message, or "" when no dictionary produces one
        """
        return self._translator.translate(language, selector, *args)

    def lazy(self, selector: MessageField, *args: Any) -> TranslatableString:
        """Capture a message for rendering once the language is known."""
        return TranslatableString(self._translator, selector, *args)

    def get_available_languages(self) -> List[str]:
        return self._translator.get_available_languages()

    @property
    def translator(self) -> Translator:
        """Access underlying Translator instance."""
        return self._translator
