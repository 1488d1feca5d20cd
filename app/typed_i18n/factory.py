"""Factory functions for creating i18n components."""

from typing import Mapping, Optional

from typed_i18n.configuration import settings
from typed_i18n.logging import get_module_logger
from typed_i18n.models import Dictionary
from typed_i18n.translator import Translator

logger = get_module_logger()


def create_translator(
    dictionaries: Mapping[str, Dictionary],
    default_language: Optional[str] = None,
) -> Translator:
    """Create a Translator to be shared by reference across the application.

    Args:
        dictionaries: Language code -> Dictionary, all of one Dictionary subclass.
        default_language: Language used when none is requested
            (default: settings.i18n.DEFAULT_LANGUAGE).

    Returns:
        Translator: Configured translator instance

    Raises:
        DictionaryError: If the dictionaries are not of one Dictionary subclass.

    Usage:
        translator = create_translator(
            {"en": create_en_dictionary(), "ru": create_ru_dictionary()},
            default_language="ru",
        )
    """
    if default_language is None:
        default_language = settings.i18n.DEFAULT_LANGUAGE

    translator = Translator(default_language, dictionaries)

    if default_language not in translator.dictionaries:
        logger.warning(
            "default_language_not_available",
            default_language=default_language,
            languages=translator.get_available_languages(),
        )

    logger.info(
        "translator_created",
        default_language=default_language,
        language_count=len(translator.dictionaries),
    )
    return translator
