"""Translator service for resolving messages against per-language dictionaries.

Resolution order for translate(language, selector, *args), stopping at the
first non-empty result:

1. The requested language (if given and present)
2. The default language (if present)
3. The first dictionary in the collection (returned even if empty)
4. An empty string when the collection is empty

An empty formatted string counts as "not found" at tiers 1 and 2, so a message
that legitimately formats to "" in the requested language falls through to
the default language's version.
"""

from types import MappingProxyType
from typing import TYPE_CHECKING, Any, List, Mapping, Optional, Tuple, Type, overload

from typed_i18n.configuration import settings
from typed_i18n.exceptions import DictionaryError, UnknownSelectorError
from typed_i18n.logging import get_module_logger
from typed_i18n.models import Dictionary, MessageField

if TYPE_CHECKING:
    from typed_i18n.lazy import TranslatableString

logger = get_module_logger()


class Translator:
    """Resolves message selectors to formatted strings with language fallback.

    Immutable after construction, so concurrent translate() calls need no
    locking. Share one instance by reference across call sites.

    Attributes:
        default_language: Language code tried when the requested one fails.
        dictionaries: Read-only mapping of language code -> Dictionary.
        dictionary_type: The Dictionary subclass of every entry, or None when
            the collection is empty.
    """

    def __init__(
        self,
        default_language: str,
        dictionaries: Mapping[str, Dictionary],
    ):
        """Initialize Translator.

        Args:
            default_language: Language code used when none is requested.
            dictionaries: Language code -> Dictionary. Copied on construction.

        Raises:
            DictionaryError: If entries are not instances of one Dictionary subclass.
        """
        collection = dict(dictionaries)
        dictionary_type: Optional[Type[Dictionary]] = None
        for code, dictionary in collection.items():
            if not isinstance(code, str):
                raise DictionaryError(f"Language code must be str, got {code!r}")
            if not isinstance(dictionary, Dictionary):
                raise DictionaryError(
                    f"Entry '{code}' must be a Dictionary, got {type(dictionary).__name__}"
                )
            if dictionary_type is None:
                dictionary_type = type(dictionary)
            elif type(dictionary) is not dictionary_type:
                raise DictionaryError(
                    f"Entry '{code}' is a {type(dictionary).__name__}, "
                    f"expected {dictionary_type.__name__}"
                )

        self._default_language = default_language
        self._dictionaries = MappingProxyType(collection)
        self._dictionary_type = dictionary_type
        logger.info(
            "initialized_translator",
            default_language=default_language,
            languages=list(collection),
        )

    @property
    def default_language(self) -> str:
        return self._default_language

    @property
    def dictionaries(self) -> Mapping[str, Dictionary]:
        return self._dictionaries

    @property
    def dictionary_type(self) -> Optional[Type[Dictionary]]:
        return self._dictionary_type

    @overload
    def translate(self, selector: MessageField, *args: Any) -> str: ...

    @overload
    def translate(
        self, language: Optional[str], selector: MessageField, *args: Any
    ) -> str: ...

    def translate(self, *args: Any) -> str:
        """Translate a message into a language, falling back as needed.

        Called either as translate(language, selector, *args) or as
        translate(selector, *args); the latter skips the requested-language
        tier and starts at the default language.

        Returns:
            Formatted message, or "" when no dictionary produces one.

        Raises:
            SignatureMismatchError: If args do not match the selector's signature.
            UnknownSelectorError: If the selector belongs to another Dictionary class.
            TypeError: If no selector is given.
        """
        if args and isinstance(args[0], MessageField):
            language, selector, message_args = None, args[0], args[1:]
        elif len(args) >= 2 and isinstance(args[1], MessageField):
            language, selector, message_args = args[0], args[1], args[2:]
        else:
            raise TypeError(
                "translate() expects (selector, *args) or (language, selector, *args)"
            )
        return self._resolve(language, selector, message_args)

    def lazy(self, selector: MessageField, *args: Any) -> "TranslatableString":
        """Capture a message now and render it once the language is known.

        Returns:
            TranslatableString bound to this translator.
        """
        from typed_i18n.lazy import TranslatableString

        return TranslatableString(self, selector, *args)

    def get_available_languages(self) -> List[str]:
        """Get language codes in collection order."""
        return list(self._dictionaries)

    def has_language(self, language: Optional[str]) -> bool:
        return bool(language) and language in self._dictionaries

    def get_dictionary(self, language: str) -> Optional[Dictionary]:
        return self._dictionaries.get(language)

    def _resolve(
        self,
        language: Optional[str],
        selector: MessageField,
        args: Tuple[Any, ...],
    ) -> str:
        # Signature first so a bad call fails even against an empty collection
        selector.check_args(args)
        if self._dictionary_type is not None and not self._dictionary_type.owns(selector):
            raise UnknownSelectorError(
                f"{selector!r} is not a message of {self._dictionary_type.__name__}"
            )

        if language:
            dictionary = self._dictionaries.get(language)
            if dictionary is not None:
                result = self._format(dictionary, selector, args)
                if result:
                    return result

        dictionary = self._dictionaries.get(self._default_language)
        if dictionary is not None:
            result = self._format(dictionary, selector, args)
            if result:
                if language and language != self._default_language:
                    logger.debug(
                        "used_default_language_translation",
                        message_name=selector.name,
                        requested_language=language,
                        default_language=self._default_language,
                    )
                return result

        if not self._dictionaries:
            self._report_missing(language, selector)
            return ""

        fallback_language, dictionary = next(iter(self._dictionaries.items()))
        result = self._format(dictionary, selector, args)
        if result:
            logger.debug(
                "used_first_available_translation",
                message_name=selector.name,
                requested_language=language,
                fallback_language=fallback_language,
            )
        else:
            self._report_missing(language, selector)
        return result

    @staticmethod
    def _format(
        dictionary: Dictionary, selector: MessageField, args: Tuple[Any, ...]
    ) -> str:
        return dictionary.template(selector).text.format(*args)

    def _report_missing(self, language: Optional[str], selector: MessageField) -> None:
        if settings.i18n.WARN_ON_MISSING:
            logger.warning(
                "translation_not_found",
                message_name=selector.name,
                requested_language=language,
                default_language=self._default_language,
                languages=list(self._dictionaries),
            )
