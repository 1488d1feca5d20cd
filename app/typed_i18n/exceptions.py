"""Custom exceptions for the typed i18n system.

Only defects in dictionary data or call sites raise. A translation that cannot
be found is never an error: it resolves to an empty string.
"""


class I18nError(Exception):
    """Base exception for all i18n errors.

    Example:
        try:
            translator.translate("en", AppDictionary.greeting, 42)
        except I18nError as e:
            logger.error("i18n_error", error=str(e))
    """

    pass


class SignatureMismatchError(I18nError, TypeError):
    """Raised when arguments do not match a message's declared signature.

    Example:
        >>> translator.translate(AppDictionary.transfer, "ten", "John")
        Traceback (most recent call last):
        ...
        SignatureMismatchError: Message 'transfer' argument 0 expects int, got str
    """

    pass


class TemplateError(I18nError, ValueError):
    """Raised when template text does not fit its declared argument list.

    Example:
        >>> MessageTemplate("Transfer {0} to {2}", (int, str))
        Traceback (most recent call last):
        ...
        TemplateError: Placeholder {2} is out of range for 2 argument(s)
    """

    pass


class DictionaryError(I18nError, ValueError):
    """Raised when a dictionary or dictionary collection is malformed."""

    pass


class UnknownSelectorError(I18nError, TypeError):
    """Raised when a selector belongs to a different dictionary class."""

    pass
