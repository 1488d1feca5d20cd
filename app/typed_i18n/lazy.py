"""Deferred translation: capture a message now, pick the language later.

Typical use is building a message deep inside a service where the user's
language is unknown, then rendering it at the edge:

    notice = TranslatableString(translator, AppDictionary.transfer, 10, "John")
    ...
    notice.translate(user.language)
"""

import copy
from typing import Any, Optional, Tuple

from typed_i18n.models import MessageField
from typed_i18n.translator import Translator


class TranslatableString:
    """A message selector and argument snapshot bound to a translator.

    Arguments are validated and deep-copied on construction, so later changes
    to the caller's objects never show up in rendered output. The value holds
    no state between renders and may be rendered any number of times, from
    any thread, with a different language each time.

    Equality compares translator identity, selector and arguments. Hashing
    requires hashable arguments; a value captured with a list argument raises
    TypeError from hash().
    """

    __slots__ = ("_translator", "_selector", "_args")

    def __init__(self, translator: Translator, selector: MessageField, *args: Any):
        """Capture a message for later translation.

        Args:
            translator: Translator the message is rendered with.
            selector: Message selector (a Dictionary class attribute).
            *args: Message arguments matching the selector's signature.

        Raises:
            TypeError: If translator or selector have the wrong type.
            SignatureMismatchError: If args do not match the selector's signature.
        """
        if not isinstance(translator, Translator):
            raise TypeError(f"Expected Translator, got {type(translator).__name__}")
        if not isinstance(selector, MessageField):
            raise TypeError(f"Expected MessageField, got {type(selector).__name__}")
        selector.check_args(args)

        self._translator = translator
        self._selector = selector
        self._args: Tuple[Any, ...] = copy.deepcopy(tuple(args))

    @property
    def translator(self) -> Translator:
        return self._translator

    @property
    def selector(self) -> MessageField:
        return self._selector

    @property
    def args(self) -> Tuple[Any, ...]:
        return self._args

    def translate(self, language: Optional[str] = None) -> str:
        """Render the captured message.

        Args:
            language: Language code; None or "" starts at the default language.

        Returns:
            Same result as translator.translate(language, selector, *args).
        """
        return self._translator.translate(language, self._selector, *self._args)

    def __str__(self) -> str:
        return self.translate()

    def __repr__(self) -> str:
        args = ", ".join(repr(arg) for arg in self._args)
        return f"TranslatableString({self._selector.name}, ({args}))"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TranslatableString):
            return NotImplemented
        return (
            self._translator is other._translator
            and self._selector is other._selector
            and self._args == other._args
        )

    def __hash__(self) -> int:
        return hash((id(self._translator), id(self._selector), self._args))
