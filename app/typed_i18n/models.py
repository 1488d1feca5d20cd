"""Dictionary models for the typed i18n system.

Defines the core data structures for declaring messages:

- MessageTemplate: immutable format text bound to its argument types
- MessageField: descriptor declaring one message on a Dictionary subclass
- Dictionary: base class for one language's complete set of messages

Example:
    class AppDictionary(Dictionary):
        app_started = message()
        transfer_money_to_account = message(int, str)

    en = AppDictionary(
        app_started="Application started",
        transfer_money_to_account="Transfer {} to account {}",
    )

    en.transfer_money_to_account.format(10, "John")
    # "Transfer 10 to account John"
"""

from dataclasses import dataclass
from string import Formatter
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from typed_i18n.exceptions import (
    DictionaryError,
    SignatureMismatchError,
    TemplateError,
    UnknownSelectorError,
)

_formatter = Formatter()
_CONVERSIONS = (None, "r", "s", "a")


def _type_name(arg_type: Any) -> str:
    return getattr(arg_type, "__name__", repr(arg_type))


def _validate_arg_types(arg_types: Sequence[Any]) -> None:
    for arg_type in arg_types:
        if arg_type is not Any and not isinstance(arg_type, type):
            raise TemplateError(
                f"Argument type must be a class or typing.Any, got {arg_type!r}"
            )


def _accepts(expected: Any, value: Any) -> bool:
    """Check a single argument against its declared type."""
    if expected is Any or expected is object:
        return True
    # bool is an int subclass but never a valid number argument
    if isinstance(value, bool) and expected in (int, float):
        return False
    if expected is float:
        return isinstance(value, (int, float))
    return isinstance(value, expected)


def check_signature(label: str, arg_types: Tuple[Any, ...], args: Sequence[Any]) -> None:
    """Validate call-site arguments against a declared signature.

    Args:
        label: Message name used in error messages.
        arg_types: Declared argument types.
        args: Arguments supplied by the caller.

    Raises:
        SignatureMismatchError: On wrong argument count or type.
    """
    if len(args) != len(arg_types):
        raise SignatureMismatchError(
            f"Message '{label}' expects {len(arg_types)} argument(s), got {len(args)}"
        )
    for position, (expected, value) in enumerate(zip(arg_types, args)):
        if not _accepts(expected, value):
            raise SignatureMismatchError(
                f"Message '{label}' argument {position} expects "
                f"{_type_name(expected)}, got {type(value).__name__}"
            )


def _placeholders(text: str) -> List[Tuple[Optional[int], str, Optional[str]]]:
    """Collect (index, format_spec, conversion) for every placeholder.

    Automatically numbered fields ({}) are reported with index None.
    Placeholders nested in a format spec follow their enclosing field.
    """
    try:
        parsed = list(_formatter.parse(text))
    except ValueError as e:
        raise TemplateError(f"Malformed template {text!r}: {e}") from e

    placeholders: List[Tuple[Optional[int], str, Optional[str]]] = []
    for _literal, field_name, format_spec, conversion in parsed:
        if field_name is None:
            continue
        if field_name == "":
            index = None
        elif field_name.isdecimal() and field_name.isascii():
            index = int(field_name)
        else:
            raise TemplateError(
                f"Template {text!r} uses placeholder {{{field_name}}}; "
                "only bare positional placeholders are supported"
            )
        if conversion not in _CONVERSIONS:
            raise TemplateError(
                f"Template {text!r} uses unknown conversion !{conversion}"
            )
        placeholders.append((index, format_spec or "", conversion))
        if format_spec and "{" in format_spec:
            placeholders.extend(_placeholders(format_spec))
    return placeholders


def _check_format_spec(
    text: str, arg_type: Any, format_spec: str, conversion: Optional[str]
) -> None:
    """Dry-run a format spec against a sample value of the declared type.

    Specs containing nested placeholders, untyped arguments and types that
    cannot be built without arguments are left unchecked.
    """
    if not format_spec or "{" in format_spec:
        return
    if conversion is not None:
        sample: Any = ""
    elif arg_type is Any or arg_type is object:
        return
    else:
        try:
            sample = arg_type()
        except Exception:
            return
    try:
        format(sample, format_spec)
    except (TypeError, ValueError) as e:
        raise TemplateError(
            f"Format spec {format_spec!r} in {text!r} does not fit "
            f"{_type_name(arg_type)}: {e}"
        ) from e


@dataclass(frozen=True)
class MessageTemplate:
    """Immutable message text bound to an ordered list of argument types.

    The placeholder structure is validated on construction so a template that
    cannot be formatted with its declared arguments never reaches a translate
    call.

    Attributes:
        text: str.format compatible text using positional placeholders.
        arg_types: Types of the arguments, in placeholder order.
    """

    text: str
    arg_types: Tuple[Any, ...] = ()

    def __post_init__(self):
        if not isinstance(self.text, str):
            raise TemplateError(
                f"Template text must be str, got {type(self.text).__name__}"
            )
        object.__setattr__(self, "arg_types", tuple(self.arg_types))
        _validate_arg_types(self.arg_types)

        placeholders = _placeholders(self.text)
        automatic = [p for p in placeholders if p[0] is None]
        manual = [p[0] for p in placeholders if p[0] is not None]
        count = len(self.arg_types)

        if automatic and manual:
            raise TemplateError(
                f"Template {self.text!r} mixes automatic and manual field numbering"
            )
        if len(automatic) > count:
            raise TemplateError(
                f"Template {self.text!r} has {len(automatic)} placeholder(s) "
                f"for {count} argument(s)"
            )
        for index in manual:
            if index >= count:
                raise TemplateError(
                    f"Placeholder {{{index}}} in {self.text!r} is out of range "
                    f"for {count} argument(s)"
                )

        next_index = 0
        for index, format_spec, conversion in placeholders:
            if index is None:
                index, next_index = next_index, next_index + 1
            _check_format_spec(self.text, self.arg_types[index], format_spec, conversion)

    def check_args(self, args: Sequence[Any]) -> None:
        """Validate arguments against this template's signature."""
        check_signature(self.text, self.arg_types, args)

    def format(self, *args: Any) -> str:
        """Format the template after validating the arguments.

        Raises:
            SignatureMismatchError: If args do not match arg_types.
        """
        self.check_args(args)
        return self.text.format(*args)


class MessageField:
    """Descriptor declaring one message on a Dictionary subclass.

    Read from the class, a field is the message selector: it names the same
    message in every language's dictionary. Read from an instance, it returns
    that instance's MessageTemplate.
    """

    def __init__(self, *arg_types: Any):
        _validate_arg_types(arg_types)
        self.arg_types: Tuple[Any, ...] = tuple(arg_types)
        self.name: Optional[str] = None
        self.owner: Optional[type] = None

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name
        self.owner = owner

    def __get__(self, instance: Any, owner: Optional[type] = None) -> Any:
        if instance is None:
            return self
        return instance._templates[self.name]

    def __set__(self, instance: Any, value: Any) -> None:
        raise AttributeError(f"Message '{self.name}' is read-only")

    def check_args(self, args: Sequence[Any]) -> None:
        """Validate call-site arguments against this message's signature.

        Raises:
            SignatureMismatchError: On wrong argument count or type.
        """
        check_signature(str(self.name), self.arg_types, args)

    def __repr__(self) -> str:
        owner = self.owner.__name__ if self.owner else "?"
        types = ", ".join(_type_name(t) for t in self.arg_types)
        return f"<MessageField {owner}.{self.name}({types})>"


def message(*arg_types: Any) -> Any:
    """Declare a message field with the given argument types.

    Args:
        *arg_types: Classes (or typing.Any) of the message arguments, in order.

    Returns:
        MessageField descriptor.
    """
    return MessageField(*arg_types)


class Dictionary:
    """Base class for one language's complete set of message templates.

    Subclasses declare their messages with message(); every instance of a
    subclass must supply text for every declared message. Instances are
    immutable once built.
    """

    _fields: Mapping[str, MessageField] = MappingProxyType({})

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        reserved = set(dir(Dictionary)) | {"_templates"}
        fields: Dict[str, MessageField] = {}
        for klass in reversed(cls.__mro__):
            for name, value in vars(klass).items():
                if isinstance(value, MessageField):
                    if name in reserved:
                        raise DictionaryError(
                            f"{cls.__name__}.{name} shadows a Dictionary attribute"
                        )
                    fields[name] = value
                elif name in fields:
                    del fields[name]
        cls._fields = MappingProxyType(fields)

    def __init__(self, **texts: Any):
        """Build a dictionary from one text per declared message.

        Args:
            **texts: Message name -> str or MessageTemplate.

        Raises:
            DictionaryError: If a message is missing, unknown, or mistyped.
            TemplateError: If a text does not fit its message's arguments.
        """
        cls_name = type(self).__name__
        missing = [name for name in self._fields if name not in texts]
        unknown = sorted(set(texts) - set(self._fields))
        if missing:
            raise DictionaryError(f"{cls_name} is missing messages: {', '.join(missing)}")
        if unknown:
            raise DictionaryError(f"{cls_name} has unknown messages: {', '.join(unknown)}")

        templates: Dict[str, MessageTemplate] = {}
        for name, field in self._fields.items():
            value = texts[name]
            if isinstance(value, MessageTemplate):
                if value.arg_types != field.arg_types:
                    raise DictionaryError(
                        f"{cls_name}.{name} template arguments do not match the message declaration"
                    )
                templates[name] = value
            elif isinstance(value, str):
                try:
                    templates[name] = MessageTemplate(value, field.arg_types)
                except TemplateError as e:
                    raise TemplateError(f"{cls_name}.{name}: {e}") from e
            else:
                raise DictionaryError(
                    f"{cls_name}.{name} must be str or MessageTemplate, got {type(value).__name__}"
                )

        object.__setattr__(self, "_templates", MappingProxyType(templates))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @classmethod
    def fields(cls) -> Tuple[MessageField, ...]:
        """Return the declared message fields in definition order."""
        return tuple(cls._fields.values())

    @classmethod
    def get_field(cls, name: str) -> MessageField:
        """Look up a message selector by name.

        Raises:
            DictionaryError: If no message with that name is declared.
        """
        try:
            return cls._fields[name]
        except KeyError as e:
            raise DictionaryError(f"{cls.__name__} has no message '{name}'") from e

    @classmethod
    def owns(cls, selector: MessageField) -> bool:
        """Check whether a selector names a message of this dictionary class."""
        return cls._fields.get(str(selector.name)) is selector

    def template(self, selector: MessageField) -> MessageTemplate:
        """Return this dictionary's template for a selector.

        Raises:
            UnknownSelectorError: If the selector belongs to another class.
        """
        if not self.owns(selector):
            raise UnknownSelectorError(
                f"{selector!r} is not a message of {type(self).__name__}"
            )
        return self._templates[selector.name]

    def as_dict(self) -> Dict[str, str]:
        """Return message name -> template text."""
        return {name: template.text for name, template in self._templates.items()}

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return dict(self._templates) == dict(other._templates)

    def __hash__(self) -> int:
        return hash((type(self), tuple(self._templates.values())))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(self._fields)})"
