"""Tests for typed_i18n.models module."""

from typing import Any

import pytest

from typed_i18n.exceptions import (
    DictionaryError,
    SignatureMismatchError,
    TemplateError,
    UnknownSelectorError,
)
from typed_i18n.models import Dictionary, MessageField, MessageTemplate, message
from tests.factories.i18n import SampleDictionary, make_en_dictionary


class OtherDictionary(Dictionary):
    app_started = message()


@pytest.mark.unit
class TestMessageTemplate:
    """Tests for MessageTemplate model."""

    def test_automatic_numbering(self):
        """Automatic placeholders format in order."""
        template = MessageTemplate("Transfer {} to account {}", (int, str))
        assert template.format(10, "John") == "Transfer 10 to account John"

    def test_manual_numbering(self):
        """Manual placeholders may reorder and repeat arguments."""
        template = MessageTemplate("{1} gets {0}, {1}!", (int, str))
        assert template.format(5, "Ann") == "Ann gets 5, Ann!"

    def test_escaped_braces_are_literal(self):
        template = MessageTemplate("{{literal}} {}", (str,))
        assert template.format("x") == "{literal} x"

    def test_format_spec(self):
        template = MessageTemplate("{0:>5} {0}", (int,))
        assert template.format(42) == "   42 42"

    @pytest.mark.parametrize("text", ["Hi {0.missing}", "Hi {0[3]}", "Hi {.real}", "Hi {[0]}"])
    def test_attribute_and_index_access_rejected(self, text):
        with pytest.raises(TemplateError):
            MessageTemplate(text, (int,))

    @pytest.mark.parametrize("text", ["Hi {\u00b2}", "Hi {\u0663}"])
    def test_non_ascii_digits_rejected(self, text):
        with pytest.raises(TemplateError):
            MessageTemplate(text, (int,))

    @pytest.mark.parametrize(
        "text, arg_types",
        [
            ("Hi {0:d}", (str,)),
            ("Hi {:d}", (str,)),
            ("{0:.2f}", (str,)),
            ("{0!r:d}", (int,)),
            ("{0:%}", (list,)),
        ],
    )
    def test_format_spec_must_fit_declared_type(self, text, arg_types):
        with pytest.raises(TemplateError):
            MessageTemplate(text, arg_types)

    def test_format_spec_fits_declared_type(self):
        assert MessageTemplate("{:,d} {:.2f} {!r:>6}", (int, float, str)).format(
            1000, 2.5, "a"
        ) == "1,000 2.50    'a'"

    def test_format_spec_unchecked_for_untyped_arguments(self):
        template = MessageTemplate("{0:d}", (Any,))
        assert template.format(7) == "7"

    def test_unused_arguments_allowed(self):
        """A translation may omit arguments it does not need."""
        template = MessageTemplate("Done", (int,))
        assert template.format(3) == "Done"

    def test_arg_types_coerced_to_tuple(self):
        template = MessageTemplate("{}", [str])
        assert template.arg_types == (str,)

    def test_immutable(self):
        template = MessageTemplate("Hello")
        with pytest.raises(AttributeError):
            template.text = "Bye"

    def test_out_of_range_manual_placeholder(self):
        with pytest.raises(TemplateError):
            MessageTemplate("Transfer {0} to {2}", (int, str))

    def test_too_many_automatic_placeholders(self):
        with pytest.raises(TemplateError):
            MessageTemplate("{} {} {}", (int, str))

    def test_mixed_numbering(self):
        with pytest.raises(TemplateError):
            MessageTemplate("{} {1}", (int, str))

    def test_named_placeholder(self):
        with pytest.raises(TemplateError):
            MessageTemplate("Hello {name}", (str,))

    @pytest.mark.parametrize("text", ["Hello {", "Hello }", "Hello {0"])
    def test_unbalanced_braces(self, text):
        with pytest.raises(TemplateError):
            MessageTemplate(text, (str,))

    def test_nested_placeholder_checked(self):
        """Placeholders inside a format spec count against the arguments."""
        with pytest.raises(TemplateError):
            MessageTemplate("{0:{1}}", (int,))
        template = MessageTemplate("{0:>{1}}", (int, int))
        assert template.format(7, 3) == "  7"

    def test_non_string_text(self):
        with pytest.raises(TemplateError):
            MessageTemplate(123)

    def test_invalid_arg_type(self):
        with pytest.raises(TemplateError):
            MessageTemplate("{}", ("int",))

    def test_template_error_is_value_error(self):
        with pytest.raises(ValueError):
            MessageTemplate("{5}", ())


@pytest.mark.unit
class TestSignatureChecks:
    """Tests for argument validation against declared types."""

    def test_wrong_count(self):
        template = MessageTemplate("Transfer {} to account {}", (int, str))
        with pytest.raises(SignatureMismatchError):
            template.format(10)
        with pytest.raises(SignatureMismatchError):
            template.format(10, "John", "extra")

    def test_wrong_type(self):
        template = MessageTemplate("Transfer {} to account {}", (int, str))
        with pytest.raises(SignatureMismatchError):
            template.format("10", "John")

    def test_mismatch_is_type_error(self):
        template = MessageTemplate("{}", (int,))
        with pytest.raises(TypeError):
            template.format(1.5)

    def test_bool_rejected_for_numbers(self):
        with pytest.raises(SignatureMismatchError):
            MessageTemplate("{}", (int,)).format(True)
        with pytest.raises(SignatureMismatchError):
            MessageTemplate("{}", (float,)).format(False)

    def test_int_accepted_for_float(self):
        assert MessageTemplate("{:.1f}", (float,)).format(2) == "2.0"

    def test_subclass_accepted(self):
        class Name(str):
            pass

        assert MessageTemplate("Hi {}", (str,)).format(Name("Bo")) == "Hi Bo"

    def test_any_accepts_anything(self):
        template = MessageTemplate("{} {}", (Any, object))
        assert template.format([1], None) == "[1] None"


@pytest.mark.unit
class TestMessageField:
    """Tests for MessageField descriptor."""

    def test_class_access_returns_selector(self):
        selector = SampleDictionary.transfer_money_to_account
        assert isinstance(selector, MessageField)
        assert selector.name == "transfer_money_to_account"
        assert selector.owner is SampleDictionary
        assert selector.arg_types == (int, str)

    def test_instance_access_returns_template(self):
        en = make_en_dictionary()
        template = en.transfer_money_to_account
        assert isinstance(template, MessageTemplate)
        assert template.text == "Transfer {} to account {}"
        assert template.arg_types == (int, str)

    def test_check_args(self):
        SampleDictionary.transfer_money_to_account.check_args((10, "John"))
        with pytest.raises(SignatureMismatchError, match="transfer_money_to_account"):
            SampleDictionary.transfer_money_to_account.check_args(("John", 10))

    def test_repr(self):
        assert (
            repr(SampleDictionary.transfer_money_to_account)
            == "<MessageField SampleDictionary.transfer_money_to_account(int, str)>"
        )

    def test_invalid_arg_type(self):
        with pytest.raises(TemplateError):
            message(42)


@pytest.mark.unit
class TestDictionary:
    """Tests for Dictionary base class."""

    def test_fields_in_definition_order(self):
        names = [field.name for field in SampleDictionary.fields()]
        assert names == ["app_started", "transfer_money_to_account"]

    def test_get_field(self):
        assert SampleDictionary.get_field("app_started") is SampleDictionary.app_started

    def test_get_field_unknown(self):
        with pytest.raises(DictionaryError):
            SampleDictionary.get_field("nonexistent")

    def test_missing_message(self):
        with pytest.raises(DictionaryError, match="transfer_money_to_account"):
            SampleDictionary(app_started="Application started")

    def test_unknown_message(self):
        with pytest.raises(DictionaryError, match="farewell"):
            SampleDictionary(
                app_started="Application started",
                transfer_money_to_account="Transfer {} to account {}",
                farewell="Bye",
            )

    def test_non_string_value(self):
        with pytest.raises(DictionaryError):
            SampleDictionary(app_started=1, transfer_money_to_account="{} {}")

    def test_malformed_text_names_the_message(self):
        with pytest.raises(TemplateError, match="SampleDictionary.transfer_money_to_account"):
            SampleDictionary(
                app_started="Application started",
                transfer_money_to_account="Transfer {0} to {1} via {2}",
            )

    def test_template_value_accepted(self):
        template = MessageTemplate("Transfer {} to {}", (int, str))
        dictionary = SampleDictionary(
            app_started="Started", transfer_money_to_account=template
        )
        assert dictionary.transfer_money_to_account is template

    def test_template_value_with_other_signature(self):
        with pytest.raises(DictionaryError):
            SampleDictionary(
                app_started="Started",
                transfer_money_to_account=MessageTemplate("{}", (str,)),
            )

    def test_immutable(self):
        en = make_en_dictionary()
        with pytest.raises(AttributeError):
            en.app_started = "Changed"
        with pytest.raises(AttributeError):
            en.extra = "value"
        with pytest.raises(AttributeError):
            del en.app_started
        assert en.app_started.text == "Application started"

    def test_template_lookup(self):
        en = make_en_dictionary()
        assert en.template(SampleDictionary.app_started).text == "Application started"

    def test_template_lookup_foreign_selector(self):
        en = make_en_dictionary()
        with pytest.raises(UnknownSelectorError):
            en.template(OtherDictionary.app_started)

    def test_owns(self):
        assert SampleDictionary.owns(SampleDictionary.app_started)
        assert not SampleDictionary.owns(OtherDictionary.app_started)

    def test_inherited_fields(self):
        class ExtendedDictionary(SampleDictionary):
            farewell = message(str)

        names = [field.name for field in ExtendedDictionary.fields()]
        assert names == ["app_started", "transfer_money_to_account", "farewell"]
        assert ExtendedDictionary.owns(SampleDictionary.app_started)

    def test_as_dict(self):
        assert make_en_dictionary().as_dict() == {
            "app_started": "Application started",
            "transfer_money_to_account": "Transfer {} to account {}",
        }

    def test_equality(self):
        assert make_en_dictionary() == make_en_dictionary()
        assert make_en_dictionary() != make_en_dictionary(app_started="Started")
        assert hash(make_en_dictionary()) == hash(make_en_dictionary())


@pytest.mark.unit
class TestReservedMessageNames:
    """Message names may not shadow Dictionary members."""

    @pytest.mark.parametrize(
        "name",
        ["template", "owns", "fields", "get_field", "as_dict", "_templates", "_fields"],
    )
    def test_reserved_name_rejected(self, name):
        with pytest.raises(DictionaryError, match=name):
            type("Texts", (Dictionary,), {name: message()})

    def test_reserved_name_rejected_in_subclass(self):
        with pytest.raises(DictionaryError):

            class ExtendedDictionary(SampleDictionary):
                template = message(str)

    def test_non_reserved_name_still_translates(self):
        from typed_i18n import Translator

        class Texts(Dictionary):
            greeting = message()

        translator = Translator("en", {"en": Texts(greeting="Hi")})
        assert translator.translate("en", Texts.greeting) == "Hi"
