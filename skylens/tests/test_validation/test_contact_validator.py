"""Tests for contact form validation rules."""

import pytest

from skylens.models.contact import Contact, ContactValidationError
from skylens.validation.contact_validator import validate

E = ContactValidationError


def _valid(**overrides) -> Contact:
    fields = {"name": "John Smith", "email": "john@example.com", "phone": "1234567890"}
    fields.update(overrides)
    return Contact(**fields)


class TestValidate:
    def test_empty_contact(self):
        errors = validate(Contact())
        assert errors == [E.NAME_EMPTY, E.EMAIL_EMPTY, E.PHONE_EMPTY]

    def test_valid_contact(self):
        assert validate(_valid()) == []

    def test_errors_accumulate_in_field_order(self):
        errors = validate(Contact(name="Al", email="bad", phone="12a"))
        assert errors == [E.NAME_TOO_SHORT, E.EMAIL_INVALID, E.PHONE_INVALID]


class TestName:
    def test_too_short(self):
        errors = validate(_valid(name="Joe"))
        assert E.NAME_TOO_SHORT in errors
        assert E.NAME_EMPTY not in errors

    def test_contains_digits(self):
        assert E.NAME_CONTAINS_DIGITS in validate(_valid(name="John123"))

    def test_short_name_with_digit_reports_length_only(self):
        assert validate(_valid(name="J1")) == [E.NAME_TOO_SHORT]

    def test_exactly_four_characters(self):
        assert validate(_valid(name="Anna")) == []

    def test_combining_accent_counts_once(self):
        # four code points, three characters
        assert validate(_valid(name="Jo\u0301e")) == [E.NAME_TOO_SHORT]
        assert validate(_valid(name="Jose\u0301")) == []


class TestEmail:
    def test_invalid(self):
        assert E.EMAIL_INVALID in validate(_valid(email="not-an-email"))

    def test_valid_with_dots(self):
        assert E.EMAIL_INVALID not in validate(_valid(email="john.smith@example.com"))

    @pytest.mark.parametrize(
        "email",
        [
            "john@example",
            "john@example.c",
            "@example.com",
            "john smith@example.com",
            "john@example.com\n",
            "john@example.c0m",
        ],
    )
    def test_rejected_shapes(self, email: str):
        assert validate(_valid(email=email)) == [E.EMAIL_INVALID]

    @pytest.mark.parametrize(
        "email", ["a+tag@sub.example.co", "first_last%x@ex-ample.org", "A@B.CD"]
    )
    def test_accepted_shapes(self, email: str):
        assert validate(_valid(email=email)) == []


class TestPhone:
    def test_hyphens_invalid(self):
        assert E.PHONE_INVALID in validate(_valid(phone="123-456-7890"))

    def test_digits_only_valid(self):
        assert E.PHONE_INVALID not in validate(_valid(phone="1234567890"))

    def test_no_length_constraint(self):
        assert validate(_valid(phone="1")) == []

    def test_spaces_invalid(self):
        assert validate(_valid(phone="123 456")) == [E.PHONE_INVALID]


class TestMessages:
    def test_every_kind_has_message(self):
        assert all(e.message for e in ContactValidationError)

    def test_message_text(self):
        assert E.PHONE_INVALID.message == "Phone must contain digits only"
        assert E.NAME_TOO_SHORT.message == "Name must be at least 4 characters"
