"""Contact form validation.

Each field is checked independently. Within a field only the first failing
rule is reported, so a contact yields at most one error per field, ordered
name, email, phone.
"""

import re
import unicodedata

from skylens.models.contact import Contact, ContactValidationError

MIN_NAME_LENGTH = 4
EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


def validate(contact: Contact) -> list[ContactValidationError]:
    """Return all validation errors for a contact. Empty means submittable."""
    errors: list[ContactValidationError] = []
    for check, value in (
        (_check_name, contact.name),
        (_check_email, contact.email),
        (_check_phone, contact.phone),
    ):
        error = check(value)
        if error is not None:
            errors.append(error)
    return errors


def _check_name(name: str) -> ContactValidationError | None:
    if not name:
        return ContactValidationError.NAME_EMPTY
    # composed form, so "e" plus a combining accent counts as one character
    if len(unicodedata.normalize("NFC", name)) < MIN_NAME_LENGTH:
        return ContactValidationError.NAME_TOO_SHORT
    if any(ch.isdecimal() for ch in name):
        return ContactValidationError.NAME_CONTAINS_DIGITS
    return None


def _check_email(email: str) -> ContactValidationError | None:
    if not email:
        return ContactValidationError.EMAIL_EMPTY
    # fullmatch so a trailing newline is not accepted by "$"
    if EMAIL_PATTERN.fullmatch(email) is None:
        return ContactValidationError.EMAIL_INVALID
    return None


def _check_phone(phone: str) -> ContactValidationError | None:
    if not phone:
        return ContactValidationError.PHONE_EMPTY
    if not all(ch.isdecimal() for ch in phone):
        return ContactValidationError.PHONE_INVALID
    return None
