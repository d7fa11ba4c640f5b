"""Contact form models."""

from dataclasses import dataclass
from enum import StrEnum


class ContactValidationError(StrEnum):
    NAME_EMPTY = "nameEmpty"
    NAME_TOO_SHORT = "nameTooShort"
    NAME_CONTAINS_DIGITS = "nameContainsDigits"
    EMAIL_EMPTY = "emailEmpty"
    EMAIL_INVALID = "emailInvalid"
    PHONE_EMPTY = "phoneEmpty"
    PHONE_INVALID = "phoneInvalid"

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES: dict[ContactValidationError, str] = {
    ContactValidationError.NAME_EMPTY: "Name cannot be empty",
    ContactValidationError.NAME_TOO_SHORT: "Name must be at least 4 characters",
    ContactValidationError.NAME_CONTAINS_DIGITS: "Name cannot contain numbers",
    ContactValidationError.EMAIL_EMPTY: "Email cannot be empty",
    ContactValidationError.EMAIL_INVALID: "Please enter a valid email address",
    ContactValidationError.PHONE_EMPTY: "Phone number cannot be empty",
    ContactValidationError.PHONE_INVALID: "Phone must contain digits only",
}


@dataclass
class Contact:
    name: str = ""
    email: str = ""
    phone: str = ""

    def reset(self) -> None:
        self.name = ""
        self.email = ""
        self.phone = ""
