"""Domain entities: Contact and the rules its fields must satisfy."""

import re
from dataclasses import dataclass, replace

# Exactly ten ASCII digits; re.ASCII keeps \d from accepting other scripts.
PHONE_PATTERN = re.compile(r"\d{10}", re.ASCII)
EMAIL_PATTERN = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")
# Characters removed by trim(): every code point up to and including U+0020.
_TRIM_CHARS = "".join(map(chr, range(0x21)))


def trim(value: str) -> str:
    """Remove leading and trailing control characters and spaces (U+0000..U+0020)."""
    return value.strip(_TRIM_CHARS)


def is_valid_phone(value: str) -> bool:
    return PHONE_PATTERN.fullmatch(value) is not None


def is_valid_email(value: str) -> bool:
    return EMAIL_PATTERN.fullmatch(value) is not None


@dataclass(frozen=True)
class Contact:
    """
    A person in the address book.
    full_name is fixed for the lifetime of the record; phone and email change
    only through with_details, which returns a new Contact.
    """

    full_name: str
    phone: str
    email: str

    def __post_init__(self):
        full_name = trim(self.full_name or "")
        if not full_name:
            raise ValueError("Contact full name must be non-empty.")
        phone = trim(self.phone or "")
        if not is_valid_phone(phone):
            raise ValueError(f"Invalid phone number: {self.phone!r}")
        email = trim(self.email or "")
        if not is_valid_email(email):
            raise ValueError(f"Invalid email address: {self.email!r}")
        object.__setattr__(self, "full_name", full_name)
        object.__setattr__(self, "phone", phone)
        object.__setattr__(self, "email", email)

    def matches_name(self, name: str) -> bool:
        """Case-insensitive comparison against the full name."""
        return self.full_name.lower() == trim(name or "").lower()

    def with_details(self, phone: str, email: str) -> "Contact":
        return replace(self, phone=phone, email=email)

    def __str__(self) -> str:
        return f"Name: {self.full_name}, Phone: {self.phone}, Email: {self.email}"
