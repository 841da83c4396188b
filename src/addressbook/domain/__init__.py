"""Domain layer: the Contact entity and its field rules. No dependencies on outer layers."""

from addressbook.domain.entities import (
    EMAIL_PATTERN,
    PHONE_PATTERN,
    Contact,
    is_valid_email,
    is_valid_phone,
    trim,
)

__all__ = [
    "EMAIL_PATTERN",
    "PHONE_PATTERN",
    "Contact",
    "is_valid_email",
    "is_valid_phone",
    "trim",
]
