"""Input validation: read lines until they satisfy a field rule.

Every reader loops until the input is acceptable, writing the re-prompt
message after each rejected line, so the returned value is always valid.
"""

import re

from addressbook.application.ports import PromptStream
from addressbook.domain import is_valid_email, is_valid_phone, trim

EMPTY_FIELD_MESSAGE = "This field cannot be left empty. Please try again: "
INVALID_PHONE_MESSAGE = "Invalid phone number. Please enter a 10-digit number: "
INVALID_EMAIL_MESSAGE = "Invalid email address. Please enter a valid email: "
INVALID_INT_MESSAGE = "Invalid input. Please enter a valid integer between {minimum} and {maximum}: "

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


def _read_until(stream: PromptStream, accept, message: str) -> str:
    value = trim(stream.read_line())
    while not accept(value):
        stream.say(message)
        value = trim(stream.read_line())
    return value


def read_non_empty_string(stream: PromptStream) -> str:
    return _read_until(stream, bool, EMPTY_FIELD_MESSAGE)


def read_phone(stream: PromptStream) -> str:
    return _read_until(stream, is_valid_phone, INVALID_PHONE_MESSAGE)


def read_email(stream: PromptStream) -> str:
    return _read_until(stream, is_valid_email, INVALID_EMAIL_MESSAGE)


def _parse_int(value: str) -> int | None:
    if _INT_PATTERN.fullmatch(value) is None:
        return None
    return int(value)


def read_bounded_int(stream: PromptStream, minimum: int, maximum: int) -> int:
    """Return a signed decimal integer in [minimum, maximum]."""

    def in_range(value: str) -> bool:
        number = _parse_int(value)
        return number is not None and minimum <= number <= maximum

    message = INVALID_INT_MESSAGE.format(minimum=minimum, maximum=maximum)
    return int(_read_until(stream, in_range, message))
