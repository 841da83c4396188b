"""Application layer: directory, input validation, ports, and DTOs. Depends only on domain."""

from addressbook.application.directory import ContactDirectory
from addressbook.application.dto import ContactAdded, Duplicate
from addressbook.application.ports import ContactStore, PromptStream
from addressbook.application.validation import (
    read_bounded_int,
    read_email,
    read_non_empty_string,
    read_phone,
)

__all__ = [
    "ContactAdded",
    "ContactDirectory",
    "ContactStore",
    "Duplicate",
    "PromptStream",
    "read_bounded_int",
    "read_email",
    "read_non_empty_string",
    "read_phone",
]
