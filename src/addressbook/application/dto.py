"""Result types returned by the directory."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ContactAdded:
    name: str


@dataclass(frozen=True)
class Duplicate:
    """A contact with the same full name (case-insensitive) is already stored."""

    name: str
