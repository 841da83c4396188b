"""
Address book core: clean-architecture layout.

- domain: Contact entity and field rules. No outer dependencies.
- application: ContactDirectory, input validators, ports (ContactStore, PromptStream), DTOs.
- infrastructure: adapters (FileContactStore, InMemoryContactStore) and the binary codec.
"""

from addressbook.application import (
    ContactAdded,
    ContactDirectory,
    ContactStore,
    Duplicate,
    PromptStream,
)
from addressbook.domain import Contact
from addressbook.infrastructure import DATA_FILE, FileContactStore, InMemoryContactStore

__all__ = [
    "DATA_FILE",
    "Contact",
    "ContactAdded",
    "ContactDirectory",
    "ContactStore",
    "Duplicate",
    "FileContactStore",
    "InMemoryContactStore",
    "PromptStream",
]
