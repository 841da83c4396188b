"""Infrastructure layer: concrete implementations of application ports."""

from addressbook.infrastructure.codec import CodecError, decode_contacts, encode_contacts
from addressbook.infrastructure.file_store import DATA_FILE, FileContactStore
from addressbook.infrastructure.memory_store import InMemoryContactStore

__all__ = [
    "DATA_FILE",
    "CodecError",
    "FileContactStore",
    "InMemoryContactStore",
    "decode_contacts",
    "encode_contacts",
]
