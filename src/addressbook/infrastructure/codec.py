"""Binary encoding of the contact sequence.

Layout (all integers big-endian uint32):

    b"ABK1" | count | count x (len, full_name, len, phone, len, email)

Strings are UTF-8. The decoder rejects truncated data, trailing bytes and
records that do not satisfy the Contact rules.
"""

import struct

from addressbook.domain import Contact

MAGIC = b"ABK1"
_U32 = struct.Struct(">I")


class CodecError(ValueError):
    """Raised when bytes cannot be decoded into a contact sequence."""


def _encode_str(value: str) -> bytes:
    data = value.encode("utf-8")
    return _U32.pack(len(data)) + data


def encode_contacts(contacts: list[Contact]) -> bytes:
    parts = [MAGIC, _U32.pack(len(contacts))]
    for contact in contacts:
        parts.append(_encode_str(contact.full_name))
        parts.append(_encode_str(contact.phone))
        parts.append(_encode_str(contact.email))
    return b"".join(parts)


class _Reader:
    def __init__(self, data: bytes) -> None:
        self._data = data
        self._pos = 0

    def take(self, size: int) -> bytes:
        end = self._pos + size
        if end > len(self._data):
            raise CodecError("unexpected end of data")
        chunk = self._data[self._pos:end]
        self._pos = end
        return chunk

    def u32(self) -> int:
        return _U32.unpack(self.take(_U32.size))[0]

    def string(self) -> str:
        raw = self.take(self.u32())
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise CodecError(f"invalid UTF-8 in record: {exc.reason}") from exc

    @property
    def remaining(self) -> int:
        return len(self._data) - self._pos


def decode_contacts(data: bytes) -> list[Contact]:
    if not data:
        raise CodecError("file is empty")
    reader = _Reader(data)
    if reader.take(len(MAGIC)) != MAGIC:
        raise CodecError("not an address book file")
    count = reader.u32()
    contacts = []
    for index in range(count):
        full_name = reader.string()
        phone = reader.string()
        email = reader.string()
        try:
            contacts.append(Contact(full_name=full_name, phone=phone, email=email))
        except ValueError as exc:
            raise CodecError(f"record {index}: {exc}") from exc
    if reader.remaining:
        raise CodecError(f"{reader.remaining} trailing bytes after {count} records")
    return contacts
