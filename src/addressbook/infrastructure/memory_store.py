"""In-memory implementation of ContactStore (no disk). Keeps the encoded bytes so codec round-trips are exercised."""

from addressbook.domain import Contact
from addressbook.infrastructure.codec import decode_contacts, encode_contacts


class InMemoryContactStore:
    """Holds the last saved payload. Set fail_loads or fail_saves to simulate an I/O error."""

    def __init__(self, data: bytes | None = None, *, location: str = "memory") -> None:
        self.data = data
        self.fail_loads = False
        self.fail_saves = False
        self.save_count = 0
        self._location = location

    @property
    def location(self) -> str:
        return self._location

    def exists(self) -> bool:
        return self.data is not None

    def load(self) -> list[Contact]:
        if self.fail_loads:
            raise OSError("simulated read failure")
        return decode_contacts(self.data or b"")

    def save(self, contacts: list[Contact]) -> None:
        if self.fail_saves:
            raise OSError("simulated write failure")
        self.data = encode_contacts(contacts)
        self.save_count += 1
