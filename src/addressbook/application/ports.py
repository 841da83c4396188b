"""Application ports (interfaces). Implemented by infrastructure adapters and the console."""

from typing import Protocol

from addressbook.domain import Contact


class ContactStore(Protocol):
    """Persists the whole ordered contact sequence as one unit."""

    @property
    def location(self) -> str:
        """Human-readable location of the stored data (e.g. the file path)."""
        ...

    def exists(self) -> bool:
        """Return True if previously saved data is present."""
        ...

    def load(self) -> list[Contact]:
        """Return the stored sequence. Raises OSError or CodecError."""
        ...

    def save(self, contacts: list[Contact]) -> None:
        """Overwrite stored data with the given sequence. Raises OSError."""
        ...


class PromptStream(Protocol):
    """Line-oriented user input with a channel for re-prompt messages."""

    def read_line(self) -> str:
        """Return the next input line without its terminator. Raises EOFError when exhausted."""
        ...

    def say(self, text: str) -> None:
        """Write one line of output."""
        ...
