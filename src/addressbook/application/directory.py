"""Contact directory: the ordered, persistent collection of contacts."""

import logging
from collections.abc import Callable

from addressbook.application.dto import ContactAdded, Duplicate
from addressbook.application.ports import ContactStore
from addressbook.domain import Contact

logger = logging.getLogger(__name__)

LOADED_MESSAGE = "Contact data loaded from file: {location}"
LOAD_ERROR_MESSAGE = "Error while loading contact data: {reason}"
SAVED_MESSAGE = "Contact data saved to file: {location}"
SAVE_ERROR_MESSAGE = "Error while saving contact data: {reason}"


class ContactDirectory:
    """Add, remove, search, edit and list contacts; every change rewrites the store.

    Lookups scan from the head and stop at the first case-insensitive full-name
    match. Persistence failures are reported through notify and never raised;
    the in-memory sequence is kept as is.
    """

    def __init__(
        self,
        store: ContactStore,
        *,
        notify: Callable[[str], None] = print,
    ) -> None:
        self._store = store
        self._notify = notify
        self._contacts: list[Contact] = []
        self.loaded = self._load()

    def _load(self) -> bool:
        if not self._store.exists():
            logger.info("No contact data at %s; starting empty", self._store.location)
            return False
        try:
            contacts = self._store.load()
        except (OSError, ValueError) as exc:
            logger.warning("Loading %s failed: %s", self._store.location, exc)
            self._notify(LOAD_ERROR_MESSAGE.format(reason=exc))
            return False
        self._contacts = list(contacts)
        logger.info("Loaded %d contacts from %s", len(self._contacts), self._store.location)
        self._notify(LOADED_MESSAGE.format(location=self._store.location))
        return True

    def _index_of(self, name: str) -> int | None:
        for index, contact in enumerate(self._contacts):
            if contact.matches_name(name):
                return index
        return None

    def add(self, contact: Contact) -> ContactAdded | Duplicate:
        """Append a contact unless its full name is already taken."""
        existing = self.search(contact.full_name)
        if existing is not None:
            return Duplicate(name=existing.full_name)
        self._contacts.append(contact)
        self.save()
        return ContactAdded(name=contact.full_name)

    def remove(self, name: str) -> bool:
        """Remove the first contact named name. Returns True if one was removed."""
        index = self._index_of(name)
        if index is None:
            return False
        del self._contacts[index]
        self.save()
        return True

    def search(self, name: str) -> Contact | None:
        index = self._index_of(name)
        if index is None:
            return None
        return self._contacts[index]

    def edit(self, name: str, new_phone: str, new_email: str) -> bool:
        """Replace phone and email of the first contact named name, keeping its position.
        Returns False (and writes nothing) if there is no such contact.
        """
        index = self._index_of(name)
        if index is None:
            return False
        self._contacts[index] = self._contacts[index].with_details(new_phone, new_email)
        self.save()
        return True

    def list(self) -> list[Contact]:
        """Return a snapshot of all contacts in insertion order."""
        return list(self._contacts)

    def save(self) -> None:
        try:
            self._store.save(self._contacts)
        except OSError as exc:
            logger.warning("Saving %s failed: %s", self._store.location, exc)
            self._notify(SAVE_ERROR_MESSAGE.format(reason=exc))
            return
        logger.info("Saved %d contacts to %s", len(self._contacts), self._store.location)
        self._notify(SAVED_MESSAGE.format(location=self._store.location))
