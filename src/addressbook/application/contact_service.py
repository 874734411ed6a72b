"""Address book use cases over one owned Registry and its ContactStore."""

import logging

from addressbook.application.add_contact import AddContact
from addressbook.application.dto import (
    ContactAdded,
    ContactDeleted,
    ContactNotFound,
    Duplicate,
)
from addressbook.application.ports import ContactStore
from addressbook.domain import Contact, RecordNotFoundError, Registry

logger = logging.getLogger(__name__)


class ContactService:
    """Add, list, find, delete and clear contacts. Every successful mutation is saved.

    If saving fails the in-memory change is undone before the error propagates,
    so the registry always matches what was last written.
    """

    def __init__(self, store: ContactStore, registry: Registry | None = None) -> None:
        self._store = store
        self._registry = registry if registry is not None else Registry()

    @property
    def registry(self) -> Registry:
        return self._registry

    def reload(self) -> None:
        """Replace the registry with the stored one. On failure the current one is kept."""
        self._registry = self._store.load()

    def add_contact(self, command: AddContact) -> ContactAdded | Duplicate:
        result = command.execute(self._registry)
        if isinstance(result, ContactAdded):
            try:
                self._store.save(self._registry)
            except BaseException:
                self._registry.remove_record(result.contact)
                raise
            logger.info("Added contact %s", result.contact.name)
        return result

    def list_contacts(self) -> list[Contact]:
        return list(self._registry.all_records())

    def find_contacts(self, keywords: list[str]) -> list[Contact]:
        """Return contacts whose name has any keyword as a whole word (case-insensitive)."""
        needles = {k.strip().lower() for k in keywords if k and k.strip()}
        if not needles:
            return []
        out = []
        for contact in self._registry.all_records():
            words = {w.lower() for w in contact.name.words()}
            if words & needles:
                out.append(contact)
        return out

    def delete_contact(self, contact: Contact) -> ContactDeleted | ContactNotFound:
        previous = self._registry.all_records()
        try:
            self._registry.remove_record(contact)
        except RecordNotFoundError:
            return ContactNotFound(contact=contact)
        self._save_or_restore(previous)
        logger.info("Deleted contact %s", contact.name)
        return ContactDeleted(contact=contact)

    def clear(self) -> None:
        previous = self._registry.all_records()
        self._registry.clear()
        self._save_or_restore(previous)
        logger.info("Cleared address book")

    def _save_or_restore(self, previous: tuple[Contact, ...]) -> None:
        try:
            self._store.save(self._registry)
        except BaseException:
            self._registry.clear()
            for record in previous:
                self._registry.add_record(record)
            raise
