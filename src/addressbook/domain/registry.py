"""Registry: aggregate root owning the one live ContactCollection."""

from addressbook.domain.collection import ContactCollection
from addressbook.domain.entities import Contact


class Registry:
    """The address book. Mutated only through the methods below."""

    def __init__(self) -> None:
        self._contacts = ContactCollection()

    @classmethod
    def of(cls, *records: Contact) -> "Registry":
        """Build a registry from records; raises DuplicateRecordError on equivalents."""
        registry = cls()
        for record in records:
            registry.add_record(record)
        return registry

    def add_record(self, record: Contact) -> None:
        self._contacts.insert(record)

    def remove_record(self, record: Contact) -> None:
        self._contacts.remove(record)

    def contains(self, record: Contact) -> bool:
        return self._contacts.contains(record)

    def clear(self) -> None:
        self._contacts.clear()

    def all_records(self) -> tuple[Contact, ...]:
        return self._contacts.view()

    def __len__(self) -> int:
        return len(self._contacts)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Registry):
            return NotImplemented
        return self._contacts == other._contacts

    __hash__ = None
