"""ContactCollection: ordered contacts with no two equivalent entries."""

from collections.abc import Iterator

from addressbook.domain.entities import Contact
from addressbook.domain.errors import DuplicateRecordError, RecordNotFoundError


class ContactCollection:
    """Keeps insertion order. Duplicates are detected through an index keyed
    by Contact.identity, which gives the same answer as comparing every
    stored contact with the candidate.
    """

    def __init__(self) -> None:
        self._records: list[Contact] = []
        self._index: set[tuple[str, str, str, str]] = set()

    def insert(self, record: Contact) -> None:
        """Append record. Raises DuplicateRecordError if an equivalent one exists."""
        if record.identity in self._index:
            raise DuplicateRecordError(f"Contact already exists: {record.name}")
        self._records.append(record)
        self._index.add(record.identity)

    def contains(self, record: Contact) -> bool:
        return record.identity in self._index

    def remove(self, record: Contact) -> None:
        """Remove the equivalent contact. Raises RecordNotFoundError if absent."""
        if record.identity not in self._index:
            raise RecordNotFoundError(f"Contact not found: {record.name}")
        self._records = [r for r in self._records if r.identity != record.identity]
        self._index.discard(record.identity)

    def clear(self) -> None:
        self._records = []
        self._index = set()

    def view(self) -> tuple[Contact, ...]:
        """Read-only snapshot in insertion order."""
        return tuple(self._records)

    def __contains__(self, record: object) -> bool:
        return isinstance(record, Contact) and self.contains(record)

    def __iter__(self) -> Iterator[Contact]:
        return iter(tuple(self._records))

    def __len__(self) -> int:
        return len(self._records)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ContactCollection):
            return NotImplemented
        return len(self) == len(other) and self._records == other._records

    __hash__ = None

    def __repr__(self) -> str:
        return f"ContactCollection({len(self)} contacts)"
