"""Domain layer: field values, contacts, the collection and registry. No dependencies on outer layers."""

from addressbook.domain.collection import ContactCollection
from addressbook.domain.entities import Contact
from addressbook.domain.errors import (
    AddressBookError,
    DuplicateRecordError,
    InvalidPathError,
    RecordNotFoundError,
    StorageOperationError,
    ValidationError,
)
from addressbook.domain.fields import Address, Email, Name, Phone, Tag
from addressbook.domain.registry import Registry
from addressbook.domain.tags import TagSet

__all__ = [
    "Address",
    "AddressBookError",
    "Contact",
    "ContactCollection",
    "DuplicateRecordError",
    "Email",
    "InvalidPathError",
    "Name",
    "Phone",
    "RecordNotFoundError",
    "Registry",
    "StorageOperationError",
    "Tag",
    "TagSet",
    "ValidationError",
]
