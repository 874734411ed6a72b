"""
Address book core: clean-architecture layout.

- domain: field values (Name, Phone, Email, Address, Tag), Contact, ContactCollection, Registry.
- application: use cases (AddContact, ContactService), ports (ContactStore), DTOs.
- infrastructure: adapters (XmlContactStore, InMemoryContactStore).
"""

from addressbook.application import (
    AddContact,
    ContactAdded,
    ContactDeleted,
    ContactNotFound,
    ContactService,
    ContactStore,
    Duplicate,
)
from addressbook.domain import (
    Address,
    Contact,
    ContactCollection,
    DuplicateRecordError,
    Email,
    InvalidPathError,
    Name,
    Phone,
    RecordNotFoundError,
    Registry,
    StorageOperationError,
    Tag,
    TagSet,
    ValidationError,
)
from addressbook.infrastructure import InMemoryContactStore, XmlContactStore

__all__ = [
    "AddContact",
    "Address",
    "Contact",
    "ContactAdded",
    "ContactCollection",
    "ContactDeleted",
    "ContactNotFound",
    "ContactService",
    "ContactStore",
    "Duplicate",
    "DuplicateRecordError",
    "Email",
    "InMemoryContactStore",
    "InvalidPathError",
    "Name",
    "Phone",
    "RecordNotFoundError",
    "Registry",
    "StorageOperationError",
    "Tag",
    "TagSet",
    "ValidationError",
    "XmlContactStore",
]
