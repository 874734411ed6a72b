"""Application layer: use cases, ports, and DTOs. Depends only on domain."""

from addressbook.application.add_contact import AddContact
from addressbook.application.contact_service import ContactService
from addressbook.application.dto import (
    ContactAdded,
    ContactDeleted,
    ContactNotFound,
    Duplicate,
)
from addressbook.application.ports import ContactStore

__all__ = [
    "AddContact",
    "ContactAdded",
    "ContactDeleted",
    "ContactNotFound",
    "ContactService",
    "ContactStore",
    "Duplicate",
]
