"""AddContact: validate input into a Contact and insert it into a Registry."""

from collections.abc import Iterable

from addressbook.application.dto import ContactAdded, Duplicate
from addressbook.domain import (
    Address,
    Contact,
    DuplicateRecordError,
    Email,
    Name,
    Phone,
    Registry,
    TagSet,
)


class AddContact:
    """One add request. Construction validates; execute() never raises."""

    def __init__(self, contact: Contact) -> None:
        if not isinstance(contact, Contact):
            raise TypeError("AddContact requires a Contact.")
        self._contact = contact

    @classmethod
    def from_raw(
        cls,
        name: str,
        phone: str,
        phone_private: bool,
        email: str,
        email_private: bool,
        address: str,
        address_private: bool,
        tags: Iterable[str] = (),
    ) -> "AddContact":
        """Build from raw strings. Raises ValidationError on the first invalid value."""
        contact = Contact(
            name=Name(name),
            phone=Phone(phone, private=phone_private),
            email=Email(email, private=email_private),
            address=Address(address, private=address_private),
            tags=TagSet.from_labels(tags),
        )
        return cls(contact)

    @property
    def contact(self) -> Contact:
        return self._contact

    def execute(self, registry: Registry) -> ContactAdded | Duplicate:
        try:
            registry.add_record(self._contact)
        except DuplicateRecordError:
            return Duplicate()
        return ContactAdded(contact=self._contact)
