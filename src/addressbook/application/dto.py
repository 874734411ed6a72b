"""Result types for address book use cases."""

from dataclasses import dataclass

from addressbook.domain import Contact

# --- add results ---


@dataclass(frozen=True)
class ContactAdded:
    """Contact was inserted into the registry."""

    contact: Contact


@dataclass(frozen=True)
class Duplicate:
    """An equivalent contact already exists; the registry is unchanged."""

    pass


# --- delete results ---


@dataclass(frozen=True)
class ContactDeleted:
    contact: Contact


@dataclass(frozen=True)
class ContactNotFound:
    """The contact is not (or no longer) in the registry."""

    contact: Contact
