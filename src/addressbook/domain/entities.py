"""Contact: the validated aggregate stored in the address book."""

from dataclasses import dataclass, field

from addressbook.domain.fields import Address, Email, Name, Phone
from addressbook.domain.tags import TagSet

_PRIVATE_PREFIX = "(private) "


@dataclass(frozen=True)
class Contact:
    """
    A person known by the user. Every attribute is already validated,
    so a Contact is never partially constructed.

    Equality (and hashing) uses name, phone, email and address values only.
    Tags and privacy flags are ignored, which is what the collection uses
    to reject duplicates.
    """

    name: Name
    phone: Phone
    email: Email
    address: Address
    tags: TagSet = field(default_factory=TagSet, compare=False)

    def __post_init__(self):
        for attr, kind in (
            ("name", Name),
            ("phone", Phone),
            ("email", Email),
            ("address", Address),
            ("tags", TagSet),
        ):
            if not isinstance(getattr(self, attr), kind):
                raise TypeError(f"Contact {attr} must be a {kind.__name__}.")

    @property
    def identity(self) -> tuple[str, str, str, str]:
        """The four values that decide whether two contacts are the same person."""
        return (self.name.value, self.phone.value, self.email.value, self.address.value)

    def as_text(self) -> str:
        """Canonical one-line form including private attributes."""
        parts = [self.name.value]
        for label, attr in (("Phone", self.phone), ("Email", self.email), ("Address", self.address)):
            prefix = _PRIVATE_PREFIX if attr.private else ""
            parts.append(f"{label}: {prefix}{attr.value}")
        parts.append(f"Tags: {self.tags}")
        return " ".join(parts)

    def as_text_hide_private(self) -> str:
        parts = [self.name.value]
        for label, attr in (("Phone", self.phone), ("Email", self.email), ("Address", self.address)):
            if not attr.private:
                parts.append(f"{label}: {attr.value}")
        parts.append(f"Tags: {self.tags}")
        return " ".join(parts)

    def __str__(self) -> str:
        return self.as_text()
