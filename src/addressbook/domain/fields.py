"""Validated contact attributes: Name, Phone, Email, Address and Tag.

Each value is checked once at construction and is immutable afterwards.
Stored values are the trimmed input. Privacy flags do not take part in
equality, so two phones with the same number are equal whether or not
either one is private.
"""

import re
from dataclasses import dataclass, field

from addressbook.domain.errors import ValidationError

_NAME_RE = re.compile(r"[A-Za-z0-9 .,\-]+")
_PHONE_RE = re.compile(r"[0-9]+")
_EMAIL_RE = re.compile(r"[\w.+\-]+@[\w\-]+(\.[\w\-]+)+", re.ASCII)
_TAG_RE = re.compile(r"[A-Za-z0-9]+")
# Characters XML 1.0 cannot carry (tab and newline are allowed).
_XML_INVALID_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")


def _validated(kind: str, raw: str, pattern: re.Pattern | None, message: str) -> str:
    if not isinstance(raw, str):
        raise ValidationError(kind, raw, message)
    value = raw.strip()
    if not value:
        raise ValidationError(kind, raw, message)
    if pattern is not None and not pattern.fullmatch(value):
        raise ValidationError(kind, raw, message)
    return value


@dataclass(frozen=True)
class Name:
    """A contact's full name. Always public."""

    EXAMPLE = "John Doe"
    MESSAGE_CONSTRAINTS = (
        "Names should only contain letters, digits, spaces, '.', ',' and '-'."
    )

    value: str

    def __post_init__(self):
        value = _validated("name", self.value, _NAME_RE, self.MESSAGE_CONSTRAINTS)
        object.__setattr__(self, "value", value)

    def words(self) -> list[str]:
        return self.value.split()

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Phone:
    EXAMPLE = "98765432"
    MESSAGE_CONSTRAINTS = "Phone numbers should only contain digits."

    value: str
    private: bool = field(default=False, compare=False)

    def __post_init__(self):
        value = _validated("phone", self.value, _PHONE_RE, self.MESSAGE_CONSTRAINTS)
        object.__setattr__(self, "value", value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Email:
    EXAMPLE = "johnd@gmail.com"
    MESSAGE_CONSTRAINTS = (
        "Emails should be of the form local@domain.tld, "
        "using only letters, digits, '.', '_', '+' and '-'."
    )

    value: str
    private: bool = field(default=False, compare=False)

    def __post_init__(self):
        value = _validated("email", self.value, _EMAIL_RE, self.MESSAGE_CONSTRAINTS)
        object.__setattr__(self, "value", value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Address:
    EXAMPLE = "311, Clementi Ave 2, #02-25"
    MESSAGE_CONSTRAINTS = (
        "Addresses can take any value, but must not be blank "
        "or contain control characters."
    )

    value: str
    private: bool = field(default=False, compare=False)

    def __post_init__(self):
        raw = self.value
        if isinstance(raw, str):
            raw = raw.replace("\r\n", "\n").replace("\r", "\n")
            if _XML_INVALID_RE.search(raw):
                raise ValidationError("address", self.value, self.MESSAGE_CONSTRAINTS)
        value = _validated("address", raw, None, self.MESSAGE_CONSTRAINTS)
        object.__setattr__(self, "value", value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, order=True)
class Tag:
    """A short alphanumeric label attached to a contact."""

    EXAMPLE = "friends"
    MESSAGE_CONSTRAINTS = "Tags should be alphanumeric, without spaces."

    name: str

    def __post_init__(self):
        name = _validated("tag", self.name, _TAG_RE, self.MESSAGE_CONSTRAINTS)
        object.__setattr__(self, "name", name)

    def __str__(self) -> str:
        return f"[{self.name}]"
