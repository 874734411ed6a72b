"""Domain error taxonomy."""


class AddressBookError(Exception):
    """Base class for address book errors."""


class ValidationError(AddressBookError, ValueError):
    """A single attribute or tag label failed its format rule."""

    def __init__(self, kind: str, value: object, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.value = value


class InvalidPathError(ValidationError):
    """A storage path is empty or does not carry an accepted suffix."""

    def __init__(self, value: object, message: str) -> None:
        super().__init__("path", value, message)


class DuplicateRecordError(AddressBookError):
    """An equivalent contact already exists in the collection."""


class RecordNotFoundError(AddressBookError):
    """No equivalent contact exists in the collection."""


class StorageOperationError(AddressBookError):
    """Loading the address book from its file failed."""
