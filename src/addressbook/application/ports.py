"""Application ports (interfaces). Implemented by infrastructure adapters."""

from typing import Protocol

from addressbook.domain import Registry


class ContactStore(Protocol):
    """Loads and saves a whole Registry."""

    def load(self) -> Registry:
        """Return a freshly built Registry. Raises StorageOperationError on failure."""
        ...

    def save(self, registry: Registry) -> None:
        """Replace the stored contents with every record in registry."""
        ...
