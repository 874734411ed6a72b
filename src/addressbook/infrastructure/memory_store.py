"""In-memory implementation of ContactStore (no file)."""

from addressbook.domain import Registry


class InMemoryContactStore:
    """Keeps the last saved contacts as a snapshot; load() rebuilds a fresh Registry."""

    def __init__(self) -> None:
        self._snapshot: tuple = ()
        self.save_count = 0

    def load(self) -> Registry:
        return Registry.of(*self._snapshot)

    def save(self, registry: Registry) -> None:
        if registry is None:
            raise TypeError("Registry to save must not be None.")
        self._snapshot = registry.all_records()
        self.save_count += 1
