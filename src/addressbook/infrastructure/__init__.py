"""Infrastructure layer: concrete implementations of application ports."""

from addressbook.infrastructure.memory_store import InMemoryContactStore
from addressbook.infrastructure.xml_store import DEFAULT_SUFFIXES, XmlContactStore

__all__ = [
    "DEFAULT_SUFFIXES",
    "InMemoryContactStore",
    "XmlContactStore",
]
