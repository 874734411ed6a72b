"""File-backed ContactStore using a small XML document.

Layout: <contacts> root, one <contact> per record carrying <name>, <phone>,
<email>, <address> (the last three with a private="true|false" attribute)
and a <tags> element holding <tag> children. Output is deterministic:
four-space indentation, UTF-8, sorted tags, trailing newline.
"""

import logging
import os
import stat
import tempfile
import xml.etree.ElementTree as ET
from collections.abc import Iterable
from pathlib import Path

from addressbook.domain import (
    Address,
    Contact,
    DuplicateRecordError,
    Email,
    InvalidPathError,
    Name,
    Phone,
    Registry,
    StorageOperationError,
    TagSet,
    ValidationError,
)

logger = logging.getLogger(__name__)

DEFAULT_SUFFIXES = (".txt",)

ROOT_TAG = "contacts"
CONTACT_TAG = "contact"
TAGS_TAG = "tags"
TAG_TAG = "tag"
PRIVATE_ATTR = "private"

_XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'
_INDENT = "    "


class _MalformedContent(Exception):
    """Structural problem in a stored document. Becomes StorageOperationError."""


class XmlContactStore:
    """Binds one file path to load/save. Holds no data between calls."""

    def __init__(
        self,
        path: str | os.PathLike,
        accepted_suffixes: Iterable[str] | None = DEFAULT_SUFFIXES,
    ) -> None:
        if path is None:
            raise TypeError("Storage path must not be None.")
        raw = os.fspath(path)
        if not raw.strip():
            raise InvalidPathError(raw, "Storage path must not be empty.")
        self._suffixes = (
            None if accepted_suffixes is None
            else tuple(s.lower() for s in accepted_suffixes)
        )
        if self._suffixes == ():
            raise ValueError("accepted_suffixes must not be empty; pass None to accept any suffix.")
        self._path = Path(raw)
        if self._suffixes is not None and self._path.suffix.lower() not in self._suffixes:
            raise InvalidPathError(
                raw,
                f"Storage file should end with one of: {', '.join(self._suffixes)}",
            )

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Registry:
        """Read and parse the whole file into a new Registry.

        Raises StorageOperationError if the file is missing or unreadable, is
        not well-formed, has the wrong shape, or holds invalid or duplicate
        contacts. Nothing is returned unless every contact was accepted.
        """
        try:
            root = ET.parse(self._path).getroot()
        except FileNotFoundError as exc:
            logger.warning("Storage file not found: %s", self._path)
            raise StorageOperationError(f"Storage file not found: {self._path}") from exc
        except ET.ParseError as exc:
            logger.warning("Storage file is not well-formed: %s (%s)", self._path, exc)
            raise StorageOperationError(f"Storage file is not well-formed: {exc}") from exc
        except OSError as exc:
            logger.warning("Could not read storage file %s: %s", self._path, exc)
            raise StorageOperationError(f"Could not read storage file: {exc}") from exc

        try:
            registry = _registry_from_root(root)
        except (_MalformedContent, ValidationError, DuplicateRecordError) as exc:
            logger.warning("Invalid data in storage file %s: %s", self._path, exc)
            raise StorageOperationError(f"Invalid data in storage file: {exc}") from exc
        logger.info("Loaded %d contacts from %s", len(registry), self._path)
        return registry

    def save(self, registry: Registry) -> None:
        """Write every contact, in order, replacing the file. OSError propagates."""
        if registry is None:
            raise TypeError("Registry to save must not be None.")
        content = serialize(registry)
        directory = self._path.parent
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self._path.name}.", suffix=".tmp", dir=directory
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
                f.write(content)
            os.chmod(tmp_name, _target_mode(self._path))
            os.replace(tmp_name, self._path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.info("Saved %d contacts to %s", len(registry), self._path)


def _target_mode(path: Path) -> int:
    """Mode of the file being replaced, or the umask default for a new one."""
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def serialize(registry: Registry) -> str:
    """Return the document text for registry. Same registry, same text."""
    root = ET.Element(ROOT_TAG)
    for contact in registry.all_records():
        root.append(_contact_to_element(contact))
    ET.indent(root, space=_INDENT)
    return _XML_DECLARATION + ET.tostring(root, encoding="unicode") + "\n"


def _contact_to_element(contact: Contact) -> ET.Element:
    elem = ET.Element(CONTACT_TAG)
    ET.SubElement(elem, "name").text = contact.name.value
    for tag, attr in (("phone", contact.phone), ("email", contact.email), ("address", contact.address)):
        child = ET.SubElement(elem, tag, {PRIVATE_ATTR: "true" if attr.private else "false"})
        child.text = attr.value
    tags = ET.SubElement(elem, TAGS_TAG)
    for label in contact.tags.labels():
        ET.SubElement(tags, TAG_TAG).text = label
    return elem


def _registry_from_root(root: ET.Element) -> Registry:
    if root.tag != ROOT_TAG:
        raise _MalformedContent(f"expected <{ROOT_TAG}> root, found <{root.tag}>")
    registry = Registry()
    for child in root:
        if child.tag != CONTACT_TAG:
            raise _MalformedContent(f"unexpected element <{child.tag}> under <{ROOT_TAG}>")
        registry.add_record(_contact_from_element(child))
    return registry


def _contact_from_element(elem: ET.Element) -> Contact:
    name = _required(elem, "name")
    phone = _required(elem, "phone")
    email = _required(elem, "email")
    address = _required(elem, "address")
    return Contact(
        name=Name(name.text or ""),
        phone=Phone(phone.text or "", private=_is_private(phone)),
        email=Email(email.text or "", private=_is_private(email)),
        address=Address(address.text or "", private=_is_private(address)),
        tags=_tags_from_element(elem.find(TAGS_TAG)),
    )


def _required(parent: ET.Element, tag: str) -> ET.Element:
    found = parent.findall(tag)
    if len(found) != 1:
        raise _MalformedContent(f"<{parent.tag}> must have exactly one <{tag}>, found {len(found)}")
    return found[0]


def _is_private(elem: ET.Element) -> bool:
    raw = elem.get(PRIVATE_ATTR, "false")
    if raw not in ("true", "false"):
        raise _MalformedContent(f"<{elem.tag}> has invalid {PRIVATE_ATTR}={raw!r}")
    return raw == "true"


def _tags_from_element(elem: ET.Element | None) -> TagSet:
    if elem is None:
        return TagSet()
    labels = []
    for child in elem:
        if child.tag != TAG_TAG:
            raise _MalformedContent(f"unexpected element <{child.tag}> under <{TAGS_TAG}>")
        labels.append(child.text or "")
    return TagSet.from_labels(labels)
