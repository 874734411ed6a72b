"""Shell: runs parsed requests against a ContactService and renders feedback."""

import logging

from addressbook.application import (
    ContactAdded,
    ContactDeleted,
    ContactService,
    Duplicate,
)
from addressbook.domain import Contact
from cli.parser import (
    HELP_TEXT,
    AddRequest,
    ClearRequest,
    DeleteRequest,
    ExitRequest,
    FindRequest,
    HelpRequest,
    Incorrect,
    ListRequest,
    ViewRequest,
    parse,
)

logger = logging.getLogger(__name__)

MESSAGE_ADDED = "New contact added: {}"
MESSAGE_DUPLICATE = "This contact already exists in the address book."
MESSAGE_DELETED = "Deleted contact: {}"
MESSAGE_NOT_FOUND = "That contact is no longer in the address book."
MESSAGE_CLEARED = "Address book has been cleared."
MESSAGE_BAD_INDEX = "The contact index provided is invalid."
MESSAGE_EMPTY = "No contacts yet. Use 'add' to add one."
MESSAGE_GOODBYE = "Exiting address book."


def _format_listing(contacts: list[Contact]) -> str:
    lines = [f"{i}. {c.as_text_hide_private()}" for i, c in enumerate(contacts, start=1)]
    lines.append(f"{len(contacts)} contacts listed.")
    return "\n".join(lines)


class Shell:
    """Keeps the last shown listing so INDEX arguments can refer to it."""

    def __init__(self, service: ContactService) -> None:
        self._service = service
        self._last_shown: list[Contact] = []

    def handle(self, text: str) -> tuple[str, bool]:
        """Run one line of input. Returns (feedback, should_exit)."""
        request = parse(text)
        logger.debug("Parsed %r as %s", text, type(request).__name__)
        if isinstance(request, ExitRequest):
            return MESSAGE_GOODBYE, True
        if isinstance(request, Incorrect):
            return request.message, False
        if isinstance(request, HelpRequest):
            return HELP_TEXT, False
        if isinstance(request, AddRequest):
            result = self._service.add_contact(request.command)
            if isinstance(result, ContactAdded):
                return MESSAGE_ADDED.format(result.contact), False
            if isinstance(result, Duplicate):
                return MESSAGE_DUPLICATE, False
        if isinstance(request, ListRequest):
            return self._show(self._service.list_contacts()), False
        if isinstance(request, FindRequest):
            return self._show(self._service.find_contacts(request.keywords)), False
        if isinstance(request, ClearRequest):
            self._service.clear()
            self._last_shown = []
            return MESSAGE_CLEARED, False
        if isinstance(request, DeleteRequest):
            target = self._shown(request.index)
            if target is None:
                return MESSAGE_BAD_INDEX, False
            result = self._service.delete_contact(target)
            if isinstance(result, ContactDeleted):
                return MESSAGE_DELETED.format(result.contact), False
            return MESSAGE_NOT_FOUND, False
        if isinstance(request, ViewRequest):
            target = self._shown(request.index)
            if target is None:
                return MESSAGE_BAD_INDEX, False
            if not self._service.registry.contains(target):
                return MESSAGE_NOT_FOUND, False
            if request.show_private:
                return target.as_text(), False
            return target.as_text_hide_private(), False
        raise AssertionError(f"Unhandled request: {request!r}")

    def _show(self, contacts: list[Contact]) -> str:
        self._last_shown = contacts
        if not contacts:
            return MESSAGE_EMPTY
        return _format_listing(contacts)

    def _shown(self, index: int) -> Contact | None:
        if 1 <= index <= len(self._last_shown):
            return self._last_shown[index - 1]
        return None
