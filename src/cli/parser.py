"""Turn one line of user input into a request for the shell."""

import re
from dataclasses import dataclass

from addressbook.application import AddContact
from addressbook.domain import ValidationError

ADD_USAGE = (
    "add NAME [p]p/PHONE [p]e/EMAIL [p]a/ADDRESS [t/TAG]...\n"
    "  Prefix p/, e/ or a/ with 'p' to make that detail private.\n"
    "  Example: add John Doe p/98765432 pe/johnd@gmail.com a/John street t/friends"
)

HELP_TEXT = "\n".join(
    [
        ADD_USAGE,
        "list                 List all contacts.",
        "find KEYWORD...      List contacts whose name contains any keyword.",
        "delete INDEX         Delete the contact at INDEX in the last listing.",
        "view INDEX           Show the contact at INDEX, hiding private details.",
        "viewall INDEX        Show the contact at INDEX, including private details.",
        "clear                Delete all contacts.",
        "help                 Show this message.",
        "exit                 Quit.",
    ]
)

_ADD_ARGS_RE = re.compile(
    r"(?P<name>[^/]+)"
    r"\s+(?P<phone_private>p?)p/(?P<phone>[^/]+)"
    r"\s+(?P<email_private>p?)e/(?P<email>[^/]+)"
    r"\s+(?P<address_private>p?)a/(?P<address>[^/]+?)"
    r"(?P<tags>(?:\s+t/[^/]+)*)"
)
_TAG_SPLIT_RE = re.compile(r"\s+t/")


@dataclass(frozen=True)
class AddRequest:
    command: AddContact


@dataclass(frozen=True)
class ListRequest:
    pass


@dataclass(frozen=True)
class FindRequest:
    keywords: list[str]


@dataclass(frozen=True)
class DeleteRequest:
    index: int


@dataclass(frozen=True)
class ViewRequest:
    index: int
    show_private: bool = False


@dataclass(frozen=True)
class ClearRequest:
    pass


@dataclass(frozen=True)
class HelpRequest:
    pass


@dataclass(frozen=True)
class ExitRequest:
    pass


@dataclass(frozen=True)
class Incorrect:
    """Input could not be turned into a request."""

    message: str


Request = (
    AddRequest
    | ListRequest
    | FindRequest
    | DeleteRequest
    | ViewRequest
    | ClearRequest
    | HelpRequest
    | ExitRequest
    | Incorrect
)


def parse(text: str) -> Request:
    word, _, args = (text or "").strip().partition(" ")
    args = args.strip()
    if word == "add":
        return _parse_add(args)
    if word == "list":
        return ListRequest()
    if word == "find":
        keywords = args.split()
        if not keywords:
            return Incorrect("Usage: find KEYWORD [MORE_KEYWORDS]...")
        return FindRequest(keywords=keywords)
    if word == "delete":
        return _parse_index(args, lambda i: DeleteRequest(index=i), "delete INDEX")
    if word == "view":
        return _parse_index(args, lambda i: ViewRequest(index=i), "view INDEX")
    if word == "viewall":
        return _parse_index(
            args, lambda i: ViewRequest(index=i, show_private=True), "viewall INDEX"
        )
    if word == "clear":
        return ClearRequest()
    if word == "help":
        return HelpRequest()
    if word == "exit":
        return ExitRequest()
    return Incorrect("Unknown command. Type 'help' to see what is available.")


def _parse_add(args: str) -> AddRequest | Incorrect:
    match = _ADD_ARGS_RE.fullmatch(args)
    if not match:
        return Incorrect(f"Usage: {ADD_USAGE}")
    tag_text = match.group("tags")
    tags = [t for t in _TAG_SPLIT_RE.split(tag_text) if t.strip()] if tag_text else []
    try:
        command = AddContact.from_raw(
            match.group("name"),
            match.group("phone"),
            match.group("phone_private") == "p",
            match.group("email"),
            match.group("email_private") == "p",
            match.group("address"),
            match.group("address_private") == "p",
            tags,
        )
    except ValidationError as exc:
        return Incorrect(str(exc))
    return AddRequest(command=command)


def _parse_index(args: str, build, usage: str) -> Request:
    try:
        index = int(args)
    except ValueError:
        return Incorrect(f"Usage: {usage}")
    if index < 1:
        return Incorrect(f"Usage: {usage}")
    return build(index)
