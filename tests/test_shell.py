"""Tests for the terminal shell: parsing and request handling."""

from addressbook.application import ContactService
from addressbook.infrastructure import InMemoryContactStore
from cli.parser import (
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
from cli.shell import (
    MESSAGE_BAD_INDEX,
    MESSAGE_CLEARED,
    MESSAGE_DUPLICATE,
    MESSAGE_EMPTY,
    MESSAGE_GOODBYE,
    Shell,
)

ADD_JOHN = "add John Doe pp/98765432 e/johnd@gmail.com pa/John street, block 123, #01-01 t/friends t/work"
ADD_JANE = "add Jane Roe p/91234567 pe/jane@example.com a/Blk 9"


def _shell() -> tuple[Shell, InMemoryContactStore]:
    store = InMemoryContactStore()
    return Shell(ContactService(store)), store


def test_parse_add_with_privacy_and_tags():
    request = parse(ADD_JOHN)
    assert isinstance(request, AddRequest)
    contact = request.command.contact
    assert contact.name.value == "John Doe"
    assert contact.phone.value == "98765432"
    assert contact.phone.private is True
    assert contact.email.private is False
    assert contact.address.value == "John street, block 123, #01-01"
    assert contact.address.private is True
    assert contact.tags.labels() == ["friends", "work"]


def test_parse_add_without_tags():
    request = parse(ADD_JANE)
    assert isinstance(request, AddRequest)
    assert request.command.contact.email.private is True
    assert len(request.command.contact.tags) == 0


def test_parse_add_malformed_and_invalid():
    assert isinstance(parse("add John Doe"), Incorrect)
    assert isinstance(parse("add John Doe e/a@b.com p/123 a/x"), Incorrect)
    invalid = parse("add John Doe p/1234-5678 e/johnd@gmail.com a/Blk 1")
    assert isinstance(invalid, Incorrect)
    assert "digits" in invalid.message


def test_parse_simple_commands():
    assert isinstance(parse("list"), ListRequest)
    assert isinstance(parse("clear"), ClearRequest)
    assert isinstance(parse("help"), HelpRequest)
    assert isinstance(parse("  exit  "), ExitRequest)
    assert parse("find alice bob") == FindRequest(keywords=["alice", "bob"])
    assert isinstance(parse("find"), Incorrect)
    assert isinstance(parse("frobnicate"), Incorrect)
    assert isinstance(parse(""), Incorrect)


def test_parse_index_commands():
    assert parse("delete 2") == DeleteRequest(index=2)
    assert parse("view 1") == ViewRequest(index=1, show_private=False)
    assert parse("viewall 3") == ViewRequest(index=3, show_private=True)
    assert isinstance(parse("delete zero"), Incorrect)
    assert isinstance(parse("view 0"), Incorrect)


def test_add_then_duplicate():
    shell, store = _shell()
    feedback, done = shell.handle(ADD_JOHN)
    assert not done
    assert feedback.startswith("New contact added: John Doe")
    assert shell.handle(ADD_JOHN) == (MESSAGE_DUPLICATE, False)
    assert store.save_count == 1


def test_list_hides_private_details():
    shell, _ = _shell()
    assert shell.handle("list") == (MESSAGE_EMPTY, False)
    shell.handle(ADD_JOHN)
    feedback, _ = shell.handle("list")
    assert "1. John Doe Email: johnd@gmail.com Tags: [friends][work]" in feedback
    assert "98765432" not in feedback
    assert feedback.endswith("1 contacts listed.")


def test_view_and_viewall_use_last_listing():
    shell, _ = _shell()
    shell.handle(ADD_JOHN)
    assert shell.handle("view 1") == (MESSAGE_BAD_INDEX, False)
    shell.handle("list")
    hidden, _ = shell.handle("view 1")
    full, _ = shell.handle("viewall 1")
    assert "98765432" not in hidden
    assert "Phone: (private) 98765432" in full
    assert shell.handle("view 2") == (MESSAGE_BAD_INDEX, False)


def test_find_then_delete():
    shell, _ = _shell()
    shell.handle(ADD_JOHN)
    shell.handle(ADD_JANE)
    feedback, _ = shell.handle("find roe")
    assert "Jane Roe" in feedback and "John Doe" not in feedback
    deleted, _ = shell.handle("delete 1")
    assert deleted.startswith("Deleted contact: Jane Roe")
    remaining, _ = shell.handle("list")
    assert "Jane Roe" not in remaining
    assert "John Doe" in remaining


def test_delete_twice_reports_not_found():
    shell, _ = _shell()
    shell.handle(ADD_JOHN)
    shell.handle("list")
    shell.handle("delete 1")
    feedback, _ = shell.handle("delete 1")
    assert "no longer" in feedback


def test_clear_and_exit():
    shell, store = _shell()
    shell.handle(ADD_JOHN)
    assert shell.handle("clear") == (MESSAGE_CLEARED, False)
    assert len(store.load()) == 0
    assert shell.handle("exit") == (MESSAGE_GOODBYE, True)
