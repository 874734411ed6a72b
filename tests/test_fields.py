"""Tests for field validation: Name, Phone, Email, Address, Tag and TagSet."""

import pytest

from addressbook.domain import Address, Email, Name, Phone, Tag, TagSet, ValidationError


def _assert_rejected(kind, values) -> None:
    for value in values:
        with pytest.raises(ValidationError) as info:
            kind(value)
        assert info.value.kind == kind.__name__.lower()


def test_invalid_names_rejected():
    _assert_rejected(Name, ["", " ", "'", "[]\\[;]", "Robert'); DROP", 'John "JD" Doe'])


def test_invalid_phones_rejected():
    _assert_rejected(Phone, ["", " ", "1234-5678", "[]\\[;]", "abc", "a123", "+651234", "9876 5432"])


def test_invalid_emails_rejected():
    _assert_rejected(
        Email,
        ["", " ", "def.com", "@", "@def", "@def.com", "abc@", "abc@def", "a!b@def.com", "a@b@def.com"],
    )


def test_invalid_addresses_rejected():
    _assert_rejected(Address, ["", " ", "\t\n"])


def test_invalid_tags_rejected():
    _assert_rejected(Tag, ["", " ", "'", "two words", "semi;colon", "[x]"])


def test_valid_values_are_trimmed():
    assert Name("  John Doe ").value == "John Doe"
    assert Phone(" 98765432 ").value == "98765432"
    assert Email(" johnd@gmail.com").value == "johnd@gmail.com"
    assert Address(" Blk 123, #01-01  ").value == "Blk 123, #01-01"
    assert Tag(" friends ").name == "friends"


def test_examples_are_valid():
    assert Name(Name.EXAMPLE).value == Name.EXAMPLE
    assert Phone(Phone.EXAMPLE).value == Phone.EXAMPLE
    assert Email(Email.EXAMPLE).value == Email.EXAMPLE
    assert Address(Address.EXAMPLE).value == Address.EXAMPLE
    assert Tag(Tag.EXAMPLE).name == Tag.EXAMPLE


def test_name_accepts_common_punctuation():
    assert Name("Dr. Jane Smith-Jones, Jr").value == "Dr. Jane Smith-Jones, Jr"


def test_email_accepts_dotted_local_and_subdomains():
    assert Email("john.doe+work@mail.example.co").value == "john.doe+work@mail.example.co"


def test_privacy_flag_ignored_by_equality():
    assert Phone("123", private=True) == Phone("123", private=False)
    assert hash(Email("a@b.com", private=True)) == hash(Email("a@b.com"))
    assert Address("x", private=True).private is True
    assert Address("x").private is False


def test_value_is_immutable():
    phone = Phone("123")
    with pytest.raises(AttributeError):
        phone.value = "456"


def test_non_string_rejected():
    with pytest.raises(ValidationError):
        Name(None)


def test_tag_set_from_labels_deduplicates_and_sorts():
    tags = TagSet.from_labels(["work", "friends", "work"])
    assert tags.labels() == ["friends", "work"]
    assert len(tags) == 2
    assert Tag("work") in tags


def test_tag_set_iteration_is_restartable():
    tags = TagSet.from_labels({"a", "b"})
    assert list(tags) == list(tags)


def test_tag_set_equality_ignores_order():
    assert TagSet.from_labels(["a", "b"]) == TagSet.from_labels(["b", "a"])
    assert TagSet.from_labels(["a"]) != TagSet.from_labels(["a", "b"])
    assert TagSet() == TagSet.from_labels([])


def test_tag_set_rejects_first_invalid_label():
    with pytest.raises(ValidationError):
        TagSet.from_labels(["validTag", ""])
    with pytest.raises(ValidationError):
        TagSet.from_labels(["", " "])


def test_tag_set_text():
    assert str(TagSet.from_labels(["b", "a"])) == "[a][b]"
    assert str(TagSet()) == ""


def test_address_rejects_characters_xml_cannot_carry():
    _assert_rejected(Address, ["Blk\x01 1", "Blk 1\x0bUnit 2", "Blk\x00", "Blk 1\x1f", "Blk \ufffe"])


def test_address_keeps_tabs_and_newlines_and_normalizes_carriage_returns():
    assert Address("Blk 1\tUnit 2\nSingapore").value == "Blk 1\tUnit 2\nSingapore"
    assert Address("Blk 1\r\nUnit 2\rSingapore").value == "Blk 1\nUnit 2\nSingapore"
    assert Address("Blk 1\rUnit 2") == Address("Blk 1\nUnit 2")
