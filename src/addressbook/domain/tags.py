"""TagSet: the labels attached to one contact, without duplicates."""

from collections.abc import Iterable, Iterator

from addressbook.domain.fields import Tag


class TagSet:
    """Immutable set of Tags. Iterates in sorted order so output is stable."""

    __slots__ = ("_tags",)

    def __init__(self, tags: Iterable[Tag] = ()) -> None:
        self._tags = tuple(sorted(set(tags)))

    @classmethod
    def from_labels(cls, labels: Iterable[str]) -> "TagSet":
        """Validate each raw label; the first invalid one raises ValidationError."""
        return cls(Tag(label) for label in labels)

    def labels(self) -> list[str]:
        return [tag.name for tag in self._tags]

    def __iter__(self) -> Iterator[Tag]:
        return iter(self._tags)

    def __len__(self) -> int:
        return len(self._tags)

    def __contains__(self, tag: object) -> bool:
        return tag in self._tags

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TagSet):
            return NotImplemented
        return set(self._tags) == set(other._tags)

    def __hash__(self) -> int:
        return hash(frozenset(self._tags))

    def __str__(self) -> str:
        return "".join(str(tag) for tag in self._tags)

    def __repr__(self) -> str:
        return f"TagSet({self.labels()!r})"
