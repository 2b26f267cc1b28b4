"""Non-empty ordered collection used for document fragments and per-document embeddings."""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, TypeVar

from docembed.services.embedder.errors import EmptyListError

T = TypeVar("T")


class OneOrMany(Generic[T]):
    """
    Ordered collection holding at least one item. Append-only: items can be added
    but never removed, so the non-empty guarantee holds for the object's lifetime.
    """

    __slots__ = ("_first", "_rest")

    def __init__(self, first: T, rest: Iterable[T] = ()) -> None:
        self._first = first
        self._rest: list[T] = list(rest)

    @classmethod
    def one(cls, item: T) -> OneOrMany[T]:
        return cls(item)

    @classmethod
    def many(cls, items: Iterable[T]) -> OneOrMany[T]:
        """Build from any iterable. Raises EmptyListError if it yields nothing."""
        values = list(items)
        if not values:
            raise EmptyListError("Cannot create OneOrMany from an empty sequence")
        return cls(values[0], values[1:])

    def first(self) -> T:
        return self._first

    def rest(self) -> list[T]:
        return list(self._rest)

    def add(self, item: T) -> None:
        self._rest.append(item)

    def to_list(self) -> list[T]:
        return [self._first, *self._rest]

    def __iter__(self) -> Iterator[T]:
        yield self._first
        yield from self._rest

    def __len__(self) -> int:
        return 1 + len(self._rest)

    def __getitem__(self, index: int) -> T:
        return self.to_list()[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OneOrMany):
            return NotImplemented
        return self.to_list() == other.to_list()

    def __repr__(self) -> str:
        return f"OneOrMany({self.to_list()!r})"
