from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Generic, NamedTuple, TypeVar

S = TypeVar("S")


class SplitResult(NamedTuple, Generic[S]):
    """The pieces of a value split relative to another, ordered by position.

    Each slot is ``None`` when that piece does not exist. Being a tuple, a
    result compares equal to a plain ``(below, intersection, above)`` triple.
    """

    below: S | None
    intersection: S | None
    above: S | None

    def pieces(self) -> Iterator[S]:
        """Yield the present pieces from lowest to highest."""
        for piece in self:
            if piece is not None:
                yield piece


class Splittable(ABC, Generic[S]):

    @abstractmethod
    def split(self, other: S) -> SplitResult[S]:
        """Split ``self`` by ``other`` into up to three parts.

        - ``below``: the part of ``self`` before ``other``
        - ``intersection``: the part of ``self`` shared with ``other``
        - ``above``: the part of ``self`` after ``other``
        """
        pass


def split(item: Splittable[S], other: S) -> SplitResult[S]:
    """Split ``item`` relative to ``other`` (equivalent to ``item.split(other)``)."""

    return item.split(other)
