from dataclasses import dataclass, replace
from typing import Any, Generic, Protocol, TypeVar

from typing_extensions import Self, override

from rangesplit.core import SplitResult, Splittable


class Comparable(Protocol):
    def __lt__(self, other: Any, /) -> bool: ...

    def __le__(self, other: Any, /) -> bool: ...


T = TypeVar("T", bound=Comparable)


@dataclass(frozen=True, kw_only=True)
class Interval(Splittable["Interval[T]"], Generic[T]):
    """Half-open range ``[start, end)`` over any ordered scalar type.

    An interval with ``start == end`` is empty. Subclasses may carry extra
    fields; pieces produced from an interval keep its class and fields.
    """

    start: T
    end: T

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise ValueError(
                f"Interval start ({self.start!r}) must be <= end ({self.end!r})"
            )

    def __str__(self) -> str:
        return f"[{self.start}, {self.end})"

    def __contains__(self, point: T) -> bool:
        return self.contains(point)

    @classmethod
    def from_range(cls, bounds: range) -> "Interval[int]":
        if bounds.step != 1:
            raise ValueError(
                f"Only unit-step ranges map to an interval, got step {bounds.step}.\n"
                f"Hint: Interval.from_range(range({bounds.start}, {bounds.stop}))"
            )
        return cls(start=bounds.start, end=max(bounds.start, bounds.stop))

    def to_range(self) -> range:
        return range(self.start, self.end)  # pyright: ignore[reportArgumentType]

    @property
    def is_empty(self) -> bool:
        return not self.start < self.end

    def contains(self, point: T) -> bool:
        return self.start <= point and point < self.end

    def overlaps(self, other: "Interval[T]") -> bool:
        """True if the two intervals share at least one point.

        Touching endpoints do not overlap: ``[0, 5)`` and ``[5, 8)`` are adjacent.
        """
        return (
            self.start < other.end
            and other.start < self.end
            and not self.is_empty
            and not other.is_empty
        )

    def _piece(self, start: T, end: T) -> Self | None:
        """A copy of ``self`` narrowed to ``[start, end)``, or None if that is empty."""
        if not start < end:
            return None
        return replace(self, start=start, end=end)

    @override
    def split(self, other: "Interval[T]") -> SplitResult["Interval[T]"]:
        """Partition ``self`` into the parts below, inside and above ``other``.

        Example:
            >>> Interval(start=0, end=10).split(Interval(start=3, end=6))
            SplitResult(below=Interval(start=0, end=3), intersection=Interval(start=3, end=6), above=Interval(start=6, end=10))

        Empty pieces are never returned, so splitting an empty interval gives
        ``(None, None, None)``.
        """
        below = inter = above = None

        if self.start < other.start:
            below = self._piece(self.start, min(self.end, other.start))
            if other.start < self.end and self.end <= other.end:
                # self ends inside other
                inter = self._piece(other.start, self.end)
            elif other.end < self.end:
                # self straddles other
                inter = self._piece(other.start, other.end)
                above = self._piece(other.end, self.end)
        elif other.contains(self.start):
            inter = self._piece(self.start, min(self.end, other.end))
            if other.end < self.end:
                above = self._piece(other.end, self.end)
        else:
            above = self._piece(self.start, self.end)

        return SplitResult(below, inter, above)
