from dataclasses import dataclass
from typing import Self


@dataclass(frozen=True)
class Tracker:
    """Position in a deck: the current slide index and the number of slides.

    Every move returns a new tracker and leaves this one untouched. The current \
    index always satisfies `0 <= current < total`, or is 0 for an empty deck.
    """

    current: int
    total: int

    @classmethod
    def for_total(cls, total: int) -> Self:
        return cls(0, max(total, 0))

    def next(self) -> Self:
        if self.current >= self.total - 1:
            return self
        return type(self)(self.current + 1, self.total)

    def previous(self) -> Self:
        if self.current <= 0:
            return self
        return type(self)(self.current - 1, self.total)

    def first(self) -> Self:
        return type(self)(0, self.total)

    def last(self) -> Self:
        return type(self)(max(self.total - 1, 0), self.total)

    def go_to(self, index: int) -> Self:
        """Move to slide `index`, ignoring indices outside of the deck."""
        if index < 0 or index >= self.total:
            return self
        return type(self)(index, self.total)

    def resize(self, total: int) -> Self:
        """Change the number of slides, keeping the current index in bounds."""
        if total < 0 or total == self.total:
            return self
        return type(self)(max(min(self.current, total - 1), 0), total)
