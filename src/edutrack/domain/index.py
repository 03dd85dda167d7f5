"""User-facing list positions."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Index:
    """
    A position in a displayed list. Users see 1-based positions; the model
    works with 0-based ones. Bounds are checked by whoever resolves it.
    """

    zero_based: int

    def __post_init__(self):
        if self.zero_based < 0:
            raise ValueError("Index must be non-negative.")

    @classmethod
    def from_zero_based(cls, value: int) -> "Index":
        return cls(zero_based=value)

    @classmethod
    def from_one_based(cls, value: int) -> "Index":
        return cls(zero_based=value - 1)

    @property
    def one_based(self) -> int:
        return self.zero_based + 1

    def __str__(self) -> str:
        return str(self.one_based)
