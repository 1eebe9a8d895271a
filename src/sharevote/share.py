"""Decoded share points."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Share:
    """One (x, y) point of the hidden polynomial.

    `base` and `raw` keep the literal the value was decoded from, for
    reporting; the core only reads x and y.
    """
    x: int
    y: int
    base: Optional[int] = None
    raw: Optional[str] = None

    @property
    def point(self) -> tuple:
        return (self.x, self.y)


def as_shares(points) -> list:
    """Accept Share objects or (x, y) pairs and return a list of Share."""
    shares = []
    for p in points:
        if isinstance(p, Share):
            shares.append(p)
        else:
            x, y = p
            shares.append(Share(x, y))
    return shares
