"""Exception hierarchy for share reconstruction and classification.

Each kind also subclasses the builtin a caller would naturally catch,
so ``except ZeroDivisionError`` keeps working around rational arithmetic.
"""


class ShareVoteError(Exception):
    """Base class for every error raised by sharevote."""


class DivisionByZero(ShareVoteError, ZeroDivisionError):
    """A rational was built or divided with a zero denominator."""


class NotAnInteger(ShareVoteError, ValueError):
    """Exact integer extraction requested on a non-integral rational."""


class DuplicateAbscissa(ShareVoteError, ValueError):
    """Two shares selected for one interpolation have the same x."""

    def __init__(self, x: int, indices: tuple):
        self.x = x
        self.indices = tuple(indices)
        super().__init__(
            f"Shares at indices {self.indices[0]} and {self.indices[1]} "
            f"share x={x}; interpolation is undefined"
        )

    # Rebuilt from fields when raised inside a worker process
    def __reduce__(self):
        return (self.__class__, (self.x, self.indices))


class InsufficientShares(ShareVoteError, ValueError):
    """Fewer shares than the threshold, so nothing can be voted on."""

    def __init__(self, n_provided: int, k: int):
        self.n_provided = n_provided
        self.k = k
        super().__init__(
            f"No combinations to evaluate: {n_provided} share(s) provided, "
            f"threshold k={k}"
        )

    def __reduce__(self):
        return (self.__class__, (self.n_provided, self.k))


class DecodeError(ShareVoteError, ValueError):
    """The share document or a numeric literal could not be decoded."""
