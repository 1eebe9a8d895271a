"""k-subset enumeration over share indices.

Index tuples come out strictly increasing and in lexicographic order:
the smallest index is fixed first and the remainder filled recursively.
"""

from math import comb


def combinations(n: int, k: int):
    """Yield every strictly increasing k-tuple drawn from range(n).

    k > n yields nothing; k == 0 yields a single empty tuple.
    The generator is finite and can be restarted by calling again.
    """
    if n < 0 or k < 0:
        raise ValueError(f"n and k must be >= 0, got n={n}, k={k}")
    if k > n:
        return
    yield from _descend(n, k, 0, ())


def _descend(n: int, k: int, start: int, prefix: tuple):
    depth = len(prefix)
    if depth == k:
        yield prefix
        return
    # Leave room for the k - depth - 1 indices still to be placed
    for i in range(start, n - (k - depth) + 1):
        yield from _descend(n, k, i + 1, prefix + (i,))


def count_combinations(n: int, k: int) -> int:
    """C(n, k), zero when k > n."""
    if n < 0 or k < 0:
        raise ValueError(f"n and k must be >= 0, got n={n}, k={k}")
    return comb(n, k)


def chunked(iterable, size: int):
    """Split an iterable into consecutive lists of at most `size` items.

    Chunk order follows the iterable, so chunk i holds items that come
    before every item of chunk i+1.
    """
    if size < 1:
        raise ValueError(f"Chunk size must be >= 1, got {size}")
    chunk = []
    for item in iterable:
        chunk.append(item)
        if len(chunk) == size:
            yield chunk
            chunk = []
    if chunk:
        yield chunk
