"""Majority-vote secret recovery with corrupt-share classification.

Every k-subset of the provided shares is interpolated at x=0. Identical
candidates are tallied in order of first appearance; the candidate with
the most votes wins, ties going to the first integer-valued candidate
and otherwise to the first seen. Shares that took part in at least one
winning subset are consistent, all others inconsistent.
"""

import logging
from concurrent.futures import ProcessPoolExecutor
from functools import partial

from sharevote.combinations import combinations, count_combinations, chunked
from sharevote.config import ClassifierConfig
from sharevote.errors import DuplicateAbscissa, InsufficientShares
from sharevote.lagrange import interpolate_at_zero, lagrange_interpolate
from sharevote.report import ClassificationResult
from sharevote.share import as_shares

logger = logging.getLogger(__name__)


class Tally:
    """Order-preserving vote accumulator.

    votes maps candidate -> list of combinations that produced it; dict
    insertion order is first-appearance order.
    """

    __slots__ = ('votes', 'total', 'skipped')

    def __init__(self):
        self.votes: dict = {}
        self.total = 0
        self.skipped = 0

    def record(self, value, combination: tuple):
        self.votes.setdefault(value, []).append(combination)
        self.total += 1

    def skip(self):
        self.total += 1
        self.skipped += 1

    def merge(self, other: 'Tally'):
        """Fold in a tally of combinations that come after ours."""
        for value, combos in other.votes.items():
            self.votes.setdefault(value, []).extend(combos)
        self.total += other.total
        self.skipped += other.skipped

    def counts(self) -> list:
        """(candidate, votes) in first-appearance order."""
        return [(value, len(combos)) for value, combos in self.votes.items()]

    def __len__(self):
        return len(self.votes)


def tally_combinations(shares: list, combos, strict: bool = True) -> Tally:
    """Interpolate each combination and tally the candidates.

    In strict mode a duplicate x propagates DuplicateAbscissa; otherwise
    the combination is counted as skipped and the pass continues.
    """
    tally = Tally()
    for combo in combos:
        try:
            value = interpolate_at_zero(shares, combo)
        except DuplicateAbscissa as e:
            if strict:
                raise
            logger.debug("Skipping combination %s: %s", combo, e)
            tally.skip()
            continue
        tally.record(value, combo)
    return tally


def _tally_chunk(shares: list, strict: bool, combos: list) -> Tally:
    return tally_combinations(shares, combos, strict)


def parallel_tally(shares: list, k: int, workers: int,
                   chunk_size: int, strict: bool = True) -> Tally:
    """Tally across worker processes, merging chunks in enumeration order.

    executor.map yields chunk results in submission order, so the merged
    first-appearance order equals that of a sequential pass.
    """
    tally = Tally()
    work = partial(_tally_chunk, shares, strict)
    with ProcessPoolExecutor(max_workers=workers) as executor:
        try:
            for part in executor.map(work, chunked(combinations(len(shares), k),
                                                   chunk_size)):
                tally.merge(part)
        except DuplicateAbscissa:
            executor.shutdown(wait=False, cancel_futures=True)
            raise
    return tally


def select_winner(counts: list) -> tuple:
    """Pick (candidate, votes) from first-appearance-ordered counts.

    Strictly more votes wins. On equal votes an integer candidate
    replaces a non-integer one; otherwise the earlier one stays.
    """
    best = None
    best_count = -1
    for value, count in counts:
        if count > best_count:
            best, best_count = value, count
        elif count == best_count and not best.is_integer() and value.is_integer():
            best = value
    return best, best_count


def classify(shares, k: int, config: ClassifierConfig = None,
             strict: bool = None, workers: int = None) -> ClassificationResult:
    """Recover the majority secret and split shares into consistent/not.

    Args:
        shares: Share objects or (x, y) pairs, in stable index order.
        k: Reconstruction threshold.
        config: Optional ClassifierConfig; strict/workers override it.

    Returns:
        ClassificationResult.

    Raises:
        InsufficientShares: no k-subset exists (k > len(shares) or no shares).
        DuplicateAbscissa: strict mode and a subset repeats an x.
    """
    if k < 0:
        raise ValueError(f"Threshold k must be >= 0, got {k}")
    config = (config or ClassifierConfig()).replace(strict=strict, workers=workers)
    shares = as_shares(shares)
    n = len(shares)

    expected = count_combinations(n, k)
    if n == 0 or expected == 0:
        raise InsufficientShares(n, k)

    logger.info("Classifying %d share(s), k=%d: %d combination(s)",
                n, k, expected)
    if config.workers > 1 and expected > config.chunk_size:
        tally = parallel_tally(shares, k, config.workers,
                               config.chunk_size, config.strict)
    else:
        tally = tally_combinations(shares, combinations(n, k), config.strict)

    if not tally.votes:
        # Permissive mode skipped every combination
        raise InsufficientShares(n, k)

    counts = tally.counts()
    for value, votes in counts:
        logger.debug("Candidate %s: %d vote(s)", value, votes)
    winner, votes = select_winner(counts)

    winning = tuple(tally.votes[winner])
    consistent = frozenset(idx for combo in winning for idx in combo)
    inconsistent = frozenset(range(n)) - consistent
    logger.info("Secret %s won with %d/%d vote(s); %d inconsistent share(s)",
                winner, votes, tally.total, len(inconsistent))

    return ClassificationResult(
        winning_secret=winner,
        vote_count=votes,
        total_combinations=tally.total,
        consistent_share_indices=consistent,
        inconsistent_share_indices=inconsistent,
        winning_combinations=winning,
        candidates=tuple(counts),
        skipped_combinations=tally.skipped,
    )


def verify_share(shares, result: ClassificationResult, index: int) -> bool:
    """Check whether shares[index] lies on the winning polynomial.

    Uses the first winning combination to define the polynomial.
    """
    shares = as_shares(shares)
    points = [shares[i].point for i in result.winning_combinations[0]]
    if index in result.winning_combinations[0]:
        return True
    return lagrange_interpolate(points, shares[index].x) == shares[index].y
