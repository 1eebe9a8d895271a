"""Classification result and its text / JSON renderings."""

import json
from dataclasses import dataclass, field
from typing import Optional

from sharevote.rational import Rational


@dataclass(frozen=True)
class ClassificationResult:
    """Outcome of one majority vote over all k-subsets.

    consistent_share_indices and inconsistent_share_indices partition
    range(n_provided). candidates lists every distinct secret with its
    vote count, in order of first appearance.
    """
    winning_secret: Rational
    vote_count: int
    total_combinations: int
    consistent_share_indices: frozenset
    inconsistent_share_indices: frozenset
    winning_combinations: tuple = ()
    candidates: tuple = ()
    skipped_combinations: int = 0

    @property
    def is_integer(self) -> bool:
        return self.winning_secret.is_integer()


@dataclass(frozen=True)
class ConsensusReport:
    """Everything the boundary needs to print one run."""
    declared_n: int
    k: int
    shares: tuple
    result: ClassificationResult
    extra: dict = field(default_factory=dict)

    @property
    def n_provided(self) -> int:
        return len(self.shares)

    def consistent_shares(self) -> list:
        """(index, share) pairs supporting the winner, ascending by x."""
        return self._sorted(self.result.consistent_share_indices)

    def inconsistent_shares(self) -> list:
        return self._sorted(self.result.inconsistent_share_indices)

    def _sorted(self, indices) -> list:
        pairs = [(i, self.shares[i]) for i in indices]
        pairs.sort(key=lambda p: (p[1].x, p[0]))
        return pairs

    def to_dict(self) -> dict:
        """Export as a plain dict; rationals become strings."""
        r = self.result
        return {
            'n': self.declared_n,
            'k': self.k,
            'shares_provided': self.n_provided,
            'total_combinations': r.total_combinations,
            'skipped_combinations': r.skipped_combinations,
            'secret': str(r.winning_secret),
            'secret_is_integer': r.is_integer,
            'vote_count': r.vote_count,
            'candidates': [
                {'secret': str(value), 'votes': votes}
                for value, votes in r.candidates
            ],
            'consistent': [_share_entry(s) for _, s in self.consistent_shares()],
            'inconsistent': [_share_entry(s) for _, s in self.inconsistent_shares()],
            **self.extra,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)

    def to_text(self) -> str:
        r = self.result
        marker = '' if r.is_integer else '  [non-integer]'
        lines = [
            f"k = {self.k}, n = {self.declared_n}",
            f"Total shares provided = {self.n_provided}",
            f"Total combinations checked = {r.total_combinations}",
        ]
        if r.skipped_combinations:
            lines.append(
                f"Combinations skipped (duplicate x) = {r.skipped_combinations}")
        lines.append(f"Most frequent secret (f(0)) = {r.winning_secret}{marker}")

        lines.append('')
        lines.append('Consistent shares (supporting the chosen secret):')
        lines.extend(_share_line(s) for _, s in self.consistent_shares())

        lines.append('')
        lines.append('Inconsistent shares (likely wrong):')
        bad = self.inconsistent_shares()
        lines.extend(_share_line(s) for _, s in bad)
        if not bad:
            lines.append('- none')
        return '\n'.join(lines)


def _share_entry(share) -> dict:
    entry = {'x': share.x, 'y': str(share.y)}
    if share.base is not None:
        entry['base'] = share.base
    if share.raw is not None:
        entry['value'] = share.raw
    return entry


def _share_line(share) -> str:
    if share.base is None:
        return f"- participant {share.x}: value={share.y}"
    raw: Optional[str] = share.raw if share.raw is not None else str(share.y)
    return f'- participant {share.x}: base={share.base}, value="{raw}"'
