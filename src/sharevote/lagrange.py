"""Exact Lagrange interpolation over the rationals.

All arithmetic stays in Rational, so a reconstruction is bit-exact and
the same subset always yields the same value.
"""

from sharevote.errors import DuplicateAbscissa
from sharevote.rational import Rational, ZERO


def _check_distinct(xs: list, labels: list):
    """Raise DuplicateAbscissa on the first repeated x."""
    seen = {}
    for x, label in zip(xs, labels):
        if x in seen:
            raise DuplicateAbscissa(x, (seen[x], label))
        seen[x] = label


def lagrange_basis_at(xs: list, i: int, target: int) -> Rational:
    """Compute Lagrange basis coefficient L_i(target).

    Returns prod_{j!=i} (target - x_j) / (x_i - x_j).
    The xs must be distinct.
    """
    xi = xs[i]
    num = 1
    den = 1
    for j, xj in enumerate(xs):
        if j == i:
            continue
        num *= target - xj
        den *= xi - xj
    return Rational(num, den)


def lagrange_basis_at_zero(xs: list, i: int) -> Rational:
    """Compute L_i(0) = prod_{j!=i} (-x_j) / (x_i - x_j)."""
    return lagrange_basis_at(xs, i, 0)


def lagrange_interpolate(points: list, x: int) -> Rational:
    """Evaluate the interpolating polynomial through `points` at x.

    points = [(x_0, y_0), (x_1, y_1), ...] with integer coordinates.
    Raises DuplicateAbscissa if two points share an x; the indices in the
    error are positions in `points`.
    """
    xs = [p[0] for p in points]
    _check_distinct(xs, list(range(len(xs))))
    result = ZERO
    for i, (_, yi) in enumerate(points):
        result = result.add(lagrange_basis_at(xs, i, x).mul(Rational(yi)))
    return result


def interpolate_at_zero(shares: list, combination: tuple) -> Rational:
    """Secret candidate f(0) from the shares selected by `combination`.

    shares: the full share sequence (objects with .x and .y).
    combination: strictly increasing indices into `shares`.
    Raises DuplicateAbscissa naming the two colliding share indices.
    """
    selected = [shares[idx] for idx in combination]
    xs = [s.x for s in selected]
    _check_distinct(xs, list(combination))

    total = ZERO
    for i, share in enumerate(selected):
        total = total.add(lagrange_basis_at_zero(xs, i).mul(Rational(share.y)))
    return total
