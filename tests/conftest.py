"""Shared fixtures for sharevote tests."""

import random
import pytest
from sharevote.share import Share


def poly_eval_low(coeffs: list, x) -> int:
    """Horner evaluation, coeffs lowest degree first."""
    result = 0
    for c in reversed(coeffs):
        result = result * x + c
    return result


def make_shares(coeffs: list, xs) -> list:
    """Shares (x, f(x)) of the polynomial with low-first coeffs."""
    return [Share(x, poly_eval_low(coeffs, x)) for x in xs]


@pytest.fixture
def rng():
    """Deterministic RNG for reproducible tests."""
    return random.Random(42)


@pytest.fixture
def quadratic_shares():
    """f(x) = 1234 + 166x + 94x^2 sampled at x = 1..5 (secret 1234, k=3)."""
    return make_shares([1234, 166, 94], range(1, 6))


@pytest.fixture
def random_poly(rng):
    """Random degree-3 polynomial with 128-bit coefficients."""
    return [rng.getrandbits(128) for _ in range(4)]
