"""Exact rational arithmetic over Python's unbounded int.

Every value is kept in lowest terms with a positive denominator, so two
mathematically equal fractions are equal and hash equal no matter how
they were computed. The consensus vote groups candidates by this value.
"""

from math import gcd

from sharevote.errors import DivisionByZero, NotAnInteger


class Rational:
    """Immutable fraction num/den with gcd(|num|, den) == 1 and den > 0."""

    __slots__ = ('num', 'den')

    def __init__(self, num: int, den: int = 1):
        if den == 0:
            raise DivisionByZero(f"Denominator is zero (numerator {num})")
        if den < 0:
            num, den = -num, -den
        # gcd(0, d) == d, so 0/d normalizes to 0/1
        g = gcd(num, den)
        if g != 1:
            num //= g
            den //= g
        object.__setattr__(self, 'num', num)
        object.__setattr__(self, 'den', den)

    def __setattr__(self, name, value):
        raise AttributeError("Rational is immutable")

    @classmethod
    def from_int(cls, value: int) -> 'Rational':
        return cls(value, 1)

    def add(self, other: 'Rational') -> 'Rational':
        """self + other."""
        return Rational(self.num * other.den + other.num * self.den,
                        self.den * other.den)

    def sub(self, other: 'Rational') -> 'Rational':
        """self - other."""
        return Rational(self.num * other.den - other.num * self.den,
                        self.den * other.den)

    def mul(self, other: 'Rational') -> 'Rational':
        """self * other."""
        return Rational(self.num * other.num, self.den * other.den)

    def div(self, other: 'Rational') -> 'Rational':
        """self / other. Raises DivisionByZero if other is zero."""
        if other.num == 0:
            raise DivisionByZero(f"Division of {self} by zero")
        return Rational(self.num * other.den, self.den * other.num)

    def neg(self) -> 'Rational':
        return Rational(-self.num, self.den)

    def is_integer(self) -> bool:
        return self.den == 1

    def to_integer_exact(self) -> int:
        """Return the value as int, or raise NotAnInteger."""
        if self.den != 1:
            raise NotAnInteger(f"Rational is not an integer: {self}")
        return self.num

    # Operator forms, accepting plain ints on either side.

    def __add__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else self.add(other)

    __radd__ = __add__

    def __sub__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else self.sub(other)

    def __rsub__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else other.sub(self)

    def __mul__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else self.mul(other)

    __rmul__ = __mul__

    def __truediv__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else self.div(other)

    def __rtruediv__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else other.div(self)

    def __neg__(self):
        return self.neg()

    def __int__(self):
        return self.to_integer_exact()

    def __eq__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.num == other.num and self.den == other.den

    def __lt__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.num * other.den < other.num * self.den

    def __le__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.num * other.den <= other.num * self.den

    def __gt__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.num * other.den > other.num * self.den

    def __ge__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.num * other.den >= other.num * self.den

    def __hash__(self):
        # Integral values hash like the int they equal
        if self.den == 1:
            return hash(self.num)
        return hash((self.num, self.den))

    def __reduce__(self):
        return (Rational, (self.num, self.den))

    def __str__(self):
        return str(self.num) if self.den == 1 else f"{self.num}/{self.den}"

    def __repr__(self):
        return f"Rational({self.num}, {self.den})"


ZERO = Rational(0)
ONE = Rational(1)


def _coerce(value):
    """Lift an int to Rational; None for anything else."""
    if isinstance(value, Rational):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return Rational(value, 1)
    return None
