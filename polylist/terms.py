"""Terms (monomials) and the integer overflow policy.

A Term is an immutable (coefficient, exponent) pair.  Coefficients are any
integer, zero included; exponents are non-negative integers.

Arithmetic on terms goes through `fit_coefficient` and `fit_exponent`, which
apply the `overflow` option:
 - widen:    Python integers, never overflows (default)
 - wrap:     two's complement at `int-width` bits, like a C int
 - saturate: clamp to the signed `int-width` range

Exponents are never wrapped or clamped.  Under a bounded policy an exponent
outside the signed range raises OverflowError.
"""

from collections import namedtuple

from polylist.opts import Option

WIDEN    = "widen"
WRAP     = "wrap"
SATURATE = "saturate"

overflow = Option("overflow", str, WIDEN, choices=(WIDEN, WRAP, SATURATE),
    description="What to do when a coefficient leaves the int-width range")
int_width = Option("int-width", int, 32, metavar="BITS", minimum=1,
    description="Bit width used by the wrap and saturate overflow policies")

def _check_int(value, what):
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError("{} must be an integer, not {}".format(what, type(value).__name__))

def int_range():
    """The (min, max) signed range for the current `int-width`."""
    half = 1 << (int_width.value - 1)
    return (-half, half - 1)

def fit_coefficient(n):
    mode = overflow.value
    if mode == WIDEN:
        return n
    lo, hi = int_range()
    if mode == WRAP:
        span = hi - lo + 1
        return (n - lo) % span + lo
    return max(lo, min(hi, n))

def fit_exponent(n):
    if overflow.value != WIDEN and n > int_range()[1]:
        raise OverflowError("exponent {} does not fit in {} bits".format(n, int_width.value))
    return n

class Term(namedtuple("Term", ["coefficient", "exponent"])):
    __slots__ = ()

    def __new__(cls, coefficient, exponent):
        _check_int(coefficient, "coefficient")
        _check_int(exponent, "exponent")
        if exponent < 0:
            raise ValueError("exponent must be non-negative, not {}".format(exponent))
        return super().__new__(cls, coefficient, exponent)

    def negated(self):
        return Term(fit_coefficient(-self.coefficient), self.exponent)

    def times(self, other):
        return Term(
            fit_coefficient(self.coefficient * other.coefficient),
            fit_exponent(self.exponent + other.exponent))

    def absorb(self, other):
        """The term with this exponent and both coefficients summed."""
        assert self.exponent == other.exponent
        return Term(fit_coefficient(self.coefficient + other.coefficient), self.exponent)

    def at(self, x):
        return self.coefficient * x ** self.exponent

def as_term(value):
    """Accept a Term or a (coefficient, exponent) pair."""
    if isinstance(value, Term):
        return value
    coefficient, exponent = value
    return Term(coefficient, exponent)
