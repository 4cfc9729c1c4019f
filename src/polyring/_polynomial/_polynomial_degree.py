from polyring._monomial import Term

from ._polynomial import Polynomial
from ._polynomial_drop_zero_terms import polynomial_drop_zero_terms
from ._polynomial_terms import polynomial_terms


def polynomial_degree(p: Polynomial) -> int:
    """Return the exponent of the leading nonzero term.

    Zero terms are dropped first, so ``0x^3 + x`` has degree 1. The zero
    polynomial has degree 0.
    """
    return int(polynomial_drop_zero_terms(p).exponents[0])


def polynomial_leading_term(p: Polynomial) -> Term:
    """Return the highest-exponent nonzero term of p."""
    return polynomial_terms(polynomial_drop_zero_terms(p))[0]
