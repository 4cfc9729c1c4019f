from ._polynomial import Polynomial
from ._polynomial_add import polynomial_add
from ._polynomial_negate import polynomial_negate


def polynomial_subtract(p: Polynomial, q: Polynomial) -> Polynomial:
    """Subtract two polynomials.

    Parameters
    ----------
    p, q : Polynomial
        Polynomials to subtract.

    Returns
    -------
    Polynomial
        Difference p - q. Cancelled terms are kept with zero coefficient,
        so ``p - p`` equals the zero polynomial only after
        polynomial_drop_zero_terms.
    """
    return polynomial_add(p, polynomial_negate(q))
