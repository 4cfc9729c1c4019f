from polyring._division_by_zero_polynomial_error import (
    DivisionByZeroPolynomialError,
)

from ._polynomial import Polynomial, polynomial
from ._polynomial_drop_zero_terms import (
    polynomial_drop_zero_terms,
    polynomial_is_zero,
)
from ._polynomial_mod import polynomial_mod
from ._polynomial_scale import polynomial_scale


def polynomial_gcd(
    p: Polynomial, q: Polynomial, tol: float = 0.0
) -> Polynomial:
    """Greatest common divisor by the Euclidean algorithm.

    Repeatedly replaces (a, b) with (b, a mod b) until b is a constant. A
    nonzero final constant means p and q are coprime and the result is 1.
    Otherwise the result is the last nonzero remainder divided by the
    leading coefficient of q, so the scale follows the second operand.

    Parameters
    ----------
    p, q : Polynomial
        Operands. q must not be the zero polynomial.
    tol : float
        Coefficients with ``|c| <= tol`` count as zero in every iteration.
        Raise it above 0 to absorb floating-point residue in remainders.

    Returns
    -------
    Polynomial
        GCD of p and q.

    Raises
    ------
    DivisionByZeroPolynomialError
        If q is the zero polynomial.

    Examples
    --------
    >>> p = polynomial([(1.0, 2), (-1.0, 0)])  # x^2 - 1
    >>> q = polynomial([(1.0, 1), (-1.0, 0)])  # x - 1
    >>> polynomial_gcd(p, q).render()
    'x-1'
    """
    a = polynomial_drop_zero_terms(p, tol)
    b = polynomial_drop_zero_terms(q, tol)

    if polynomial_is_zero(b, tol):
        raise DivisionByZeroPolynomialError(
            "GCD is normalized by the leading coefficient of the second "
            "operand, which is the zero polynomial"
        )

    scale = float(b.coefficients[0])

    while int(b.exponents[0]) != 0:
        a, b = b, polynomial_mod(a, b)
        a = polynomial_drop_zero_terms(a, tol)
        b = polynomial_drop_zero_terms(b, tol)

    if not polynomial_is_zero(b, tol):
        return polynomial(
            (1.0, 0), dtype=p.coefficients.dtype, device=p.coefficients.device
        )

    return polynomial_drop_zero_terms(polynomial_scale(a, 1.0 / scale), tol)
