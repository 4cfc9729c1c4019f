from ._polynomial import Polynomial
from ._polynomial_div import polynomial_div
from ._polynomial_gcd import polynomial_gcd
from ._polynomial_multiply import polynomial_multiply


def polynomial_lcm(
    p: Polynomial, q: Polynomial, tol: float = 0.0
) -> Polynomial:
    """Least common multiple, (p * q) / gcd(p, q).

    Parameters
    ----------
    p, q : Polynomial
        Operands. q must not be the zero polynomial.
    tol : float
        Zero tolerance forwarded to polynomial_gcd.

    Returns
    -------
    Polynomial
        LCM of p and q. Its scale follows from the GCD normalization, so
        ``gcd(p, q) * lcm(p, q)`` equals ``p * q``.

    Examples
    --------
    >>> p = polynomial([(1.0, 2), (-1.0, 0)])  # x^2 - 1
    >>> q = polynomial([(1.0, 1), (-1.0, 0)])  # x - 1
    >>> polynomial_lcm(p, q).render()
    'x^2-1'
    """
    return polynomial_div(
        polynomial_multiply(q, p), polynomial_gcd(p, q, tol=tol)
    )
