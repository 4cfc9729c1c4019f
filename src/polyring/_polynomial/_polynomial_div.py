from ._polynomial import Polynomial
from ._polynomial_divmod import polynomial_divmod


def polynomial_div(
    p: Polynomial, q: Polynomial, *, strict: bool = False
) -> Polynomial:
    """Return quotient of polynomial division.

    Convenience wrapper around polynomial_divmod that returns only the
    quotient.

    Parameters
    ----------
    p : Polynomial
        Dividend polynomial.
    q : Polynomial
        Divisor polynomial.
    strict : bool
        Raise DegreeUnderflowError when deg(p) < deg(q).

    Returns
    -------
    Polynomial
        Quotient of p / q.

    Examples
    --------
    >>> p = polynomial([(1.0, 3), (-1.0, 0)])  # x^3 - 1
    >>> q = polynomial([(1.0, 1), (-1.0, 0)])  # x - 1
    >>> polynomial_div(p, q).coefficients  # x^2 + x + 1
    tensor([1., 1., 1.], dtype=torch.float64)
    """
    quotient, _ = polynomial_divmod(p, q, strict=strict)
    return quotient
