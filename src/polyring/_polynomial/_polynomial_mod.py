from ._polynomial import Polynomial
from ._polynomial_divmod import polynomial_divmod


def polynomial_mod(
    p: Polynomial, q: Polynomial, *, strict: bool = False
) -> Polynomial:
    """Return remainder of polynomial division.

    Convenience wrapper around polynomial_divmod that returns only the
    remainder.

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
        Remainder of p / q.

    Examples
    --------
    >>> p = polynomial([(1.0, 2), (1.0, 0)])  # x^2 + 1
    >>> q = polynomial([(1.0, 1), (-1.0, 0)])  # x - 1
    >>> polynomial_mod(p, q).coefficients  # remainder is 2
    tensor([2.], dtype=torch.float64)
    """
    _, remainder = polynomial_divmod(p, q, strict=strict)
    return remainder
