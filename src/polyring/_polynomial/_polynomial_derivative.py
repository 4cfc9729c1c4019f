from polyring._monomial import monomial_shift_down

from ._polynomial import Polynomial, polynomial
from ._polynomial_terms import polynomial_terms


def polynomial_derivative(p: Polynomial, order: int = 1) -> Polynomial:
    """Compute derivative of polynomial.

    Parameters
    ----------
    p : Polynomial
        Input polynomial.
    order : int
        Derivative order (default 1).

    Returns
    -------
    Polynomial
        Derivative d^n p / dx^n. Constant terms become ``0 * x^0`` and are
        kept, so the zero term still appears in the result.

    Examples
    --------
    >>> p = polynomial([(3.0, 2), (2.0, 1), (1.0, 0)])  # 3x^2 + 2x + 1
    >>> polynomial_derivative(p).coefficients  # 6x + 2
    tensor([6., 2.], dtype=torch.float64)
    """
    return polynomial(
        [monomial_shift_down(t, order) for t in polynomial_terms(p)],
        dtype=p.coefficients.dtype,
        device=p.coefficients.device,
    )
