from typing import Optional

from polyring._monomial import Monomial, SymbolicConstant, monomial_shift_up

from ._polynomial import Polynomial, polynomial
from ._polynomial_terms import polynomial_terms


def polynomial_antiderivative(
    p: Polynomial,
    order: int = 1,
    constant: Optional[float] = None,
) -> Polynomial:
    """Compute antiderivative (indefinite integral).

    Applies the power-rule shift ``order`` times to every term, then adds a
    constant of integration.

    Parameters
    ----------
    p : Polynomial
        Input polynomial.
    order : int
        Number of integrations (default 1).
    constant : float, optional
        Integration constant. If None (default), the constant stays
        unresolved and is added as ``SymbolicConstant(0)``, rendered ``C``.

    Returns
    -------
    Polynomial
        Antiderivative. A zero constant term of p becomes an unresolved
        ``C x`` term.

    Examples
    --------
    >>> p = polynomial([(2.0, 1)])  # 2x
    >>> polynomial_antiderivative(p).render()
    'x^2+C'
    >>> polynomial_antiderivative(p, constant=3.0).render()
    'x^2+3'
    """
    terms = [monomial_shift_up(t, order) for t in polynomial_terms(p)]

    if constant is None:
        terms.append(SymbolicConstant(0))
    else:
        terms.append(Monomial(constant, 0))

    return polynomial(
        terms, dtype=p.coefficients.dtype, device=p.coefficients.device
    )
