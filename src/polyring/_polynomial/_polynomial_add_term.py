from typing import Optional, Union

from polyring._monomial import Monomial, SymbolicConstant, Term
from polyring._polynomial_error import PolynomialError

from ._polynomial import Polynomial, polynomial
from ._polynomial_add import polynomial_add


def polynomial_add_term(
    p: Polynomial,
    term: Union[Term, float],
    exponent: Optional[int] = None,
) -> Polynomial:
    """Append a single term and renormalize.

    Called either with a term, ``polynomial_add_term(p, Monomial(2.0, 3))``,
    or with a coefficient and exponent, ``polynomial_add_term(p, 2.0, 3)``.

    Parameters
    ----------
    p : Polynomial
        Input polynomial.
    term : Monomial, SymbolicConstant or float
        Term to add, or its coefficient when exponent is given.
    exponent : int, optional
        Exponent of the term when term is a coefficient.

    Returns
    -------
    Polynomial
        p with the term merged in.
    """
    if exponent is not None:
        term = Monomial(term, exponent)
    elif not isinstance(term, (Monomial, SymbolicConstant)):
        raise PolynomialError(
            "polynomial_add_term needs a term or a coefficient and exponent"
        )

    return polynomial_add(
        p,
        polynomial(
            term,
            dtype=p.coefficients.dtype,
            device=p.coefficients.device,
        ),
    )
