from numbers import Real
from typing import Union

from polyring._monomial import Monomial, Term

from ._polynomial import Polynomial, polynomial
from ._polynomial_multiply import polynomial_multiply


def polynomial_scale(p: Polynomial, c: Union[Term, float]) -> Polynomial:
    """Multiply every term of p by a single term or scalar.

    Parameters
    ----------
    p : Polynomial
        Polynomial to scale.
    c : Monomial, SymbolicConstant or float
        Factor. A scalar scales coefficients only; a term also raises
        every exponent by its own.

    Returns
    -------
    Polynomial
        Scaled polynomial c * p.
    """
    if isinstance(c, Real):
        c = Monomial(c, 0)

    return polynomial_multiply(
        p,
        polynomial(
            c, dtype=p.coefficients.dtype, device=p.coefficients.device
        ),
    )
