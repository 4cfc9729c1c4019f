from numbers import Real
from typing import Union

from ._monomial import Monomial, SymbolicConstant, Term


def monomial_multiply(t: Term, other: Union[Term, float]) -> Term:
    """Multiply a term by another term or by a scalar.

    Coefficients multiply and exponents add. A scalar leaves the exponent
    unchanged.

    Parameters
    ----------
    t : Monomial or SymbolicConstant
        Left factor.
    other : Monomial, SymbolicConstant or float
        Right factor.

    Returns
    -------
    Monomial or SymbolicConstant
        The product. If either factor is a SymbolicConstant the product is
        a SymbolicConstant, since an unknown constant times anything stays
        unknown.

    Examples
    --------
    >>> monomial_multiply(Monomial(3.0, 2), Monomial(-2.0, 1))
    Monomial(coefficient=-6.0, exponent=3)
    >>> monomial_multiply(Monomial(3.0, 2), 0.5)
    Monomial(coefficient=1.5, exponent=2)
    """
    if isinstance(other, Real):
        other = Monomial(other, 0)

    exponent = t.exponent + other.exponent
    if isinstance(t, SymbolicConstant) or isinstance(other, SymbolicConstant):
        return SymbolicConstant(exponent)
    return Monomial(t.coefficient * other.coefficient, exponent)
