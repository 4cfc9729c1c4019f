from typing import List

from polyring._monomial import Monomial, SymbolicConstant, Term

from ._polynomial import Polynomial


def polynomial_terms(p: Polynomial) -> List[Term]:
    """Return the terms of p in stored (descending exponent) order.

    Examples
    --------
    >>> polynomial_terms(polynomial([(2.0, 1), SymbolicConstant(0)]))
    [Monomial(coefficient=2.0, exponent=1), SymbolicConstant(exponent=0)]
    """
    terms = []
    for coefficient, exponent, symbolic in zip(
        p.coefficients.tolist(),
        p.exponents.tolist(),
        p.indeterminate.tolist(),
    ):
        if symbolic:
            terms.append(SymbolicConstant(exponent))
        else:
            terms.append(Monomial(coefficient, exponent))
    return terms
