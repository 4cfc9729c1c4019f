from ._polynomial import Polynomial


def polynomial_negate(p: Polynomial) -> Polynomial:
    """Negate polynomial.

    Flips the sign of every coefficient. SymbolicConstant terms are
    unchanged.

    Parameters
    ----------
    p : Polynomial
        Polynomial to negate.

    Returns
    -------
    Polynomial
        Negated polynomial -p.
    """
    return Polynomial(
        coefficients=(-p.coefficients).masked_fill(p.indeterminate, 0.0),
        exponents=p.exponents.clone(),
        indeterminate=p.indeterminate.clone(),
    )
