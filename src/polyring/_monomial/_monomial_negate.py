from ._monomial import Monomial, SymbolicConstant, Term


def monomial_negate(t: Term) -> Term:
    """Flip the sign of the coefficient, keeping the exponent."""
    if isinstance(t, SymbolicConstant):
        return t
    return Monomial(-t.coefficient, t.exponent)
