from polyring._polynomial_error import PolynomialError

from ._monomial import Monomial, SymbolicConstant, Term


def monomial_shift_down(t: Term, n: int = 1) -> Term:
    """Derivative step (power rule), applied n times.

    Each application multiplies the coefficient by the current exponent and
    then decrements the exponent. Once the exponent reaches 0 the term
    becomes the zero constant and further applications are no-ops.

    Parameters
    ----------
    t : Monomial or SymbolicConstant
        Term to differentiate.
    n : int
        Number of applications (default 1).

    Returns
    -------
    Monomial or SymbolicConstant
        Shifted term.

    Examples
    --------
    >>> monomial_shift_down(Monomial(1.0, 3))
    Monomial(coefficient=3.0, exponent=2)
    >>> monomial_shift_down(Monomial(5.0, 0))
    Monomial(coefficient=0.0, exponent=0)
    """
    if n < 0:
        raise PolynomialError(f"Shift count must be non-negative, got {n}")

    if isinstance(t, SymbolicConstant):
        if n > t.exponent:
            return Monomial(0.0, 0)
        return SymbolicConstant(t.exponent - n)

    coefficient = t.coefficient
    exponent = t.exponent
    for _ in range(n):
        if exponent == 0:
            coefficient = 0.0
            break
        coefficient *= exponent
        exponent -= 1

    return Monomial(coefficient, exponent)
