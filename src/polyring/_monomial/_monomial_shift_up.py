from polyring._polynomial_error import PolynomialError

from ._monomial import Monomial, SymbolicConstant, Term


def monomial_shift_up(t: Term, n: int = 1) -> Term:
    """Antiderivative step (power rule), applied n times.

    Each application increments the exponent and divides the coefficient
    by the new exponent.

    Parameters
    ----------
    t : Monomial or SymbolicConstant
        Term to integrate.
    n : int
        Number of applications (default 1).

    Returns
    -------
    Monomial or SymbolicConstant
        Shifted term. The zero constant ``0 * x^0`` becomes
        ``SymbolicConstant(n)``: integrating nothing leaves only an unknown
        constant, which subsequent applications raise like any other term.

    Examples
    --------
    >>> monomial_shift_up(Monomial(3.0, 2))
    Monomial(coefficient=1.0, exponent=3)
    >>> monomial_shift_up(Monomial(0.0, 0))
    SymbolicConstant(exponent=1)
    """
    if n < 0:
        raise PolynomialError(f"Shift count must be non-negative, got {n}")

    if isinstance(t, SymbolicConstant):
        return SymbolicConstant(t.exponent + n)

    if n > 0 and t.coefficient == 0 and t.exponent == 0:
        return SymbolicConstant(n)

    coefficient = t.coefficient
    exponent = t.exponent
    for _ in range(n):
        exponent += 1
        coefficient /= exponent

    return Monomial(coefficient, exponent)
