from polyring._degree_error import DegreeError


class DivisionByZeroPolynomialError(DegreeError):
    """Divisor is the zero polynomial.

    Raised by polynomial division, and by the GCD normalization, when the
    divisor has no nonzero term after zero terms are dropped.
    """

    pass
