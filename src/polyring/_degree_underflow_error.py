from polyring._degree_error import DegreeError


class DegreeUnderflowError(DegreeError):
    """Dividend degree is lower than divisor degree.

    Only raised when division is requested with ``strict=True``. By default
    such a division returns the zero quotient and the dividend as remainder.
    """

    pass
