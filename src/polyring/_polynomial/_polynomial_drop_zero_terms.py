from ._polynomial import Polynomial, _zero_polynomial
from ._polynomial_combine import polynomial_combine


def polynomial_drop_zero_terms(
    p: Polynomial, tol: float = 0.0
) -> Polynomial:
    """Combine like terms, then remove zero-coefficient terms.

    Parameters
    ----------
    p : Polynomial
        Input polynomial.
    tol : float
        Tolerance for considering a coefficient as zero
        (``|c| <= tol``). SymbolicConstant terms are never zero.

    Returns
    -------
    Polynomial
        Minimal form of p. If every term is zero, the zero polynomial
        ``0 * x^0``.
    """
    p = polynomial_combine(p)

    keep = p.indeterminate | (p.coefficients.abs() > tol)
    if not keep.any():
        return _zero_polynomial(
            dtype=p.coefficients.dtype, device=p.coefficients.device
        )

    return Polynomial(
        coefficients=p.coefficients[keep],
        exponents=p.exponents[keep],
        indeterminate=p.indeterminate[keep],
    )


def polynomial_is_zero(p: Polynomial, tol: float = 0.0) -> bool:
    """Return True if every term of p is zero within tol."""
    p = polynomial_drop_zero_terms(p, tol)
    return bool(
        p.exponents.numel() == 1
        and not p.indeterminate[0]
        and p.coefficients[0].abs() <= tol
    )
