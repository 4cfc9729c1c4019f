import torch

from ._polynomial import Polynomial
from ._polynomial_drop_zero_terms import polynomial_drop_zero_terms


def polynomial_equal(
    p: Polynomial,
    q: Polynomial,
    tol: float = 1e-8,
) -> bool:
    """Check polynomial equality within tolerance.

    Missing exponents compare as zero, so ``x^2 + 0x`` equals ``x^2``.

    Parameters
    ----------
    p, q : Polynomial
        Polynomials to compare.
    tol : float
        Absolute tolerance for coefficient comparison.

    Returns
    -------
    bool
        True if every coefficient agrees within tol and both carry
        unresolved constants at the same exponents.
    """
    p = polynomial_drop_zero_terms(p)
    q = polynomial_drop_zero_terms(q)

    dtype = torch.promote_types(p.coefficients.dtype, q.coefficients.dtype)
    device = p.coefficients.device
    size = max(int(p.exponents[0]), int(q.exponents[0])) + 1

    def dense(r: Polynomial):
        coefficients = torch.zeros(size, dtype=dtype, device=device)
        coefficients[r.exponents] = r.coefficients.to(dtype)
        indeterminate = torch.zeros(size, dtype=torch.bool, device=device)
        indeterminate[r.exponents] = r.indeterminate
        return coefficients, indeterminate

    p_coeffs, p_indeterminate = dense(p)
    q_coeffs, q_indeterminate = dense(q)

    if not torch.equal(p_indeterminate, q_indeterminate):
        return False
    return bool(((p_coeffs - q_coeffs).abs() <= tol).all())
