import torch

from polyring._degree_underflow_error import DegreeUnderflowError
from polyring._division_by_zero_polynomial_error import (
    DivisionByZeroPolynomialError,
)

from ._polynomial import Polynomial, _zero_polynomial
from ._polynomial_densify import (
    _dense_coefficients,
    _from_dense_coefficients,
)
from ._polynomial_drop_zero_terms import (
    polynomial_drop_zero_terms,
    polynomial_is_zero,
)


def polynomial_divmod(
    p: Polynomial, q: Polynomial, *, strict: bool = False
) -> tuple[Polynomial, Polynomial]:
    """Divide polynomial p by q, returning quotient and remainder.

    Computes quotient and remainder such that p = q * quotient + remainder,
    where deg(remainder) < deg(q), by long division over dense coefficient
    arenas indexed by exponent.

    Parameters
    ----------
    p : Polynomial
        Dividend polynomial.
    q : Polynomial
        Divisor polynomial. Must not be the zero polynomial.
    strict : bool
        If True, raise when deg(p) < deg(q) instead of returning the zero
        quotient and p as remainder.

    Returns
    -------
    quotient : Polynomial
        Quotient of division.
    remainder : Polynomial
        Remainder of division, one term for each exponent below deg(q)
        (zero coefficients kept).

    Raises
    ------
    DivisionByZeroPolynomialError
        If the divisor is the zero polynomial.
    DegreeUnderflowError
        If strict is True and deg(p) < deg(q).
    PolynomialError
        If either operand carries an unresolved constant of integration.

    Examples
    --------
    >>> p = polynomial([(1.0, 2)])  # x^2
    >>> q = polynomial([(1.0, 1), (-1.0, 0)])  # x - 1
    >>> quotient, remainder = polynomial_divmod(p, q)
    >>> quotient.coefficients  # x + 1
    tensor([1., 1.], dtype=torch.float64)
    >>> remainder.coefficients  # 1
    tensor([1.], dtype=torch.float64)
    """
    dividend = polynomial_drop_zero_terms(p)
    divisor = polynomial_drop_zero_terms(q)

    if polynomial_is_zero(divisor):
        raise DivisionByZeroPolynomialError("Cannot divide by zero polynomial")

    divisor_degree = int(divisor.exponents[0])
    shift = int(dividend.exponents[0]) - divisor_degree

    # Promote to common dtype
    dtype = torch.promote_types(p.coefficients.dtype, q.coefficients.dtype)

    # No room to reduce: quotient is 0, remainder is the dividend
    if shift < 0:
        if strict:
            raise DegreeUnderflowError(
                f"Dividend degree {int(dividend.exponents[0])} is lower "
                f"than divisor degree {divisor_degree}"
            )
        return _zero_polynomial(dtype=dtype, device=p.coefficients.device), p

    remainder = _dense_coefficients(dividend).to(dtype)
    denominator = _dense_coefficients(divisor).to(dtype)
    leading = denominator[-1]

    quotient = torch.zeros(shift + 1, dtype=dtype, device=remainder.device)

    for step in range(shift + 1):
        exponent = shift - step
        top = exponent + divisor_degree

        factor = remainder[top] / leading
        quotient[exponent] = factor
        remainder[exponent : top + 1] -= factor * denominator

        # Eliminated exactly, whatever rounding left behind
        remainder[top] = 0.0

    remainder = remainder[: max(divisor_degree, 1)]

    return (
        _from_dense_coefficients(quotient),
        _from_dense_coefficients(remainder),
    )
