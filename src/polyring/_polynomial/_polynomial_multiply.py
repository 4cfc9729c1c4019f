import torch

from ._polynomial import Polynomial
from ._polynomial_combine import polynomial_combine


def polynomial_multiply(p: Polynomial, q: Polynomial) -> Polynomial:
    """Multiply two polynomials.

    Forms the product of every pair of terms (coefficients multiply,
    exponents add), then merges like terms. Work is O(len(p) * len(q)).

    Parameters
    ----------
    p, q : Polynomial
        Polynomials to multiply.

    Returns
    -------
    Polynomial
        Product p * q.

    Examples
    --------
    >>> p = polynomial([(1.0, 1), (1.0, 0)])  # x + 1
    >>> q = polynomial([(1.0, 1), (-1.0, 0)])  # x - 1
    >>> polynomial_multiply(p, q).coefficients  # x^2 + 0x - 1
    tensor([ 1.,  0., -1.], dtype=torch.float64)
    """
    # Promote to common dtype
    dtype = torch.promote_types(p.coefficients.dtype, q.coefficients.dtype)

    # Pairwise products, shape (len(p), len(q)) flattened
    coefficients = torch.outer(
        p.coefficients.to(dtype), q.coefficients.to(dtype)
    ).reshape(-1)
    exponents = (p.exponents[:, None] + q.exponents[None, :]).reshape(-1)
    indeterminate = (
        p.indeterminate[:, None] | q.indeterminate[None, :]
    ).reshape(-1)

    return polynomial_combine(
        Polynomial(
            coefficients=coefficients.masked_fill(indeterminate, 0.0),
            exponents=exponents,
            indeterminate=indeterminate,
        )
    )
