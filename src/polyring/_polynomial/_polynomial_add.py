import torch

from ._polynomial import Polynomial
from ._polynomial_combine import polynomial_combine


def polynomial_add(p: Polynomial, q: Polynomial) -> Polynomial:
    """Add two polynomials.

    Concatenates the terms of both operands and merges like terms.

    Parameters
    ----------
    p, q : Polynomial
        Polynomials to add.

    Returns
    -------
    Polynomial
        Sum p + q.
    """
    # Promote to common dtype
    dtype = torch.promote_types(p.coefficients.dtype, q.coefficients.dtype)

    return polynomial_combine(
        Polynomial(
            coefficients=torch.cat(
                [p.coefficients.to(dtype), q.coefficients.to(dtype)]
            ),
            exponents=torch.cat([p.exponents, q.exponents]),
            indeterminate=torch.cat([p.indeterminate, q.indeterminate]),
        )
    )
