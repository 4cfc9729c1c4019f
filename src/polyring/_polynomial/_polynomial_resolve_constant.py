import torch

from ._polynomial import Polynomial


def polynomial_resolve_constant(
    p: Polynomial, value: float = 0.0
) -> Polynomial:
    """Give every unresolved constant of integration a concrete value.

    Each ``C x^k`` term becomes ``value * x^k``.

    Examples
    --------
    >>> p = polynomial_antiderivative(polynomial([(2.0, 1)]))  # x^2 + C
    >>> polynomial_resolve_constant(p, 5.0).render()
    'x^2+5'
    """
    return Polynomial(
        coefficients=p.coefficients.masked_fill(p.indeterminate, value),
        exponents=p.exponents.clone(),
        indeterminate=torch.zeros_like(p.indeterminate),
    )
