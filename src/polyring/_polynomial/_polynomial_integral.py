from typing import Union

from torch import Tensor

from polyring._monomial import SymbolicConstant, monomial_shift_up

from ._polynomial import Polynomial, polynomial
from ._polynomial_drop_zero_terms import polynomial_drop_zero_terms
from ._polynomial_evaluate import polynomial_definite_value
from ._polynomial_terms import polynomial_terms


def polynomial_integral(
    p: Polynomial,
    start: Union[Tensor, float],
    end: Union[Tensor, float],
) -> Tensor:
    """Compute definite integral.

    Zero terms are removed before integrating so no constant of
    integration is introduced; it would cancel between the bounds anyway.

    Parameters
    ----------
    p : Polynomial
        Polynomial to integrate.
    start, end : Tensor or float
        Integration bounds.

    Returns
    -------
    Tensor
        Definite integral from start to end of p(x) dx.

    Examples
    --------
    >>> p = polynomial([(1.0, 2), (1.0, 0)])  # x^2 + 1
    >>> polynomial_integral(p, 0.0, 1.0)
    tensor(1.3333, dtype=torch.float64)
    """
    terms = [
        monomial_shift_up(t)
        for t in polynomial_terms(polynomial_drop_zero_terms(p))
        if isinstance(t, SymbolicConstant) or t.coefficient != 0
    ]

    # The zero polynomial integrates to 0 everywhere
    antiderivative = polynomial(
        terms, dtype=p.coefficients.dtype, device=p.coefficients.device
    )

    return polynomial_definite_value(antiderivative, start, end)
