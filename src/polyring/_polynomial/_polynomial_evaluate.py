import math
import warnings
from typing import Union

import torch
from torch import Tensor

from ._polynomial import Polynomial


def polynomial_evaluate(p: Polynomial, x: Union[Tensor, float]) -> Tensor:
    """Evaluate polynomial at points.

    Sums ``coefficient * x^exponent`` over the terms. ``x^0`` is 1 for
    every x, including 0.

    Parameters
    ----------
    p : Polynomial
        Polynomial to evaluate.
    x : Tensor or float
        Evaluation points, any shape.

    Returns
    -------
    Tensor
        Values p(x), same shape as x. NaN where p carries an unresolved
        constant of integration.

    Warns
    -----
    UserWarning
        If p has SymbolicConstant terms.

    Examples
    --------
    >>> p = polynomial([(3.0, 2), (2.0, 1), (1.0, 0)])  # 3x^2 + 2x + 1
    >>> polynomial_evaluate(p, torch.tensor([0.0, 1.0, 2.0]))
    tensor([ 1.,  6., 17.], dtype=torch.float64)
    """
    coefficients = p.coefficients

    if isinstance(x, Tensor):
        dtype = torch.promote_types(coefficients.dtype, x.dtype)
        x = x.to(dtype=dtype, device=coefficients.device)
    else:
        x = torch.tensor(
            x, dtype=coefficients.dtype, device=coefficients.device
        )

    if p.indeterminate.any():
        warnings.warn(
            "Evaluating a polynomial with an unresolved constant of "
            "integration; the result is NaN. Use polynomial_resolve_constant "
            "to give the constant a value.",
            stacklevel=2,
        )

    # Terms along dim 0, evaluation points along the remaining dims
    shape = (-1,) + (1,) * x.dim()
    powers = x.unsqueeze(0) ** p.exponents.reshape(shape)
    values = coefficients.to(x.dtype).reshape(shape) * powers
    values = values.masked_fill(p.indeterminate.reshape(shape), math.nan)

    return values.sum(dim=0)


def polynomial_definite_value(
    p: Polynomial,
    start: Union[Tensor, float],
    end: Union[Tensor, float],
) -> Tensor:
    """Return p(end) - p(start).

    Parameters
    ----------
    p : Polynomial
        Polynomial to evaluate.
    start, end : Tensor or float
        Lower and upper points, broadcast against each other.

    Returns
    -------
    Tensor
        Difference of the values at the two points.
    """
    return polynomial_evaluate(p, end) - polynomial_evaluate(p, start)
