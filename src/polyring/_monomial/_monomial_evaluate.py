import math
from typing import Union

import torch
from torch import Tensor

from ._monomial import SymbolicConstant, Term


def monomial_evaluate(
    t: Term, x: Union[Tensor, float]
) -> Union[Tensor, float]:
    """Evaluate coefficient * x^exponent.

    ``x^0`` is 1 for every x, including 0. A SymbolicConstant evaluates to
    NaN. The result is a tensor if x is a tensor, a float otherwise.
    """
    if isinstance(t, SymbolicConstant):
        if isinstance(x, Tensor):
            return torch.full_like(x, math.nan)
        return math.nan
    return t.coefficient * x**t.exponent


def monomial_definite_value(
    t: Term, start: Union[Tensor, float], end: Union[Tensor, float]
) -> Union[Tensor, float]:
    """Return t(end) - t(start)."""
    return monomial_evaluate(t, end) - monomial_evaluate(t, start)
