from dataclasses import dataclass
from numbers import Real
from typing import Union

from torch import Tensor

from polyring._polynomial_error import PolynomialError


class _TermOperators:
    """Operator overloading shared by the two term variants.

    Operators dispatch to the monomial_* functions:
        -t       # monomial_negate(t)
        t * u    # monomial_multiply(t, u)
        t << n   # monomial_shift_up(t, n)
        t >> n   # monomial_shift_down(t, n)
        t(x)     # monomial_evaluate(t, x)
        str(t)   # monomial_render(t)
    """

    def __neg__(self) -> "Term":
        from ._monomial_negate import monomial_negate

        return monomial_negate(self)

    def __mul__(self, other):
        from ._monomial_multiply import monomial_multiply

        if isinstance(other, (Monomial, SymbolicConstant, Real)):
            return monomial_multiply(self, other)
        return NotImplemented

    def __rmul__(self, other):
        from ._monomial_multiply import monomial_multiply

        if isinstance(other, Real):
            return monomial_multiply(self, other)
        return NotImplemented

    def __lshift__(self, n: int) -> "Term":
        from ._monomial_shift_up import monomial_shift_up

        return monomial_shift_up(self, n)

    def __rshift__(self, n: int) -> "Term":
        from ._monomial_shift_down import monomial_shift_down

        return monomial_shift_down(self, n)

    def __call__(self, x: Union[Tensor, float]) -> Union[Tensor, float]:
        from ._monomial_evaluate import monomial_evaluate

        return monomial_evaluate(self, x)

    def __str__(self) -> str:
        from ._monomial_render import monomial_render

        return monomial_render(self)


def _check_exponent(exponent) -> int:
    if isinstance(exponent, bool) or int(exponent) != exponent:
        raise PolynomialError(f"Exponent must be an integer, got {exponent!r}")
    if exponent < 0:
        raise PolynomialError(
            f"Exponent must be non-negative, got {exponent}"
        )
    return int(exponent)


@dataclass(frozen=True)
class Monomial(_TermOperators):
    """Single term coefficient * x^exponent.

    Attributes
    ----------
    coefficient : float
        Real coefficient.
    exponent : int
        Non-negative power of x.

    Examples
    --------
    >>> Monomial(3.0, 2) * Monomial(2.0, 1)
    Monomial(coefficient=6.0, exponent=3)
    >>> str(Monomial(-1.0, 1))
    '-x'
    """

    coefficient: float
    exponent: int = 0

    def __post_init__(self):
        object.__setattr__(self, "coefficient", float(self.coefficient))
        object.__setattr__(self, "exponent", _check_exponent(self.exponent))


@dataclass(frozen=True)
class SymbolicConstant(_TermOperators):
    """Unresolved constant of integration, C * x^exponent.

    Produced by indefinite integration. The coefficient is unknown, so any
    product involving a SymbolicConstant is again a SymbolicConstant and its
    numeric value is NaN. Rendered as ``C``.
    """

    exponent: int = 0

    def __post_init__(self):
        object.__setattr__(self, "exponent", _check_exponent(self.exponent))


Term = Union[Monomial, SymbolicConstant]


def monomial(coefficient: float, exponent: int = 0) -> Monomial:
    """Create the term coefficient * x^exponent.

    Raises
    ------
    PolynomialError
        If exponent is negative or not an integer.
    """
    return Monomial(coefficient, exponent)
