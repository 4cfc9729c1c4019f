from numbers import Real
from typing import Optional, Sequence, Union

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor

from polyring._monomial import Monomial, SymbolicConstant, Term
from polyring._polynomial_error import PolynomialError

TermLike = Union[Term, tuple, float]


@tensorclass
class Polynomial:
    """Sparse polynomial in x, stored as a normalized list of terms.

    Represents p(x) = sum_k coefficients[k] * x^exponents[k]

    Attributes
    ----------
    coefficients : Tensor
        Term coefficients, shape (N,). Floating dtype.
    exponents : Tensor
        Term exponents, shape (N,). ``int64``, non-negative, strictly
        decreasing after normalization.
    indeterminate : Tensor
        Boolean mask, shape (N,). True marks a SymbolicConstant term (an
        unresolved constant of integration); its coefficient slot holds 0
        and is ignored.

    Notes
    -----
    Every polynomial holds at least one term. The zero polynomial is the
    single term ``0 * x^0``. Normalization merges equal exponents but keeps
    zero-coefficient terms; use polynomial_drop_zero_terms for the minimal
    form.

    Examples
    --------
    3x^2 + 2x + 1:
        polynomial([(3.0, 2), (2.0, 1), (1.0, 0)])

    Operator overloading:
        p + q    # polynomial_add(p, q)
        p - q    # polynomial_subtract(p, q)
        p * q    # polynomial_multiply(p, q)
        p * t    # polynomial_scale(p, t), t a term or scalar
        -p       # polynomial_negate(p)
        p // q   # polynomial_div(p, q)
        p % q    # polynomial_mod(p, q)
        p << n   # polynomial_antiderivative(p, n)
        p >> n   # polynomial_derivative(p, n)
        p(x)     # polynomial_evaluate(p, x)
    """

    coefficients: Tensor
    exponents: Tensor
    indeterminate: Tensor

    def __add__(self, other):
        from ._polynomial_add import polynomial_add
        from ._polynomial_add_term import polynomial_add_term

        if isinstance(other, Polynomial):
            return polynomial_add(self, other)
        if isinstance(other, (Monomial, SymbolicConstant, Real)):
            return polynomial_add_term(self, _as_term(other))
        return NotImplemented

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        from ._polynomial_add_term import polynomial_add_term
        from ._polynomial_subtract import polynomial_subtract

        if isinstance(other, Polynomial):
            return polynomial_subtract(self, other)
        if isinstance(other, (Monomial, SymbolicConstant, Real)):
            return polynomial_add_term(self, -_as_term(other))
        return NotImplemented

    def __rsub__(self, other):
        from ._polynomial_add_term import polynomial_add_term
        from ._polynomial_negate import polynomial_negate

        if isinstance(other, (Monomial, SymbolicConstant, Real)):
            return polynomial_add_term(
                polynomial_negate(self), _as_term(other)
            )
        return NotImplemented

    def __mul__(self, other):
        from ._polynomial_multiply import polynomial_multiply
        from ._polynomial_scale import polynomial_scale

        if isinstance(other, Polynomial):
            return polynomial_multiply(self, other)
        if isinstance(other, (Monomial, SymbolicConstant, Real)):
            return polynomial_scale(self, other)
        return NotImplemented

    def __rmul__(self, other):
        from ._polynomial_scale import polynomial_scale

        if isinstance(other, (Monomial, SymbolicConstant, Real)):
            return polynomial_scale(self, other)
        return NotImplemented

    def __neg__(self) -> "Polynomial":
        from ._polynomial_negate import polynomial_negate

        return polynomial_negate(self)

    def __floordiv__(self, other: "Polynomial") -> "Polynomial":
        from ._polynomial_div import polynomial_div

        return polynomial_div(self, other)

    def __mod__(self, other: "Polynomial") -> "Polynomial":
        from ._polynomial_mod import polynomial_mod

        return polynomial_mod(self, other)

    def __lshift__(self, n: int) -> "Polynomial":
        from ._polynomial_antiderivative import polynomial_antiderivative

        return polynomial_antiderivative(self, n)

    def __rshift__(self, n: int) -> "Polynomial":
        from ._polynomial_derivative import polynomial_derivative

        return polynomial_derivative(self, n)

    def __call__(self, x: Union[Tensor, float]) -> Tensor:
        from ._polynomial_evaluate import polynomial_evaluate

        return polynomial_evaluate(self, x)

    def __str__(self) -> str:
        return self.render()

    def gcd(self, other: "Polynomial", tol: float = 0.0) -> "Polynomial":
        from ._polynomial_gcd import polynomial_gcd

        return polynomial_gcd(self, other, tol=tol)

    def lcm(self, other: "Polynomial", tol: float = 0.0) -> "Polynomial":
        from ._polynomial_lcm import polynomial_lcm

        return polynomial_lcm(self, other, tol=tol)

    def integral(self, start=None, end=None):
        """Indefinite integral without bounds, definite value with both."""
        from ._polynomial_antiderivative import polynomial_antiderivative
        from ._polynomial_integral import polynomial_integral

        if start is None and end is None:
            return polynomial_antiderivative(self)
        if start is None or end is None:
            raise PolynomialError(
                "Definite integral requires both start and end"
            )
        return polynomial_integral(self, start, end)

    def render(self) -> str:
        from ._polynomial_render import polynomial_render

        return polynomial_render(self)

    def print(self, file=None) -> None:
        from ._polynomial_render import polynomial_print

        polynomial_print(self, file=file)


def _as_term(item: TermLike) -> Term:
    if isinstance(item, (Monomial, SymbolicConstant)):
        return item
    if isinstance(item, Real):
        return Monomial(item, 0)
    if isinstance(item, (tuple, list)) and len(item) == 2:
        return Monomial(item[0], item[1])
    raise PolynomialError(
        f"Cannot interpret {item!r} as a term; expected a Monomial, a "
        f"SymbolicConstant, a number or a (coefficient, exponent) pair"
    )


def _is_pair(terms) -> bool:
    return (
        isinstance(terms, tuple)
        and len(terms) == 2
        and all(isinstance(v, Real) for v in terms)
    )


def _zero_polynomial(
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Polynomial:
    return Polynomial(
        coefficients=torch.zeros(1, dtype=dtype, device=device),
        exponents=torch.zeros(1, dtype=torch.int64, device=device),
        indeterminate=torch.zeros(1, dtype=torch.bool, device=device),
    )


def polynomial(
    terms: Union[None, TermLike, Sequence[TermLike]] = None,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Polynomial:
    """Create polynomial from terms.

    Parameters
    ----------
    terms : term, (coefficient, exponent) pair, or sequence of these
        Terms of the polynomial. A term is a Monomial, a SymbolicConstant,
        a plain number (constant term) or a ``(coefficient, exponent)``
        pair. ``None`` or an empty sequence gives the zero polynomial.
    dtype : torch.dtype, optional
        Coefficient dtype. Default ``torch.float64``.
    device : torch.device, optional
        Device for the term tensors.

    Returns
    -------
    Polynomial
        Polynomial with like terms merged and terms sorted by descending
        exponent.

    Raises
    ------
    PolynomialError
        If a term cannot be interpreted or has a negative exponent.

    Examples
    --------
    >>> p = polynomial([(1.0, 0), (2.0, 1), (3.0, 2)])  # 3x^2 + 2x + 1
    >>> p.exponents
    tensor([2, 1, 0])
    >>> polynomial().coefficients  # zero polynomial
    tensor([0.], dtype=torch.float64)
    """
    from ._polynomial_combine import polynomial_combine

    if dtype is None:
        dtype = torch.float64

    if terms is None:
        terms = []
    elif isinstance(terms, (Monomial, SymbolicConstant, Real)) or _is_pair(
        terms
    ):
        terms = [terms]

    terms = [_as_term(item) for item in terms]
    if not terms:
        return _zero_polynomial(dtype=dtype, device=device)

    indeterminate = [isinstance(t, SymbolicConstant) for t in terms]
    coefficients = [
        0.0 if symbolic else t.coefficient
        for t, symbolic in zip(terms, indeterminate)
    ]

    return polynomial_combine(
        Polynomial(
            coefficients=torch.tensor(
                coefficients, dtype=dtype, device=device
            ),
            exponents=torch.tensor(
                [t.exponent for t in terms], dtype=torch.int64, device=device
            ),
            indeterminate=torch.tensor(
                indeterminate, dtype=torch.bool, device=device
            ),
        )
    )
