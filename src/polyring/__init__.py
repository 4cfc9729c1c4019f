"""polyring: sparse single-variable polynomial algebra on PyTorch tensors."""

from ._degree_error import DegreeError
from ._degree_underflow_error import DegreeUnderflowError
from ._division_by_zero_polynomial_error import DivisionByZeroPolynomialError
from ._monomial import (
    Monomial,
    SymbolicConstant,
    Term,
    monomial,
    monomial_definite_value,
    monomial_evaluate,
    monomial_multiply,
    monomial_negate,
    monomial_render,
    monomial_shift_down,
    monomial_shift_up,
)
from ._polynomial import (
    Polynomial,
    polynomial,
    polynomial_add,
    polynomial_add_term,
    polynomial_antiderivative,
    polynomial_combine,
    polynomial_definite_value,
    polynomial_degree,
    polynomial_densify,
    polynomial_derivative,
    polynomial_div,
    polynomial_divmod,
    polynomial_drop_zero_terms,
    polynomial_equal,
    polynomial_evaluate,
    polynomial_gcd,
    polynomial_integral,
    polynomial_is_zero,
    polynomial_lcm,
    polynomial_leading_term,
    polynomial_mod,
    polynomial_multiply,
    polynomial_negate,
    polynomial_print,
    polynomial_render,
    polynomial_resolve_constant,
    polynomial_scale,
    polynomial_subtract,
    polynomial_terms,
)
from ._polynomial_error import PolynomialError

__all__ = [
    # Errors
    "DegreeError",
    "DegreeUnderflowError",
    "DivisionByZeroPolynomialError",
    "PolynomialError",
    # Terms
    "Monomial",
    "SymbolicConstant",
    "Term",
    "monomial",
    "monomial_definite_value",
    "monomial_evaluate",
    "monomial_multiply",
    "monomial_negate",
    "monomial_render",
    "monomial_shift_down",
    "monomial_shift_up",
    # Polynomials
    "Polynomial",
    "polynomial",
    "polynomial_add",
    "polynomial_add_term",
    "polynomial_antiderivative",
    "polynomial_combine",
    "polynomial_definite_value",
    "polynomial_degree",
    "polynomial_densify",
    "polynomial_derivative",
    "polynomial_div",
    "polynomial_divmod",
    "polynomial_drop_zero_terms",
    "polynomial_equal",
    "polynomial_evaluate",
    "polynomial_gcd",
    "polynomial_integral",
    "polynomial_is_zero",
    "polynomial_lcm",
    "polynomial_leading_term",
    "polynomial_mod",
    "polynomial_multiply",
    "polynomial_negate",
    "polynomial_print",
    "polynomial_render",
    "polynomial_resolve_constant",
    "polynomial_scale",
    "polynomial_subtract",
    "polynomial_terms",
]

__version__ = "0.1.0"
