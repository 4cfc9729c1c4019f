from ._polynomial import Polynomial, polynomial
from ._polynomial_add import polynomial_add
from ._polynomial_add_term import polynomial_add_term
from ._polynomial_antiderivative import polynomial_antiderivative
from ._polynomial_combine import polynomial_combine
from ._polynomial_degree import polynomial_degree, polynomial_leading_term
from ._polynomial_densify import polynomial_densify
from ._polynomial_derivative import polynomial_derivative
from ._polynomial_div import polynomial_div
from ._polynomial_divmod import polynomial_divmod
from ._polynomial_drop_zero_terms import (
    polynomial_drop_zero_terms,
    polynomial_is_zero,
)
from ._polynomial_equal import polynomial_equal
from ._polynomial_evaluate import (
    polynomial_definite_value,
    polynomial_evaluate,
)
from ._polynomial_gcd import polynomial_gcd
from ._polynomial_integral import polynomial_integral
from ._polynomial_lcm import polynomial_lcm
from ._polynomial_mod import polynomial_mod
from ._polynomial_multiply import polynomial_multiply
from ._polynomial_negate import polynomial_negate
from ._polynomial_render import polynomial_print, polynomial_render
from ._polynomial_resolve_constant import polynomial_resolve_constant
from ._polynomial_scale import polynomial_scale
from ._polynomial_subtract import polynomial_subtract
from ._polynomial_terms import polynomial_terms

__all__ = [
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
