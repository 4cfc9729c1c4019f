from ._monomial import Monomial, SymbolicConstant, Term, monomial
from ._monomial_evaluate import monomial_definite_value, monomial_evaluate
from ._monomial_multiply import monomial_multiply
from ._monomial_negate import monomial_negate
from ._monomial_render import monomial_render
from ._monomial_shift_down import monomial_shift_down
from ._monomial_shift_up import monomial_shift_up

__all__ = [
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
]
