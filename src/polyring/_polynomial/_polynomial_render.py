from polyring._monomial import SymbolicConstant, monomial_render

from ._polynomial import Polynomial
from ._polynomial_terms import polynomial_terms


def polynomial_render(p: Polynomial) -> str:
    """Render polynomial as a single line of text.

    Terms print in descending exponent order. Zero terms are skipped unless
    the polynomial has a single term. A ``+`` separates a term from the
    previous one when its coefficient is positive or unresolved.

    Examples
    --------
    >>> polynomial_render(polynomial([(3.0, 2), (-2.0, 1), (1.0, 0)]))
    '3x^2-2x+1'
    >>> polynomial_render(polynomial())
    '0'
    """
    terms = polynomial_terms(p)

    text = ""
    for t in terms:
        symbolic = isinstance(t, SymbolicConstant)
        if not symbolic and t.coefficient == 0 and len(terms) != 1:
            continue
        if text and (symbolic or t.coefficient > 0):
            text += "+"
        text += monomial_render(t)

    # every term cancelled
    return text or "0"


def polynomial_print(p: Polynomial, file=None) -> None:
    """Write the rendered polynomial and a newline to file (stdout)."""
    print(polynomial_render(p), file=file)
