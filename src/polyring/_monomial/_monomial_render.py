from ._monomial import SymbolicConstant, Term


def _format_number(value: float) -> str:
    # adding 0.0 turns -0.0 into 0.0
    return f"{value + 0.0:g}"


def monomial_render(t: Term) -> str:
    """Render a term as text.

    Rules
    -----
    - a SymbolicConstant renders its coefficient as ``C``
    - negative coefficients render as ``-`` followed by the magnitude
    - a coefficient of magnitude 1 is omitted unless the exponent is 0
    - exponent 1 renders as ``x``
    - exponent above 1 renders as ``x^n`` when the coefficient is nonzero

    Examples
    --------
    >>> monomial_render(Monomial(3.0, 2))
    '3x^2'
    >>> monomial_render(Monomial(-1.0, 1))
    '-x'
    >>> monomial_render(Monomial(-2.5, 0))
    '-2.5'
    >>> monomial_render(SymbolicConstant(0))
    'C'
    """
    exponent = t.exponent

    if isinstance(t, SymbolicConstant):
        text = "C"
        nonzero = True
    else:
        coefficient = t.coefficient
        nonzero = coefficient != 0
        if coefficient < 0:
            text = "-"
            coefficient = -coefficient
        else:
            text = ""
        if coefficient != 1 or exponent == 0:
            text += _format_number(coefficient)

    if exponent == 1:
        text += "x"
    elif exponent > 1 and nonzero:
        text += f"x^{exponent}"

    return text
