import torch

from ._polynomial import Polynomial, _zero_polynomial


def polynomial_combine(p: Polynomial) -> Polynomial:
    """Sort terms by descending exponent and merge like terms.

    Terms sharing an exponent are summed into one. A SymbolicConstant
    absorbs every concrete term with its exponent. Zero-coefficient terms
    are kept. The operation is idempotent.

    Parameters
    ----------
    p : Polynomial
        Input polynomial, possibly unsorted or with repeated exponents.

    Returns
    -------
    Polynomial
        Normalized polynomial. An input without terms becomes the zero
        polynomial.

    Examples
    --------
    >>> p = Polynomial(
    ...     coefficients=torch.tensor([1.0, 2.0, 3.0]),
    ...     exponents=torch.tensor([0, 2, 0]),
    ...     indeterminate=torch.tensor([False, False, False]),
    ... )
    >>> polynomial_combine(p).coefficients  # 2x^2 + 4
    tensor([2., 4.])
    """
    coefficients = p.coefficients
    exponents = p.exponents
    indeterminate = p.indeterminate

    if exponents.numel() == 0:
        return _zero_polynomial(
            dtype=coefficients.dtype, device=coefficients.device
        )

    # Stable sort keeps the original order among like terms
    exponents, order = torch.sort(exponents, descending=True, stable=True)
    coefficients = coefficients[order]
    indeterminate = indeterminate[order]

    exponents, inverse = torch.unique_consecutive(
        exponents, return_inverse=True
    )
    n = exponents.shape[0]

    merged = torch.zeros(
        n, dtype=coefficients.dtype, device=coefficients.device
    ).index_add_(0, inverse, coefficients.masked_fill(indeterminate, 0.0))

    merged_indeterminate = (
        torch.zeros(n, dtype=torch.int64, device=coefficients.device)
        .index_add_(0, inverse, indeterminate.to(torch.int64))
        .gt(0)
    )

    return Polynomial(
        coefficients=merged.masked_fill(merged_indeterminate, 0.0),
        exponents=exponents,
        indeterminate=merged_indeterminate,
    )
