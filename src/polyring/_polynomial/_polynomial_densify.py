import torch
from torch import Tensor

from polyring._polynomial_error import PolynomialError

from ._polynomial import Polynomial
from ._polynomial_combine import polynomial_combine


def _dense_coefficients(p: Polynomial) -> Tensor:
    """Coefficient arena indexed by exponent, shape (max_exponent + 1,)."""
    if p.indeterminate.any():
        raise PolynomialError(
            "Polynomial with an unresolved constant of integration has no "
            "dense coefficient form; resolve it with "
            "polynomial_resolve_constant first"
        )

    size = int(p.exponents.max()) + 1
    dense = torch.zeros(
        size, dtype=p.coefficients.dtype, device=p.coefficients.device
    )
    dense.index_put_((p.exponents,), p.coefficients, accumulate=True)
    return dense


def _from_dense_coefficients(dense: Tensor) -> Polynomial:
    """Inverse of _dense_coefficients, keeping every zero slot."""
    n = dense.shape[0]
    return Polynomial(
        coefficients=dense.flip(0),
        exponents=torch.arange(
            n - 1, -1, -1, dtype=torch.int64, device=dense.device
        ),
        indeterminate=torch.zeros(n, dtype=torch.bool, device=dense.device),
    )


def polynomial_densify(p: Polynomial) -> Polynomial:
    """Insert explicit zero terms for every missing exponent.

    The result holds exactly ``max_exponent + 1`` terms, one for each
    exponent from the degree down to 0. Slots are filled by exponent, so
    the size depends on the exponent range, never on the sparse term count.

    Parameters
    ----------
    p : Polynomial
        Input polynomial, usually passed through polynomial_drop_zero_terms.

    Returns
    -------
    Polynomial
        Dense form of p, sorted by descending exponent.

    Examples
    --------
    >>> polynomial_densify(polynomial([(1.0, 5), (1.0, 0)])).exponents
    tensor([5, 4, 3, 2, 1, 0])
    """
    p = polynomial_combine(p)

    size = int(p.exponents[0]) + 1
    device = p.coefficients.device
    position = size - 1 - p.exponents

    coefficients = torch.zeros(size, dtype=p.coefficients.dtype, device=device)
    coefficients[position] = p.coefficients
    indeterminate = torch.zeros(size, dtype=torch.bool, device=device)
    indeterminate[position] = p.indeterminate

    return Polynomial(
        coefficients=coefficients,
        exponents=torch.arange(
            size - 1, -1, -1, dtype=torch.int64, device=device
        ),
        indeterminate=indeterminate,
    )
