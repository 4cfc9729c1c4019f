import pytest
import torch

from polyring import polynomial


@pytest.fixture
def random_polynomial():
    """Factory for seeded random polynomials with small integer coefficients.

    Coefficients are drawn from +-1..+-5 so products and sums stay exact in
    float64, while like terms may still cancel after merging.
    """

    def make(seed: int, max_terms: int = 5, max_exponent: int = 6):
        generator = torch.Generator().manual_seed(seed)
        n = int(torch.randint(1, max_terms + 1, (1,), generator=generator))
        exponents = torch.randint(
            0, max_exponent + 1, (n,), generator=generator
        )
        magnitudes = torch.randint(1, 6, (n,), generator=generator)
        signs = torch.randint(0, 2, (n,), generator=generator) * 2 - 1
        coefficients = (magnitudes * signs).to(torch.float64)
        return polynomial(
            list(zip(coefficients.tolist(), exponents.tolist()))
        )

    return make
