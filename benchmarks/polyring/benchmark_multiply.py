"""Benchmark polynomial multiplication.

Compares the sparse cross-product multiply against numpy.polynomial on
dense inputs and on sparse inputs whose exponents span a wide range, where
the term count stays small while the degree grows.
"""

import time

import numpy as np
import torch
from numpy.polynomial import Polynomial as NpPolynomial

from polyring import (
    polynomial,
    polynomial_densify,
    polynomial_multiply,
)


def _random_polynomial(n_terms: int, max_exponent: int, seed: int):
    generator = torch.Generator().manual_seed(seed)
    exponents = torch.randint(
        0, max_exponent + 1, (n_terms,), generator=generator
    )
    coefficients = torch.randn(
        n_terms, generator=generator, dtype=torch.float64
    )
    return polynomial(list(zip(coefficients.tolist(), exponents.tolist())))


def benchmark_multiply(
    n_terms: int,
    max_exponent: int,
    n_iterations: int = 100,
    method: str = "sparse",
) -> float:
    """Benchmark multiplication of two random polynomials.

    Parameters
    ----------
    n_terms : int
        Number of terms drawn for each operand (before merging).
    max_exponent : int
        Largest exponent that may be drawn.
    n_iterations : int
        Number of iterations for timing.
    method : str
        'sparse' (polynomial_multiply) or 'numpy' (dense numpy product).

    Returns
    -------
    float
        Average time per multiplication in milliseconds.
    """
    a = _random_polynomial(n_terms, max_exponent, seed=0)
    b = _random_polynomial(n_terms, max_exponent, seed=1)

    if method == "sparse":

        def multiply_fn():
            return polynomial_multiply(a, b)

    elif method == "numpy":
        a_np = NpPolynomial(polynomial_densify(a).coefficients.flip(0).numpy())
        b_np = NpPolynomial(polynomial_densify(b).coefficients.flip(0).numpy())

        def multiply_fn():
            return a_np * b_np

    else:
        raise ValueError(f"Unknown method: {method}")

    # Warmup
    for _ in range(10):
        multiply_fn()

    start = time.perf_counter()
    for _ in range(n_iterations):
        multiply_fn()

    elapsed = time.perf_counter() - start
    return elapsed / n_iterations * 1000  # ms


def main():
    """Run multiplication benchmarks for dense and sparse operands."""
    cases = [
        (8, 8),
        (16, 16),
        (32, 32),
        (64, 64),
        (8, 1024),
        (16, 4096),
        (32, 16384),
    ]

    print("Polynomial Multiplication Benchmark")
    print("=" * 56)
    print(
        f"{'Terms':>8} {'Max exp':>10} "
        f"{'Sparse (ms)':>16} {'NumPy (ms)':>16}"
    )
    print("-" * 56)

    for n_terms, max_exponent in cases:
        ms_sparse = benchmark_multiply(n_terms, max_exponent, method="sparse")
        ms_numpy = benchmark_multiply(n_terms, max_exponent, method="numpy")
        print(
            f"{n_terms:>8} {max_exponent:>10} "
            f"{ms_sparse:>16.4f} {ms_numpy:>16.4f}"
        )

    print()
    print("Notes:")
    print("- Sparse work grows with the term count, O(n_a * n_b)")
    print("- NumPy work grows with the degree of the dense coefficient arrays")
    print(f"- NumPy {np.__version__}, PyTorch {torch.__version__}")


if __name__ == "__main__":
    main()
