"""Benchmark hxform kernels against plain NumPy equivalents."""

import logging
import time

import numpy as np

from hxform import compose_all, invert, multiply_matrices, multiply_matrix_and_point

logging.basicConfig(level=logging.INFO, format='%(message)s')
logger = logging.getLogger(__name__)


def create_test_matrices(n: int, seed: int = 42) -> list[np.ndarray]:
    """Create well-conditioned random matrices."""
    rng = np.random.default_rng(seed)
    return [(rng.standard_normal((4, 4)) + 4 * np.eye(4)).reshape(16) for _ in range(n)]


def benchmark(func, warmup=100, iterations=10_000):
    """Benchmark a function, returning microseconds per call."""
    for _ in range(warmup):
        func()

    start = time.perf_counter()
    for _ in range(iterations):
        func()
    elapsed = time.perf_counter() - start

    return (elapsed / iterations) * 1e6


def run_benchmarks():
    """Run kernel benchmarks."""
    logger.info("=" * 70)
    logger.info("HXFORM KERNEL BENCHMARKS")
    logger.info("=" * 70)

    a, b = create_test_matrices(2)
    a44, b44 = a.reshape(4, 4), b.reshape(4, 4)
    point = np.array([1.0, 2.0, 3.0, 1.0])
    chain = create_test_matrices(8, seed=7)

    cases = [
        ("point x matrix", lambda: multiply_matrix_and_point(a, point), lambda: point @ a44),
        ("matrix x matrix", lambda: multiply_matrices(a, b), lambda: b44 @ a44),
        ("invert", lambda: invert(a), lambda: np.linalg.inv(a44)),
        (
            "compose 8",
            lambda: compose_all(chain),
            lambda: np.linalg.multi_dot([m.reshape(4, 4) for m in reversed(chain)]),
        ),
    ]

    logger.info(f"{'Operation':<20} {'hxform (us)':>12} {'numpy (us)':>12}")
    logger.info("-" * 46)
    for name, ours, reference in cases:
        logger.info(f"{name:<20} {benchmark(ours):>12.2f} {benchmark(reference):>12.2f}")


if __name__ == "__main__":
    run_benchmarks()
