"""Benchmarks for the confluent hypergeometric function.

Times one representative triple per regime of the dispatcher and
compares the evaluator against ``scipy.special.hyp1f1``.
"""

from __future__ import annotations

import time
from typing import Any, Callable

import numpy as np
from scipy import special

from kummer.special_functions import (
    classify_hypergeometric_1_f_1,
    evaluate_hypergeometric_1_f_1,
    evaluate_hypergeometric_1_f_1_int,
)

REGIME_TRIPLES = [
    (0.5, 1.5, 2.0),
    (3.5, 2.5, 3.0),
    (1.5, 2.5, 50.0),
    (1.5, 2.5, -50.0),
    (0.3, 1.0e-13, 2.0),
    (0.7, 1.2, 25.0),
    (-3.0, 2.5, -10.0),
    (-10.5, 2.0, 15.0),
    (-4.5, 2.5, 30.0),
    (3.5, -4.5, 20.0),
    (-3.5, -4.5, 20.0),
    (5.5, 2.5, 20.0),
    (4.5, 30.5, 20.0),
    (6.5, 9.5, 30.0),
]


def benchmark(
    func: Callable,
    *args: Any,
    warmup: int = 3,
    iterations: int = 10,
    **kwargs: Any,
) -> dict[str, float]:
    """Run a simple benchmark on a function.

    Parameters
    ----------
    func : callable
        Function to benchmark.
    *args : Any
        Positional arguments to pass to func.
    warmup : int, optional
        Number of warmup iterations. Default is 3.
    iterations : int, optional
        Number of timed iterations. Default is 10.
    **kwargs : Any
        Keyword arguments to pass to func.

    Returns
    -------
    dict
        Dictionary with timing statistics:
        - 'mean': Mean time in seconds
        - 'std': Standard deviation in seconds
        - 'min': Minimum time in seconds
        - 'max': Maximum time in seconds
    """
    for _ in range(warmup):
        func(*args, **kwargs)

    times = []
    for _ in range(iterations):
        start = time.perf_counter()
        func(*args, **kwargs)
        times.append(time.perf_counter() - start)

    return {
        "mean": np.mean(times),
        "std": np.std(times),
        "min": np.min(times),
        "max": np.max(times),
    }


def format_time(seconds: float) -> str:
    """Format time in appropriate units."""
    if seconds < 1e-6:
        return f"{seconds * 1e9:.3f}ns"
    elif seconds < 1e-3:
        return f"{seconds * 1e6:.3f}us"
    elif seconds < 1:
        return f"{seconds * 1e3:.3f}ms"
    else:
        return f"{seconds:.3f}s"


def print_comparison(
    name: str,
    times: dict[str, dict[str, float]],
) -> None:
    """Print benchmark comparison results for multiple methods."""
    print(f"\n{name}")
    print("-" * len(name))

    fastest_name = min(times.keys(), key=lambda k: times[k]["mean"])
    fastest_time = times[fastest_name]["mean"]

    for method_name, timing in times.items():
        slowdown = timing["mean"] / fastest_time
        if slowdown > 1.01:
            suffix = f" ({slowdown:.2f}x slower)"
        else:
            suffix = " (fastest)"
        print(
            f"  {method_name}: {format_time(timing['mean'])} +/- {format_time(timing['std'])}{suffix}"
        )


class BenchHypergeometric1F1:
    """Benchmarks for 1F1(a; b; x)."""

    def __init__(self, warmup: int = 3, iterations: int = 10):
        self.warmup = warmup
        self.iterations = iterations

    def _bench(
        self, func: Callable, *args: Any, **kwargs: Any
    ) -> dict[str, float]:
        return benchmark(
            func,
            *args,
            warmup=self.warmup,
            iterations=self.iterations,
            **kwargs,
        )

    def bench_regimes(self) -> None:
        """Time one triple per regime next to scipy."""
        for a, b, x in REGIME_TRIPLES:
            regime = classify_hypergeometric_1_f_1(a, b, x)
            result = evaluate_hypergeometric_1_f_1(a, b, x)
            reference = float(special.hyp1f1(a, b, x))
            print_comparison(
                f"{regime} (a={a}, b={b}, x={x}): "
                f"{result.value:.15g} [{result.status.name}], scipy {reference:.15g}",
                {
                    "kummer": self._bench(evaluate_hypergeometric_1_f_1, a, b, x),
                    "scipy": self._bench(special.hyp1f1, a, b, x),
                },
            )

    def bench_integer(self, n: int = 40) -> None:
        """Compare the integer entry point with the general one."""
        for m, x in [(1, 7.5), (n // 2, 30.0), (3 * n // 4, 60.0), (-5, 20.0)]:
            print_comparison(
                f"integer (m={m}, n={n}, x={x})",
                {
                    "int": self._bench(evaluate_hypergeometric_1_f_1_int, m, n, x),
                    "real": self._bench(evaluate_hypergeometric_1_f_1, float(m), float(n), x),
                },
            )

    def run_all(self) -> None:
        """Run all 1F1 benchmarks."""
        print("=" * 60)
        print("HYPERGEOMETRIC 1F1 BENCHMARKS")
        print("=" * 60)

        print("\n--- Regimes ---")
        self.bench_regimes()

        print("\n--- Integer Parameters ---")
        self.bench_integer()


if __name__ == "__main__":
    bench = BenchHypergeometric1F1(warmup=3, iterations=100)
    bench.run_all()
