from .bench.interface import (
    BenchmarkBase,
    BenchmarkResult,
    BenchmarkResultMetricType,
)

__all__ = [
    "BenchmarkBase",
    "BenchmarkResult",
    "BenchmarkResultMetricType",
]
