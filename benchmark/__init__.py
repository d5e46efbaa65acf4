"""Encoder performance benchmarking: encode time, throughput, code collapse, scaling."""

from .benchmark import run_benchmark, synthetic_names, BENCHMARK_COUNTS

__all__ = ["run_benchmark", "synthetic_names", "BENCHMARK_COUNTS"]
