#!/usr/bin/env python3
"""
Benchmark the encoders over 100, 1000 and 5000 synthetic names;
writes results to benchmark_results.csv.
"""

import sys
from pathlib import Path

# Project root on path
sys.path.insert(0, str(Path(__file__).resolve().parent))

from benchmark import run_benchmark, BENCHMARK_COUNTS
from phonetic.logging_config import setup_logging


def main() -> None:
    setup_logging()
    out_path = Path(__file__).parent / "benchmark_results.csv"
    print(f"Running encoders over {', '.join(map(str, BENCHMARK_COUNTS))} names...", flush=True)
    out = run_benchmark(BENCHMARK_COUNTS, csv_path=out_path)
    print(out["scaling_analysis"]["summary"])
    print(f"Wrote {out_path}")


if __name__ == "__main__":
    main()
