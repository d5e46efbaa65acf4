"""
Benchmark: synthetic names, per-run metrics, CSV output and error rows.
"""

import csv
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from benchmark import run_benchmark, synthetic_names
from phonetic import Nysiis, Soundex
from phonetic.errors import WrongFilenameError


def test_synthetic_names_are_deterministic():
    assert synthetic_names(50) == synthetic_names(50)
    assert len(synthetic_names(50)) == 50
    assert all(name[0].isupper() for name in synthetic_names(50))


def test_run_benchmark_metrics(tmp_path):
    csv_path = tmp_path / "results.csv"
    out = run_benchmark((10, 40), {"soundex": Soundex, "nysiis": Nysiis}, csv_path)

    assert out["dataset_sizes"] == [10, 40]
    assert out["encoders"] == ["soundex", "nysiis"]
    rows = out["benchmark_results"]
    assert [(r["encoder"], r["num_names"]) for r in rows] == [
        ("soundex", 10), ("soundex", 40), ("nysiis", 10), ("nysiis", 40),
    ]
    for row in rows:
        assert row["encode_sec"] >= 0
        assert 1 <= row["distinct_codes"] <= row["num_names"]

    scaling = out["scaling_analysis"]
    assert set(scaling["encode_time_per_name_us"]) == {"soundex", "nysiis"}
    assert scaling["max_n_tested"] == 40

    with open(csv_path, newline="", encoding="utf-8") as f:
        written = list(csv.DictReader(f))
    assert len(written) == 4
    assert "error" not in written[0]


def test_failing_encoder_is_reported():
    def broken():
        raise WrongFilenameError("no rules")

    out = run_benchmark((5,), {"broken": broken})
    [row] = out["benchmark_results"]
    assert row["encoder"] == "broken"
    assert row["encode_sec"] == -1
    assert "no rules" in row["error"]
    assert out["scaling_analysis"]["summary"] == "Insufficient data for scaling analysis."
