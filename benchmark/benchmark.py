"""
Encoder throughput benchmarking module.

Measures: encode time per name list, names per second, distinct codes (how
much each encoder collapses the list) and scaling analysis.
Uses a synthetic, deterministic name list. Beider-Morse and Daitch-Mokotoff
are included only when their rule resources are configured.
Returns metrics that show how each encoder scales (per-name rates, summary).
"""

import csv
import logging
import sys
import time
from itertools import product
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

# Project root on path
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from phonetic import (
    Caverphone1,
    Caverphone2,
    ColognePhonetic,
    DaitchMokotoffSoundex,
    DoubleMetaphone,
    Encoder,
    MatchRatingApproach,
    Metaphone,
    Nysiis,
    Phonex,
    RefinedSoundex,
    Soundex,
    config,
)
from phonetic.beider_morse import BeiderMorseEncoder, ConfigFiles
from phonetic.errors import PhoneticError

logger = logging.getLogger(__name__)

BENCHMARK_COUNTS = (100, 1000, 5000)

_ONSETS = ("b", "ch", "d", "g", "h", "k", "l", "m", "n", "p", "r", "sch", "t", "v", "w", "z")
_VOWELS = ("a", "e", "i", "o", "u", "ei", "au")
_CODAS = ("", "n", "r", "s", "tz", "mann", "berg", "ski")


def synthetic_names(count: int) -> List[str]:
    """Deterministic surname-like strings built from onset/vowel/coda syllables."""
    syllables = ["".join(parts) for parts in product(_ONSETS, _VOWELS, _CODAS)]
    names = []
    for i in range(count):
        first = syllables[i % len(syllables)]
        second = syllables[(i * 7 + 3) % len(syllables)]
        name = first if i % 3 == 0 else first + second
        names.append(name.capitalize())
    return names


def default_encoders() -> Dict[str, Callable[[], Encoder]]:
    """Encoder factories by name; rule-based encoders only when configured."""
    encoders: Dict[str, Callable[[], Encoder]] = {
        "soundex": Soundex,
        "refined_soundex": RefinedSoundex,
        "metaphone": Metaphone,
        "double_metaphone": DoubleMetaphone,
        "caverphone1": Caverphone1,
        "caverphone2": Caverphone2,
        "cologne": ColognePhonetic,
        "nysiis": Nysiis,
        "phonex": Phonex,
        "match_rating": MatchRatingApproach,
    }
    if config.DM_RULES_FILE:
        encoders["daitch_mokotoff"] = DaitchMokotoffSoundex.from_env
    if config.BM_RULES_DIR:
        encoders["beider_morse"] = lambda: BeiderMorseEncoder(ConfigFiles.from_env())
    return encoders


def _compute_scaling_analysis(results: List[Dict[str, Any]]) -> Dict[str, Any]:
    """Compute per-name rates and scaling summary per encoder."""
    valid = [r for r in results if r.get("error") is None and r.get("encode_sec", -1) >= 0]
    if not valid:
        return {
            "summary": "Insufficient data for scaling analysis.",
            "encode_time_per_name_us": {},
            "max_n_tested": None,
        }
    per_name: Dict[str, float] = {}
    parts = []
    for name in dict.fromkeys(r["encoder"] for r in valid):
        runs = sorted((r for r in valid if r["encoder"] == name), key=lambda r: r["num_names"])
        # Largest N gives the most stable rate
        largest = runs[-1]
        n = largest["num_names"]
        us = largest["encode_sec"] / n * 1_000_000 if n else 0.0
        per_name[name] = round(us, 3)
        line = f"{name}: ~{us:.1f} us per name"
        if len(runs) >= 2:
            r0 = runs[0]
            n0, e0, e1 = r0["num_names"], r0["encode_sec"], largest["encode_sec"]
            if e0 and e1 and n0 and n0 < n:
                if 0.5 <= (e1 / e0) / (n / n0) <= 2.0:
                    line += " (linear)"
        parts.append(line + ".")
    return {
        "summary": " ".join(parts),
        "encode_time_per_name_us": per_name,
        "fastest": min(per_name, key=per_name.get),
        "slowest": max(per_name, key=per_name.get),
        "max_n_tested": max(r["num_names"] for r in valid),
    }


def run_benchmark(
    counts: tuple[int, ...] = BENCHMARK_COUNTS,
    encoders: Optional[Dict[str, Callable[[], Encoder]]] = None,
    csv_path: Path | None = None,
) -> Dict[str, Any]:
    """
    Encode a synthetic name list of each size with each encoder.
    Returns: per-run timings, distinct code counts and scaling_analysis.
    """
    if encoders is None:
        encoders = default_encoders()
    results: List[Dict[str, Any]] = []

    for name, factory in encoders.items():
        try:
            encoder = factory()
        except PhoneticError as e:
            logger.warning("Skipping %s: %s", name, e)
            for count in counts:
                results.append({"encoder": name, "num_names": count, "encode_sec": -1, "error": str(e)})
            continue

        for count in counts:
            names = synthetic_names(count)
            row: Dict[str, Any] = {"encoder": name, "num_names": count}
            try:
                t0 = time.perf_counter()
                codes = [encoder.encode(n) for n in names]
                row["encode_sec"] = round(time.perf_counter() - t0, 6)
                row["encode_time_ms"] = round(row["encode_sec"] * 1000, 2)
                row["names_per_sec"] = round(count / row["encode_sec"]) if row["encode_sec"] else None
                row["distinct_codes"] = len(set(codes))
            except (PhoneticError, ValueError) as e:
                row["error"] = str(e)
                row.setdefault("encode_sec", -1)
                row.setdefault("encode_time_ms", -1)
                row.setdefault("names_per_sec", -1)
                row.setdefault("distinct_codes", -1)
            logger.debug("benchmark %s n=%d: %s", name, count, row)
            results.append(row)

    scaling = _compute_scaling_analysis(results)
    out: Dict[str, Any] = {
        "benchmark_results": results,
        "dataset_sizes": list(counts),
        "encoders": list(encoders),
        "scaling_analysis": scaling,
        "metrics_summary": {
            "encode_time": "sec and ms per run (whole name list)",
            "throughput": "names encoded per second",
            "distinct_codes": "number of distinct codes in the run; lower means coarser matching",
        },
    }
    if csv_path:
        fieldnames = ["encoder", "num_names", "encode_sec", "encode_time_ms", "names_per_sec", "distinct_codes"]
        if any("error" in r for r in results):
            fieldnames.append("error")
        with open(csv_path, "w", newline="", encoding="utf-8") as f:
            w = csv.DictWriter(f, fieldnames=fieldnames, extrasaction="ignore")
            w.writeheader()
            w.writerows(results)
    return out
