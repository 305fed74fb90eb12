from __future__ import annotations

import math
import sys
from collections.abc import Sequence
from typing import TextIO

from .model import RESULT_TYPES, ComparisonMode, Result, ThroughputResult, TimingResult

LABEL_WIDTH = 20
IPS_WIDTH = 10


def detect_mode(results: Sequence[Result]) -> ComparisonMode:
    """Decide throughput vs. timing mode once, from the first record.

    Every record must be the same variant as the first; anything else is
    rejected before sorting so that the outcome never depends on comparison order.
    """
    if not results:
        raise ValueError("compare() needs at least one result")

    for r in results:
        if not isinstance(r, RESULT_TYPES):
            raise TypeError(f"Unsupported result type: {type(r).__name__} (expected ThroughputResult or TimingResult)")

    mode = results[0].mode
    for r in results[1:]:
        if r.mode != mode:
            raise TypeError(f"Result {r.label!r} is a {r.mode!r} record but the comparison is in {mode!r} mode")
    return mode


def rank(results: Sequence[Result]) -> list[Result]:
    """Return results fastest first (ties keep their input order)."""
    detect_mode(results)
    return sorted(results, key=lambda r: r.speed_key)


def slowdown(baseline: Result, result: Result) -> float:
    """How many times slower `result` is than `baseline` (>= 1.0 when baseline is fastest)."""
    if isinstance(baseline, ThroughputResult) and isinstance(result, ThroughputResult):
        num, den = baseline.ips, result.ips
    elif isinstance(baseline, TimingResult) and isinstance(result, TimingResult):
        num, den = result.runtime, baseline.runtime
    else:
        raise TypeError("slowdown() needs two results of the same kind")

    if num == den:
        return 1.0
    if den == 0:
        return math.inf
    return num / den


def _format_runtime(runtime: float) -> str:
    return str(runtime)


def _baseline_line(best: Result) -> str:
    if isinstance(best, ThroughputResult):
        return f"{best.label:>{LABEL_WIDTH}}: {best.ips:{IPS_WIDTH}.1f} i/s"
    return f"{best.label.rjust(LABEL_WIDTH)}: {_format_runtime(best.runtime)}s"


def _comparison_line(best: Result, result: Result) -> str:
    x = slowdown(best, result)
    if isinstance(result, ThroughputResult):
        return f"{result.label:>{LABEL_WIDTH}}: {result.ips:{IPS_WIDTH}.1f} i/s - {x:.2f}x slower"
    return f"{result.label.rjust(LABEL_WIDTH)}: {_format_runtime(result.runtime)}s - {x:.2f}x slower"


def format_comparison(results: Sequence[Result]) -> list[str]:
    """Render the comparison report as a list of lines (without trailing newlines)."""
    ranked = rank(results)
    best, rest = ranked[0], ranked[1:]

    lines: list[str] = []
    lines.append("")
    lines.append("Comparison:")
    lines.append(_baseline_line(best))
    for r in rest:
        lines.append(_comparison_line(best, r))
    lines.append("")
    return lines


def compare(*results: Result, file: TextIO | None = None) -> None:
    """Print a ranked comparison of `results` to `file` (default: stdout).

    The fastest result is printed first as the baseline; every other result
    is printed with its slowdown factor relative to that baseline.
    """
    lines = format_comparison(results)
    out = sys.stdout if file is None else file
    for ln in lines:
        print(ln, file=out)
