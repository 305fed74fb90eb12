from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any, Literal

import attrs

ComparisonMode = Literal["ips", "runtime"]


def _non_negative_finite(_inst: Any, attribute: attrs.Attribute, value: float) -> None:
    if not math.isfinite(value) or value < 0:
        raise ValueError(f"{attribute.name} must be a finite, non-negative number, got {value!r}")


@attrs.define(frozen=True, slots=True)
class ThroughputResult:
    """Benchmark result expressed as iterations per second."""

    label: str = attrs.field(converter=str)
    ips: float = attrs.field(converter=float, validator=_non_negative_finite)

    @property
    def mode(self) -> ComparisonMode:
        return "ips"

    @property
    def speed_key(self) -> float:
        return -self.ips


@attrs.define(frozen=True, slots=True)
class TimingResult:
    """Benchmark result expressed as elapsed seconds for a fixed amount of work."""

    label: str = attrs.field(converter=str)
    runtime: float = attrs.field(converter=float, validator=_non_negative_finite)

    @property
    def mode(self) -> ComparisonMode:
        return "runtime"

    @property
    def speed_key(self) -> float:
        return self.runtime


Result = ThroughputResult | TimingResult
RESULT_TYPES: tuple[type, ...] = (ThroughputResult, TimingResult)


def result_from_dict(obj: Mapping[str, Any]) -> Result:
    """Build the matching result variant from a `{label, ips}` or `{label, runtime}` mapping."""
    if not isinstance(obj, Mapping):
        raise TypeError(f"Expected a mapping, got {type(obj).__name__}")
    if "label" not in obj:
        raise ValueError(f"Result is missing 'label': {dict(obj)!r}")

    has_ips = "ips" in obj
    has_runtime = "runtime" in obj
    if has_ips and has_runtime:
        raise ValueError(f"Result {obj['label']!r} has both 'ips' and 'runtime'")
    if has_ips:
        return ThroughputResult(label=obj["label"], ips=obj["ips"])
    if has_runtime:
        return TimingResult(label=obj["label"], runtime=obj["runtime"])
    raise ValueError(f"Result {obj['label']!r} has neither 'ips' nor 'runtime'")
