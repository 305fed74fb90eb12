from __future__ import annotations

import json
from pathlib import Path

import pytest
from jsonschema import ValidationError

from benchmark_report.ips_compare.export import load_results, parse_results, validate_results_schema
from benchmark_report.ips_compare.model import ThroughputResult, TimingResult


def test_results_schema_minimal_payload_validates() -> None:
    validate_results_schema({"schema_version": "0.1.0", "results": [{"label": "a", "ips": 1.0}]})


def test_results_schema_file_exists() -> None:
    import benchmark_report.ips_compare as pkg

    schema_path = Path(pkg.__file__).resolve().parent / "results.schema.json"
    assert schema_path.exists()


@pytest.mark.parametrize(
    "payload",
    [
        {"schema_version": "0.1.0", "results": []},
        {"schema_version": "0.1.0", "results": [{"label": "a"}]},
        {"schema_version": "0.1.0", "results": [{"label": "a", "ips": 1.0, "runtime": 1.0}]},
        {"schema_version": "0.1.0", "results": [{"label": "a", "ips": -1.0}]},
        {"schema_version": "9.9.9", "results": [{"label": "a", "ips": 1.0}]},
        {"results": [{"label": "a", "ips": 1.0}]},
    ],
)
def test_results_schema_rejects_malformed_payloads(payload: dict) -> None:
    with pytest.raises(ValidationError):
        validate_results_schema(payload)


def test_load_results_builds_records(tmp_path: Path) -> None:
    p = tmp_path / "results.json"
    p.write_text(
        json.dumps(
            {
                "schema_version": "0.1.0",
                "results": [{"label": "x", "runtime": 1.0}, {"label": "y", "runtime": 2}],
            }
        )
    )
    assert load_results(p) == [TimingResult("x", 1.0), TimingResult("y", 2.0)]


def test_load_results_keeps_throughput_records(tmp_path: Path) -> None:
    p = tmp_path / "results.json"
    p.write_text(json.dumps({"schema_version": "0.1.0", "results": [{"label": "a", "ips": 3}]}))
    assert load_results(p) == [ThroughputResult("a", 3.0)]


def test_load_results_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_results(tmp_path / "nope.json")


@pytest.mark.parametrize("token", ["NaN", "Infinity", "-Infinity"])
def test_load_results_rejects_non_finite_tokens(tmp_path: Path, token: str) -> None:
    p = tmp_path / "results.json"
    p.write_text(
        '{"schema_version": "0.1.0", "results": ['
        '{"label": "a", "ips": 10}, {"label": "b", "ips": ' + token + '}, {"label": "c", "ips": 100}]}'
    )
    with pytest.raises(ValueError):
        load_results(p)


def test_parse_results_rejects_nan_payload() -> None:
    payload = {"schema_version": "0.1.0", "results": [{"label": "a", "runtime": float("nan")}]}
    with pytest.raises(ValueError):
        parse_results(payload)
