from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator

from .model import Result, result_from_dict

SCHEMA_VERSION = "0.1.0"


def _reject_constant(token: str) -> float:
    raise ValueError(f"Non-finite number {token} is not allowed in results JSON")


def _default_results_schema_path() -> Path:
    return Path(__file__).resolve().parent / "results.schema.json"


def validate_results_schema(payload: dict[str, Any], *, schema_path: Path | None = None) -> None:
    schema_path = _default_results_schema_path() if schema_path is None else schema_path
    schema = json.loads(schema_path.read_text())
    Draft202012Validator(schema).validate(payload)


def parse_results(payload: dict[str, Any]) -> list[Result]:
    """Validate a decoded results payload and convert its entries to result records."""
    validate_results_schema(payload)
    return [result_from_dict(item) for item in payload["results"]]


def load_results(path: Path) -> list[Result]:
    if not path.exists():
        raise FileNotFoundError(f"Missing results file at {path}")
    return parse_results(json.loads(path.read_text(), parse_constant=_reject_constant))
