from __future__ import annotations

import argparse
import sys
from pathlib import Path

from jsonschema import ValidationError

from .compare import compare, detect_mode
from .export import load_results


def _abs_path(p: str) -> Path:
    return Path(p).expanduser().resolve()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="benchmark_report.ips_compare",
        description="Print a ranked comparison of benchmark results (fastest first).",
    )
    sub = parser.add_subparsers(dest="cmd", required=True)

    cmp_ = sub.add_parser("compare", help="Print the comparison report for a results JSON file.")
    cmp_.add_argument("--results", type=_abs_path, required=True, help="Path to results JSON.")

    validate = sub.add_parser("validate", help="Validate a results JSON file without printing a report.")
    validate.add_argument("--results", type=_abs_path, required=True, help="Path to results JSON.")

    return parser


def compare_run(*, results_path: Path) -> int:
    try:
        results = load_results(results_path)
        compare(*results)
    except (OSError, ValidationError, TypeError, ValueError) as e:
        print(f"Failed to compare {results_path}: {_short_error(e)}", file=sys.stderr)
        return 2
    return 0


def validate_run(*, results_path: Path) -> int:
    try:
        detect_mode(load_results(results_path))
    except (OSError, ValidationError, TypeError, ValueError) as e:
        print(f"Invalid results file {results_path}: {_short_error(e)}", file=sys.stderr)
        return 2
    return 0


def _short_error(e: Exception) -> str:
    # ValidationError's str() includes the full schema; keep stderr to one line.
    if isinstance(e, ValidationError):
        return e.message
    return str(e)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)

    if ns.cmd == "compare":
        return compare_run(results_path=ns.results)
    if ns.cmd == "validate":
        return validate_run(results_path=ns.results)

    raise AssertionError(f"Unhandled cmd: {ns.cmd}")


if __name__ == "__main__":
    raise SystemExit(main())
