"""Demonstration runner.

Walks through constructing, unwrapping and chaining results.

Examples:
- python -m fts_result
- python -m fts_result --example 3
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import TYPE_CHECKING, Any

from fts_result import (
    Err,
    Ok,
    Result,
    ResultErrorInt,
    from_err,
    from_nullable,
    from_ok,
    is_err,
    is_ok,
    unbox,
)

if TYPE_CHECKING:
    from collections.abc import Sequence


def to_jsonable(result: Result[Any, Any]) -> dict[str, Any]:
    """Render a result as a JSON-friendly dict (exceptions become messages)."""
    return unbox(
        result,
        lambda value: {"kind": "Ok", "value": value},
        lambda err: {
            "kind": "Err",
            "err": str(err) if isinstance(err, BaseException) else err,
        },
    )


def example1() -> dict[str, Result[Any, Any]]:
    """Construct results directly and from possibly-missing values."""
    return {
        "ok_value": Ok(5),
        "err_value": Err(ValueError("Some message")),
        "error_from_none": from_nullable(None, ValueError("None instead of value")),
        "ok_from_nullable": from_nullable(12, ValueError("should never see this")),
    }


def example2() -> list[str]:
    """Unwrap results, eliminate them with unbox, and pattern match."""
    lines: list[str] = []
    ok5: ResultErrorInt = Ok(5)
    error: ResultErrorInt = Err(ValueError("Some Error"))

    lines.append(f"from_ok(Ok(5)) -> {from_ok(ok5)}")
    try:
        from_ok(error)
    except ValueError as exc:
        lines.append(f"from_ok(Err) raised {type(exc).__name__}: {exc}")

    lines.append(f"from_err(Err) -> {from_err(error)!r}")

    number_or_error: int | Exception = unbox(error, lambda v: v, lambda e: e)
    lines.append(f"unbox(Err) -> {number_or_error!r}")

    match ok5:
        case Ok(value):
            lines.append(f"Ok has a value: {value}")
        case Err(err):
            lines.append(f"Err has an err: {err}")

    lines.append(f"is_ok(Ok(5)) -> {is_ok(ok5)}, is_err(Ok(5)) -> {is_err(ok5)}")
    return lines


def fake_parse_user_input() -> Result[str, int]:
    """Stand in for parsing a number typed by the user."""
    return Ok(5)


def example3() -> str:
    """Chain a failing step into a pipeline; later steps are skipped."""
    result = (
        fake_parse_user_input()
        .fmap(lambda v: v + 2)
        .then(lambda v: Err("Something is wrong"))
        .fmap(lambda v: v / 11)
    )
    return unbox(
        result,
        lambda v: f"After munging, the user provided number is: {v}",
        lambda e: f"An error occurred during munging: {e}",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser for the demo runner."""
    parser = argparse.ArgumentParser(
        prog="python -m fts_result",
        description="Run the fts-result demonstration examples.",
    )
    parser.add_argument(
        "--example",
        choices=("1", "2", "3", "all"),
        default="all",
        help="Which example to run (default: all).",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the selected examples and return the process exit code."""
    args = build_parser().parse_args(argv)
    selected = {"1", "2", "3"} if args.example == "all" else {args.example}

    if "1" in selected:
        rendered = {name: to_jsonable(r) for name, r in example1().items()}
        print("example1: " + json.dumps(rendered, indent=2))
    if "2" in selected:
        print("example2:")
        for line in example2():
            print(f"  {line}")
    if "3" in selected:
        print("example3: " + example3())
    return 0


if __name__ == "__main__":
    sys.exit(main())
