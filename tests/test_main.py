"""Tests for the ``python -m fts_result`` demonstration runner."""

from __future__ import annotations

import json

import pytest

from fts_result import Err, Ok
from fts_result.__main__ import example1, example2, example3, main, to_jsonable

pytestmark = pytest.mark.unit


def test_example1_builds_expected_variants() -> None:
    results = example1()

    assert results["ok_value"] == Ok(5)
    assert isinstance(results["err_value"], Err)
    assert isinstance(results["error_from_none"], Err)
    assert results["ok_from_nullable"] == Ok(12)


def test_to_jsonable_renders_exception_messages() -> None:
    assert to_jsonable(Ok(5)) == {"kind": "Ok", "value": 5}
    assert to_jsonable(Err(ValueError("m"))) == {"kind": "Err", "err": "m"}
    assert to_jsonable(Err("plain")) == {"kind": "Err", "err": "plain"}


def test_example2_reports_unwrapping() -> None:
    lines = example2()

    assert "from_ok(Ok(5)) -> 5" in lines
    assert "from_ok(Err) raised ValueError: Some Error" in lines
    assert "Ok has a value: 5" in lines
    assert "is_ok(Ok(5)) -> True, is_err(Ok(5)) -> False" in lines


def test_example3_short_circuits_after_failure() -> None:
    assert example3() == "An error occurred during munging: Something is wrong"


def test_main_runs_single_example(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--example", "3"]) == 0

    out = capsys.readouterr().out
    expected = "example3: An error occurred during munging: Something is wrong"
    assert out.strip() == expected


def test_main_runs_all_examples(capsys: pytest.CaptureFixture[str]) -> None:
    assert main([]) == 0

    out = capsys.readouterr().out
    assert "example1:" in out
    assert "example2:" in out
    assert "example3:" in out

    payload = out.split("example1: ", 1)[1].split("example2:", 1)[0]
    assert json.loads(payload)["ok_from_nullable"] == {"kind": "Ok", "value": 12}


def test_main_rejects_unknown_example() -> None:
    with pytest.raises(SystemExit):
        main(["--example", "9"])
