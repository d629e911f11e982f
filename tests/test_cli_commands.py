from __future__ import annotations

import json
import types
from pathlib import Path

import pytest
from typer.testing import CliRunner

from hashbench import AdapterShape
from hashbench_cli import main as cli_main
from hashbench_cli.runners import common as runners_common

from fakes import BrokenWriteHash, SumHash, ZeroDigestHash, unavailable


@pytest.fixture
def dummy_registry(isolated_registry, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(runners_common, "_load_adapters", lambda: None)
    monkeypatch.setattr(cli_main, "_load_adapters", lambda: None)
    isolated_registry.case("dummy-64", AdapterShape.UNKEYED_64, SumHash, length=8)
    isolated_registry.case("dummy-bytes", AdapterShape.UNKEYED, SumHash, length=8)
    isolated_registry.case("dummy-seeded", AdapterShape.SEEDED_32, SumHash, length=8, seed=1)
    return isolated_registry


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()


def test_cli_list_cases(dummy_registry, cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli_main.app, ["list-cases"])
    assert result.exit_code == 0
    assert "- dummy-64 (unkeyed-64, 8 bytes)" in result.output
    assert "- dummy-bytes (unkeyed, 8 bytes)" in result.output

    dummy_registry.case("dummy-described", AdapterShape.UNKEYED, SumHash, length=8,
                        family="toy", description="sum of bytes")
    described = cli_runner.invoke(cli_main.app, ["list-cases", "--filter", "described"])
    assert "- dummy-described (unkeyed, 8 bytes) [toy]: sum of bytes" in described.output

    filtered = cli_runner.invoke(cli_main.app, ["list-cases", "--filter", "bytes$"])
    assert filtered.exit_code == 0
    assert "dummy-bytes" in filtered.output
    assert "dummy-64" not in filtered.output


def test_cli_digest(dummy_registry, cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli_main.app, ["digest", "dummy-64"])
    assert result.exit_code == 0
    assert "dummy-64: 0x0123456789abcdef" in result.output

    as_bytes = cli_runner.invoke(cli_main.app, ["digest", "dummy-bytes"])
    assert "dummy-bytes: 0123456789abcdef" in as_bytes.output

    missing = cli_runner.invoke(cli_main.app, ["digest", "nope"])
    assert missing.exit_code == 2


def test_cli_run_table_and_export(dummy_registry, cli_runner: CliRunner, tmp_path: Path) -> None:
    export = tmp_path / "out" / "results.json"
    result = cli_runner.invoke(
        cli_main.app,
        ["run", "--iterations", "100", "--filter", "^dummy-(64|bytes)$", "--export", str(export),
         "--notes", "laptop on battery"],
    )
    assert result.exit_code == 0, result.output
    assert "ns/op" in result.output
    assert "MB/s" in result.output
    assert "dummy-seeded" not in result.output
    payload = json.loads(export.read_text(encoding="utf-8"))
    assert [m["case"] for m in payload["measurements"]] == ["dummy-64", "dummy-bytes"]
    assert all(m["iterations"] == 100 for m in payload["measurements"])
    assert payload["failed"] == []
    assert payload["notes"] == "laptop on battery"
    assert {m["family"] for m in payload["measurements"]} == {""}
    assert payload["meta"]["shuffled"] is False


def test_cli_run_json_output(dummy_registry, cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli_main.app, ["run", "--iterations", "10", "--json", "--shuffle", "--shuffle-seed", "3"])
    assert result.exit_code == 0, result.output
    rows = json.loads(result.output[: result.output.rindex("]") + 1])
    assert sorted(r["case"] for r in rows) == ["dummy-64", "dummy-bytes", "dummy-seeded"]
    assert all(r["bytes_per_op"] == 8 for r in rows)


def test_cli_run_guard_failure_exit_code(dummy_registry, cli_runner: CliRunner) -> None:
    dummy_registry.case("dummy-zero", AdapterShape.UNKEYED, ZeroDigestHash, length=8)
    result = cli_runner.invoke(cli_main.app, ["run", "--iterations", "10"])
    assert result.exit_code == 1
    assert "--- FAIL: dummy-zero" in result.output
    assert "dummy-64" in result.output


def test_cli_run_fatal_error_exit_code(dummy_registry, cli_runner: CliRunner) -> None:
    dummy_registry.case("dummy-broken", AdapterShape.UNKEYED, BrokenWriteHash, length=8)
    result = cli_runner.invoke(cli_main.app, ["run", "--iterations", "10", "--filter", "broken"])
    assert result.exit_code == 2


def test_cli_run_construction_failure_exit_code(dummy_registry, cli_runner: CliRunner) -> None:
    dummy_registry.case("dummy-missing", AdapterShape.UNKEYED, unavailable, length=8)
    result = cli_runner.invoke(cli_main.app, ["run", "--iterations", "5"])
    assert result.exit_code == 2
    assert "FATAL: dummy-missing" in result.output


def test_cli_run_no_match(dummy_registry, cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli_main.app, ["run", "--filter", "zzz"])
    assert result.exit_code == 2


def test_run_tests_cli_includes_all_targets(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, cli_runner: CliRunner) -> None:
    tests_dir = tmp_path / "tests"
    tests_dir.mkdir()
    bench_dir = tmp_path / "benchmarks"
    bench_dir.mkdir()

    recorded: dict[str, object] = {}

    def fake_run(cmd, cwd=None, **kwargs):
        recorded["cmd"] = cmd
        recorded["cwd"] = Path(cwd) if cwd is not None else None
        return types.SimpleNamespace(returncode=0)

    monkeypatch.setattr(cli_main.subprocess, "run", fake_run)
    monkeypatch.setattr(cli_main.Path, "cwd", classmethod(lambda cls: tmp_path))
    monkeypatch.setattr(cli_main.sys, "executable", "PYTHON")

    result = cli_runner.invoke(cli_main.app, ["run-tests"])
    assert result.exit_code == 0
    assert recorded["cmd"][:3] == ["PYTHON", "-m", "pytest"]  # type: ignore[index]
    assert "--benchmark-disable" in recorded["cmd"]  # type: ignore[operator]
    assert str(tests_dir) in recorded["cmd"]  # type: ignore[operator]
    assert str(bench_dir) in recorded["cmd"]  # type: ignore[operator]
    assert recorded["cwd"] == tmp_path


def test_run_tests_cli_skip_option(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, cli_runner: CliRunner) -> None:
    (tmp_path / "tests").mkdir()
    (tmp_path / "benchmarks").mkdir()

    recorded: dict[str, object] = {}

    def fake_run(cmd, cwd=None, **kwargs):
        recorded["cmd"] = cmd
        return types.SimpleNamespace(returncode=3)

    monkeypatch.setattr(cli_main.subprocess, "run", fake_run)
    monkeypatch.setattr(cli_main.Path, "cwd", classmethod(lambda cls: tmp_path))

    result = cli_runner.invoke(cli_main.app, ["run-tests", "--skip-benchmarks", "--", "-x"])
    assert result.exit_code == 3
    assert all("benchmarks" not in part for part in recorded["cmd"])  # type: ignore[operator]
    assert recorded["cmd"][-1] == "-x"  # type: ignore[index]
