from __future__ import annotations
import json
import logging
from pathlib import Path
import subprocess
import sys
from typing import List, Optional

import typer

from hashbench import HashBenchError, digest_once, format_digest, registry, run_cases
from .runners.common import _load_adapters, export_json, format_table

app = typer.Typer(add_completion=False, help="Hash function microbenchmark CLI")


@app.command("list-cases")
def list_cases(
    filter: Optional[str] = typer.Option(None, "--filter", "-f", help="Regular expression matched against case names."),
):
    """List registered benchmark cases."""
    _load_adapters()
    for case in registry.select(filter):
        line = f"- {case.name} ({case.shape.value}, {case.length} bytes)"
        if case.family:
            line += f" [{case.family}]"
        if case.description:
            line += f": {case.description}"
        typer.echo(line)


@app.command()
def digest(name: str):
    """Print the digest a case produces for the shared zero buffer."""
    _load_adapters()
    try:
        case = registry.get(name)
    except KeyError as e:
        typer.echo(str(e.args[0]), err=True)
        raise typer.Exit(code=2)
    try:
        value = digest_once(case)
    except HashBenchError as e:
        typer.echo(f"error: {e}", err=True)
        raise typer.Exit(code=2)
    typer.echo(f"{case.name}: {format_digest(value, case.shape)}")


@app.command()
def run(
    filter: Optional[str] = typer.Option(None, "--filter", "-f", help="Regular expression matched against case names."),
    benchtime: Optional[float] = typer.Option(None, help="Target seconds per calibrated round (default HASHBENCH_BENCHTIME or 1.0)."),
    iterations: Optional[int] = typer.Option(None, help="Run exactly this many iterations per case instead of calibrating."),
    shuffle: bool = typer.Option(False, "--shuffle/--no-shuffle", help="Run cases in random order."),
    shuffle_seed: Optional[int] = typer.Option(None, help="Seed for --shuffle."),
    export: Optional[str] = typer.Option(None, help="Write results as JSON to this path."),
    print_json: bool = typer.Option(False, "--json", help="Print results as JSON instead of a table."),
    notes: str = typer.Option("", help="Free-form note stored with exported results."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log calibration rounds."),
) -> None:
    """Benchmark the selected cases sequentially."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    _load_adapters()
    cases = registry.select(filter)
    if not cases:
        typer.echo(f"no cases match {filter!r}", err=True)
        raise typer.Exit(code=2)
    try:
        result = run_cases(
            cases,
            benchtime=benchtime,
            iterations=iterations,
            shuffle=shuffle,
            seed=shuffle_seed,
            notes=notes,
        )
    except HashBenchError as e:
        typer.echo(f"FATAL: {e}", err=True)
        raise typer.Exit(code=2)

    if print_json:
        typer.echo(json.dumps([m.to_dict() for m in result.measurements], indent=2))
    else:
        for line in format_table(result.measurements):
            typer.echo(line)
    path = export_json(result, export)
    if path is not None:
        typer.echo(f"wrote {path}", err=True)
    if result.failed:
        typer.echo("FAIL", err=True)
        raise typer.Exit(code=1)
    typer.echo("ok")


@app.command("run-tests")
def run_tests(
    include_benchmarks: bool = typer.Option(
        True,
        "--with-benchmarks/--skip-benchmarks",
        help="Also run benchmarks/ once each with timing disabled.",
        show_default=True,
    ),
    pytest_args: Optional[List[str]] = typer.Argument(
        None,
        metavar="PYTEST_ARGS...",
        help="Extra arguments forwarded to pytest (after default targets).",
    ),
) -> None:
    """Execute the repository test suites via pytest."""
    repo_root = Path.cwd()
    command = [sys.executable, "-m", "pytest"]
    targets: list[str] = []

    root_tests = repo_root / "tests"
    if root_tests.exists():
        targets.append(str(root_tests))
    else:
        typer.echo("Warning: `tests/` directory not found relative to current working directory.", err=True)

    bench_dir = repo_root / "benchmarks"
    if include_benchmarks and bench_dir.exists():
        targets.append(str(bench_dir))
        command.append("--benchmark-disable")
    elif include_benchmarks:
        typer.echo("Skipping benchmarks because the directory is missing.", err=True)

    command.extend(targets)
    if pytest_args:
        command.extend(pytest_args)

    typer.echo(f"Running pytest via: {' '.join(command)}")
    outcome = subprocess.run(command, cwd=repo_root)
    raise typer.Exit(outcome.returncode)


def app_main():
    app()

if __name__ == "__main__":
    app_main()
