from __future__ import annotations

import json
from typing import List, Optional

import typer

from seqalgs import config as sa_config
from seqalgs.logging import get_logger

from .harness import CHECKS, run_selftest

LOGGER = get_logger("cli")

_HELP = """Generic sequence algorithms command line interface.

Subcommands run the narrated self-test harness and describe the runtime."""

app = typer.Typer(
    add_completion=False,
    pretty_exceptions_enable=False,
    context_settings={"help_option_names": ["-h", "--help"]},
    help=_HELP,
)


@app.callback()
def seqalgs_callback() -> None:
    """Root callback reserved for shared options (none yet)."""
    pass


@app.command("selftest")
def selftest(
    backend: Optional[str] = typer.Option(
        None, "--backend", help="Fixture container kind: list or numpy (default from SEQALGS_BACKEND)."
    ),
    only: Optional[List[str]] = typer.Option(
        None, "--only", help="Run only the named checks; repeat to select several."
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for random sweeps."),
    sweeps: int = typer.Option(0, "--sweeps", min=0, help="Number of random property sweeps."),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress per-check narration."),
) -> None:
    """Run the algorithm checks with console narration."""

    if backend is not None and backend not in sa_config.SUPPORTED_BACKENDS:
        raise typer.BadParameter(
            f"Unsupported backend '{backend}'. Expected one of {sorted(sa_config.SUPPORTED_BACKENDS)}.",
            param_hint="--backend",
        )
    if only:
        unknown = [name for name in only if name not in CHECKS]
        if unknown:
            raise typer.BadParameter(
                f"Unknown checks {unknown}. Expected names from {list(CHECKS)}.",
                param_hint="--only",
            )

    typer.echo("Running the test suite for seqalgs...")
    narrate = None if quiet else typer.echo
    results = run_selftest(only, backend=backend, sweeps=sweeps, seed=seed, narrate=narrate)

    failures = [result for result in results if not result.passed]
    for failure in failures:
        typer.echo(f"FAILED {failure.name}: {failure.detail}", err=True)
    if failures:
        LOGGER.debug("%d of %d checks failed", len(failures), len(results))
        raise typer.Exit(code=1)
    typer.echo(f"All {len(results)} checks passed!")


@app.command("describe")
def describe(
    output_format: str = typer.Option("text", "--format", help="Output format: text or json."),
) -> None:
    """Print the active runtime configuration."""

    try:
        snapshot = sa_config.describe_runtime()
    except ValueError as exc:
        typer.echo(f"Invalid runtime configuration: {exc}", err=True)
        raise typer.Exit(code=2) from exc
    if output_format == "json":
        typer.echo(json.dumps(snapshot, indent=2, sort_keys=True))
        return
    if output_format != "text":
        raise typer.BadParameter("Expected 'text' or 'json'.", param_hint="--format")
    for key, value in snapshot.items():
        typer.echo(f"{key}: {value}")


def main() -> None:
    app()


__all__ = ["app", "main"]
