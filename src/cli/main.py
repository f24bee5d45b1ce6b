"""Punto de entrada de la CLI (Typer).

Comandos:
- `resolve`: resuelve `bazel`, `pub` y el directorio del paquete.
- `doctor`: diagnóstico del entorno (ver `cli/doctor.py`).
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console

from adapters.json_exporter import export_config_json, render_config_json
from cli import doctor
from cli.arguments import (
    bazel_option,
    package_option,
    pub_option,
    request_from_options,
    settings_from_context,
)
from cli.logging_setup import configure_logging
from cli.ui_components import build_config_table, print_error
from core.config import load_settings
from core.errors import ArgumentInvalid, BazelifyError
from core.services.argument_resolver import resolve as resolve_request

app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help="Adds Bazel support on top of pub.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)

EXIT_RESOLUTION_ERROR = 1
EXIT_ARGUMENT_ERROR = 2


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging."),
) -> None:
    try:
        settings = load_settings()
    except ValidationError as exc:
        print_error(_err_console, exc)
        raise typer.Exit(code=EXIT_ARGUMENT_ERROR) from exc
    ctx.obj = settings
    configure_logging("DEBUG" if verbose else settings.log_level)


@app.command()
def resolve(
    ctx: typer.Context,
    bazel: Optional[str] = bazel_option(),
    pub: Optional[str] = pub_option(),
    package: Optional[str] = package_option(),
    as_json: bool = typer.Option(False, "--json", help="Print the resolved configuration as JSON."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Also write the JSON to this file."),
) -> None:
    """Resolve the "bazel" and "pub" executables and validate the package."""

    settings = settings_from_context(ctx)
    try:
        request = request_from_options(bazel=bazel, pub=pub, package=package, settings=settings)
        config = asyncio.run(
            resolve_request(request, strict_package_check=settings.strict_package_check)
        )
    except ArgumentInvalid as exc:
        print_error(_err_console, exc)
        raise typer.Exit(code=EXIT_ARGUMENT_ERROR) from exc
    except BazelifyError as exc:
        print_error(_err_console, exc)
        raise typer.Exit(code=EXIT_RESOLUTION_ERROR) from exc

    if output is not None:
        export_config_json(config=config, output_path=output)

    if as_json:
        typer.echo(render_config_json(config), nl=False)
    else:
        _console.print(build_config_table(config))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
