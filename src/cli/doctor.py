"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio
from typing import Optional

import typer
from rich.console import Console

from adapters.local_system import LocalSystem
from cli.arguments import (
    bazel_option,
    package_option,
    pub_option,
    request_from_options,
    settings_from_context,
)
from cli.ui_components import build_status_table, print_error
from core.config import write_user_env_vars
from core.errors import ArgumentInvalid, BazelifyError
from core.services.argument_resolver import diagnose, resolve

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()
_err_console = Console(stderr=True)


@app.command()
def check(
    ctx: typer.Context,
    bazel: Optional[str] = bazel_option(),
    pub: Optional[str] = pub_option(),
    package: Optional[str] = package_option(),
) -> None:
    """Run every check and report all failures at once."""

    try:
        request = request_from_options(
            bazel=bazel, pub=pub, package=package, settings=settings_from_context(ctx)
        )
    except ArgumentInvalid as exc:
        print_error(_err_console, exc)
        raise typer.Exit(code=2) from exc

    statuses = asyncio.run(diagnose(request))
    _console.print(build_status_table(statuses))

    if not all(status.ok for status in statuses):
        raise typer.Exit(code=1)


@app.command()
def pin(
    ctx: typer.Context,
    bazel: Optional[str] = bazel_option(),
    pub: Optional[str] = pub_option(),
    package: Optional[str] = package_option(),
) -> None:
    """Resolve the executables and store their paths in the user config .env.

    Later runs pick them up through `AppSettings` instead of searching the PATH.
    """

    settings = settings_from_context(ctx)
    system = LocalSystem()
    try:
        request = request_from_options(bazel=bazel, pub=pub, package=package, settings=settings)
        config = asyncio.run(resolve(request, system=system, strict_package_check=True))
    except ArgumentInvalid as exc:
        print_error(_err_console, exc)
        raise typer.Exit(code=2) from exc
    except BazelifyError as exc:
        print_error(_err_console, exc)
        raise typer.Exit(code=1) from exc

    env_path = write_user_env_vars(
        {
            "BAZELIFY_BAZEL_EXECUTABLE": system.absolute(config.bazel_executable),
            "BAZELIFY_PUB_EXECUTABLE": system.absolute(config.pub_executable),
        }
    )
    _console.print(f"[green]Saved executable paths to:[/green] {env_path}", soft_wrap=True)
