"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas en `resolve` y `doctor`.
"""

from __future__ import annotations

from typing import Iterable

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from core.domain.models import ResolvedConfig, ToolStatus


def print_error(console: Console, exc: Exception) -> None:
    """Print a one-line error without wrapping long paths."""

    console.print(f"[red]Error:[/red] {escape(str(exc))}", soft_wrap=True)


def build_config_table(config: ResolvedConfig) -> Table:
    """Tabla con la configuración resuelta."""

    table = Table(title="bazelify")
    table.add_column("Setting", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    table.add_row("bazel", config.bazel_executable)
    table.add_row("pub", config.pub_executable)
    table.add_row("package", config.package_dir)
    return table


def build_status_table(statuses: Iterable[ToolStatus]) -> Table:
    """Tabla de diagnóstico para `doctor check`."""

    table = Table(title="bazelify doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    for status in statuses:
        table.add_row(status.name, "OK" if status.ok else "[red]FAIL[/red]", escape(status.detail))
    return table
