"""Esquema de argumentos de `bazelify`.

The schema is a plain value built by `build_schema()` on each call and passed
explicitly to `parse_arguments`/`get_usage`; nothing is shared between parses.
"""

from __future__ import annotations

import importlib
from types import ModuleType
from typing import Optional, Sequence

import typer

from core.config import AppSettings, load_settings
from core.domain.models import ResolutionRequest
from core.errors import ArgumentInvalid

PROG_NAME = "bazelify"


def bazel_option() -> typer.models.OptionInfo:
    return typer.Option(None, "--bazel", metavar="PATH", help='A path to the "bazel" executable.')


def pub_option() -> typer.models.OptionInfo:
    return typer.Option(None, "--pub", metavar="PATH", help='A path to the "pub" executable.')


def package_option() -> typer.models.OptionInfo:
    return typer.Option(
        None,
        "--package",
        "-p",
        metavar="DIR",
        help='A directory where "pubspec.yaml" is present.',
    )


def settings_from_context(ctx: typer.Context) -> AppSettings:
    """Settings loaded by the root callback, or freshly loaded when run standalone."""

    if isinstance(ctx.obj, AppSettings):
        return ctx.obj
    return load_settings()


def request_from_options(
    *,
    bazel: str | None,
    pub: str | None,
    package: str | None,
    settings: AppSettings | None = None,
) -> ResolutionRequest:
    """Build a `ResolutionRequest`, rejecting a missing `--package`.

    With `settings`, executables not given on the command line fall back to the
    configured paths before the search path.
    """

    if package is None:
        raise ArgumentInvalid("package", 'missing required option "--package"')
    for name, value in (("bazel", bazel), ("pub", pub)):
        if value == "":
            raise ArgumentInvalid(name, f'empty path given for "--{name}"')
    if settings is not None:
        bazel = bazel if bazel is not None else settings.bazel_executable
        pub = pub if pub is not None else settings.pub_executable
    return ResolutionRequest.from_options(
        bazel_executable=bazel,
        pub_executable=pub,
        package_dir=package,
    )


def build_schema() -> typer.Typer:
    """Return a fresh argument schema for `bazelify`."""

    schema = typer.Typer(add_completion=False, help="Adds Bazel support on top of pub.")

    @schema.command(name=PROG_NAME)
    def _parse(
        bazel: Optional[str] = bazel_option(),
        pub: Optional[str] = pub_option(),
        package: Optional[str] = package_option(),
    ) -> ResolutionRequest:
        return request_from_options(bazel=bazel, pub=pub, package=package)

    return schema


def _click_submodule(command: object, name: str) -> ModuleType:
    """Return `<click package>.<name>` for the click copy that built `command`.

    Recent Typer releases ship their own click under `typer._click`; exceptions
    and contexts must come from that same copy.
    """

    for klass in type(command).__mro__:
        module = klass.__module__
        if klass.__name__ == "Command" and module.endswith(".core"):
            return importlib.import_module(f"{module.rsplit('.', 1)[0]}.{name}")
    raise TypeError(f"{command!r} is not a click command")


def parse_arguments(argv: Sequence[str], schema: typer.Typer | None = None) -> ResolutionRequest:
    """Parse `argv` into a `ResolutionRequest`.

    Raises `ArgumentInvalid` if an argument is invalid or missing.
    """

    command = typer.main.get_command(schema or build_schema())
    usage_error = _click_submodule(command, "exceptions").UsageError
    try:
        result = command.main(args=list(argv), prog_name=PROG_NAME, standalone_mode=False)
    except usage_error as exc:
        name = getattr(exc, "option_name", None) or "arguments"
        raise ArgumentInvalid(name, exc.format_message()) from exc

    if not isinstance(result, ResolutionRequest):
        # --help exits early with a status code instead of a request.
        raise ArgumentInvalid("help", "help requested; no arguments were parsed")
    return result


def get_usage(schema: typer.Typer | None = None) -> str:
    """Returns the proper usage for arguments."""

    command = typer.main.get_command(schema or build_schema())
    ctx = _click_submodule(command, "core").Context(command, info_name=PROG_NAME)
    formatter = ctx.make_formatter()
    formatter.write_usage(PROG_NAME, " ".join(command.collect_usage_pieces(ctx)))

    records = []
    for param in command.get_params(ctx):
        record = param.get_help_record(ctx)
        if record is not None:
            records.append(record)
    if records:
        with formatter.section("Options"):
            formatter.write_dl(records)
    return formatter.getvalue()
