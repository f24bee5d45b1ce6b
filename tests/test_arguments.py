from __future__ import annotations

import pytest

from cli.arguments import build_schema, get_usage, parse_arguments, request_from_options
from core.config import AppSettings
from core.errors import ArgumentInvalid


def test_parse_package_only() -> None:
    request = parse_arguments(["--package", "foo"])

    assert request.package_dir == "foo"
    assert request.bazel_executable is None
    assert request.pub_executable is None


def test_parse_short_package_flag_and_executables() -> None:
    request = parse_arguments(["--bazel", "/opt/bazel", "--pub", "/opt/pub", "-p", "pkg"])

    assert request.bazel_executable == "/opt/bazel"
    assert request.pub_executable == "/opt/pub"
    assert request.package_dir == "pkg"


def test_parse_without_package_fails() -> None:
    with pytest.raises(ArgumentInvalid) as excinfo:
        parse_arguments([])

    assert excinfo.value.argument == "package"


def test_parse_unknown_option_fails() -> None:
    with pytest.raises(ArgumentInvalid):
        parse_arguments(["--package", "foo", "--frobnicate"])


def test_parse_option_without_value_fails() -> None:
    with pytest.raises(ArgumentInvalid):
        parse_arguments(["--package"])


def test_schemas_are_independent() -> None:
    schema = build_schema()

    first = parse_arguments(["-p", "a", "--bazel", "/b"], schema)
    second = parse_arguments(["-p", "b"], schema)

    assert first.bazel_executable == "/b"
    assert second.bazel_executable is None
    assert build_schema() is not schema


def test_usage_lists_every_option() -> None:
    usage = get_usage()

    assert "--bazel" in usage
    assert "--pub" in usage
    assert "--package" in usage
    assert "-p" in usage
    assert "pubspec.yaml" in usage


def test_settings_fill_missing_executables_only() -> None:
    settings = AppSettings(bazel_executable="/cfg/bazel", pub_executable="/cfg/pub")

    request = request_from_options(bazel="/cli/bazel", pub=None, package="pkg", settings=settings)

    assert request.bazel_executable == "/cli/bazel"
    assert request.pub_executable == "/cfg/pub"


def test_parse_help_fails() -> None:
    with pytest.raises(ArgumentInvalid) as excinfo:
        parse_arguments(["--help"])

    assert excinfo.value.argument == "help"


@pytest.mark.parametrize("argv", [["--bazel", "", "-p", "pkg"], ["--pub", "", "-p", "pkg"]])
def test_parse_empty_executable_fails(argv: list[str]) -> None:
    with pytest.raises(ArgumentInvalid):
        parse_arguments(argv)


def test_empty_explicit_path_rejected_before_settings() -> None:
    settings = AppSettings(bazel_executable="/cfg/bazel")

    with pytest.raises(ArgumentInvalid) as excinfo:
        request_from_options(bazel="", pub="/p", package="pkg", settings=settings)

    assert excinfo.value.argument == "bazel"
