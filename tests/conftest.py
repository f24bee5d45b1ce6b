"""Shared fixtures: an in-memory `SystemProbe` and a clean environment."""

from __future__ import annotations

import posixpath

import pytest


class FakeSystem:
    """`SystemProbe` backed by a set of file paths and a name->path mapping."""

    def __init__(
        self,
        *,
        files: set[str] | None = None,
        on_path: dict[str, str] | None = None,
        cwd: str = "/work",
    ) -> None:
        self.files = set(files or ())
        self.on_path = dict(on_path or {})
        self.cwd = cwd
        self.is_file_calls: list[str] = []
        self.which_calls: list[str] = []

    async def which(self, name: str) -> str | None:
        self.which_calls.append(name)
        return self.on_path.get(name)

    async def is_file(self, path: str) -> bool:
        self.is_file_calls.append(path)
        return path in self.files

    def absolute(self, path: str) -> str:
        return posixpath.normpath(posixpath.join(self.cwd, path))

    def join(self, base: str, name: str) -> str:
        return posixpath.join(base, name)


@pytest.fixture
def fake_system() -> FakeSystem:
    return FakeSystem(
        files={"/opt/bazel/bin/bazel", "/opt/dart/bin/pub", "pkg/pubspec.yaml"},
        on_path={"bazel": "/usr/bin/bazel", "pub": "/usr/lib/dart/bin/pub"},
    )


@pytest.fixture(autouse=True)
def _bazelify_env_defaults(monkeypatch, tmp_path):
    """Keep user config and BAZELIFY_* variables out of the tests."""

    for name in (
        "BAZELIFY_BAZEL_EXECUTABLE",
        "BAZELIFY_PUB_EXECUTABLE",
        "BAZELIFY_STRICT_PACKAGE_CHECK",
        "BAZELIFY_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))


@pytest.fixture
def make_system():
    return FakeSystem
