from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from core.config import AppSettings, get_user_env_file, load_settings, write_user_env_vars


def test_settings_defaults() -> None:
    settings = AppSettings(_env_file=None)

    assert settings.bazel_executable is None
    assert settings.pub_executable is None
    assert settings.strict_package_check is False
    assert settings.log_level == "WARNING"


def test_settings_read_prefixed_env(monkeypatch) -> None:
    monkeypatch.setenv("BAZELIFY_BAZEL_EXECUTABLE", "/opt/bazel")
    monkeypatch.setenv("BAZELIFY_STRICT_PACKAGE_CHECK", "true")

    settings = AppSettings(_env_file=None)

    assert settings.bazel_executable == "/opt/bazel"
    assert settings.strict_package_check is True


def test_user_env_file_follows_xdg(tmp_path: Path) -> None:
    assert get_user_env_file() == tmp_path / "xdg" / "bazelify" / ".env"


def test_write_user_env_vars_merges(tmp_path: Path) -> None:
    env_path = tmp_path / "cfg" / ".env"
    env_path.parent.mkdir(parents=True)
    env_path.write_text("# comment\nBAZELIFY_LOG_LEVEL=DEBUG\nBAZELIFY_PUB_EXECUTABLE='/old/pub'\n", encoding="utf-8")

    write_user_env_vars({"BAZELIFY_PUB_EXECUTABLE": "/new/pub"}, env_path=env_path)

    lines = env_path.read_text(encoding="utf-8").splitlines()
    assert lines[0].startswith("#")
    assert 'BAZELIFY_LOG_LEVEL="DEBUG"' in lines
    assert 'BAZELIFY_PUB_EXECUTABLE="/new/pub"' in lines


def test_log_level_is_uppercased(monkeypatch) -> None:
    monkeypatch.setenv("BAZELIFY_LOG_LEVEL", "debug")

    assert AppSettings(_env_file=None).log_level == "DEBUG"


def test_unknown_log_level_is_rejected(monkeypatch) -> None:
    monkeypatch.setenv("BAZELIFY_LOG_LEVEL", "verbose")

    with pytest.raises(ValidationError):
        AppSettings(_env_file=None)


def test_empty_executable_setting_means_unset(monkeypatch) -> None:
    monkeypatch.setenv("BAZELIFY_BAZEL_EXECUTABLE", "")
    monkeypatch.setenv("BAZELIFY_PUB_EXECUTABLE", "   ")

    settings = AppSettings(_env_file=None)

    assert settings.bazel_executable is None
    assert settings.pub_executable is None


def test_load_settings_reads_user_env_written_after_import(tmp_path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    write_user_env_vars(
        {
            "BAZELIFY_BAZEL_EXECUTABLE": "/opt/my #tools/bazel",
            "BAZELIFY_PUB_EXECUTABLE": 'C:\\dart\\bin\\"pub".bat',
        }
    )

    settings = load_settings()

    assert settings.bazel_executable == "/opt/my #tools/bazel"
    assert settings.pub_executable == 'C:\\dart\\bin\\"pub".bat'


def test_write_user_env_vars_round_trips_quoted_values(tmp_path: Path) -> None:
    env_path = tmp_path / ".env"
    write_user_env_vars({"BAZELIFY_PUB_EXECUTABLE": '/a "b" #c'}, env_path=env_path)
    write_user_env_vars({"BAZELIFY_LOG_LEVEL": "INFO"}, env_path=env_path)

    lines = env_path.read_text(encoding="utf-8").splitlines()
    assert 'BAZELIFY_PUB_EXECUTABLE="/a \\"b\\" #c"' in lines
