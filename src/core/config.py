"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite fijar rutas de `bazel`/`pub` por usuario (`doctor pin`) sin tener
  que pasar `--bazel`/`--pub` en cada invocación.
"""

from __future__ import annotations

import os
import re
import sys
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "bazelify"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "bazelify"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "bazelify"
    return Path.home() / ".config" / "bazelify"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _quote_env_value(value: str) -> str:
    # Comillas dobles: python-dotenv no corta en " #" dentro de un valor entrecomillado.
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _unquote_env_value(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] == '"':
        return re.sub(r'\\(["\\])', r"\1", value[1:-1])
    if len(value) >= 2 and value[0] == value[-1] == "'":
        return value[1:-1]
    return value


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        if key:
            data[key] = _unquote_env_value(value.strip())
    return data


def write_user_env_vars(values: dict[str, str], *, env_path: Path | None = None) -> Path:
    """Escribe/actualiza variables en el .env global del usuario."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# bazelify user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={_quote_env_value(existing[key])}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Explicit CLI flags always win over these values; these win over the
    search-path lookup. Use `load_settings()` to also read the per-user `.env`.
    """

    model_config = SettingsConfigDict(
        env_prefix="BAZELIFY_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    bazel_executable: str | None = Field(
        default=None,
        description='Ruta por defecto al ejecutable "bazel" (si no, se busca en el PATH).',
    )
    pub_executable: str | None = Field(
        default=None,
        description='Ruta por defecto al ejecutable "pub" (si no, se busca en el PATH).',
    )
    strict_package_check: bool = Field(
        default=False,
        description="Validar pubspec.yaml incluso cuando ambos ejecutables son explícitos.",
    )
    log_level: LogLevel = Field(
        default="WARNING",
        description="Nivel de logging (DEBUG, INFO, WARNING, ERROR, CRITICAL).",
    )

    @field_validator("bazel_executable", "pub_executable", mode="before")
    @classmethod
    def _empty_path_is_unset(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value


def load_settings() -> AppSettings:
    """Load settings from the environment, `./.env` and the user `.env`.

    The user file is located at call time so `XDG_CONFIG_HOME` changes are seen.
    """

    # Orden: proyecto primero, luego config global de usuario.
    return AppSettings(_env_file=(".env", get_user_env_file()))
