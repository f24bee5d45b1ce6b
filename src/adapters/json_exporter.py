"""Exportación JSON de la configuración resuelta.

Por qué JSON:
- Permite que scripts de build consuman las rutas resueltas sin parsear tablas.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.models import ResolvedConfig


def render_config_json(config: ResolvedConfig) -> str:
    """Serializa `ResolvedConfig` a JSON UTF-8 con formato estable."""

    payload = config.model_dump(mode="json")
    return json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n"


def export_config_json(*, config: ResolvedConfig, output_path: Path) -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(render_config_json(config), encoding="utf-8")
    return output_path
