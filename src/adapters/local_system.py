"""Adaptador del sistema local (PATH + sistema de ficheros).

Implementa `SystemProbe` sobre la librería estándar. Las llamadas bloqueantes
se ejecutan con `asyncio.to_thread` para no bloquear el event loop.
"""

from __future__ import annotations

import asyncio
import os
import shutil


class LocalSystem:
    """`SystemProbe` backed by the current process environment.

    `search_path` overrides `$PATH` for lookups (useful in tests and CI).
    """

    def __init__(self, *, search_path: str | None = None) -> None:
        self._search_path = search_path

    async def which(self, name: str) -> str | None:
        return await asyncio.to_thread(shutil.which, name, path=self._search_path)

    async def is_file(self, path: str) -> bool:
        # os.path.isfile swallows OSError (missing path, bad permissions).
        return await asyncio.to_thread(os.path.isfile, path)

    def absolute(self, path: str) -> str:
        return os.path.abspath(path)

    def join(self, base: str, name: str) -> str:
        return os.path.join(base, name)
