"""Contrato de acceso al sistema (PATH + ficheros).

The resolver only needs four capabilities from the host. Keeping them behind a
`Protocol` lets tests substitute an in-memory fake.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class SystemProbe(Protocol):
    """Minimal host capabilities used during resolution.

    - `which` and `is_file` are async because they touch the filesystem.
    - `absolute` and `join` are pure string transforms.
    """

    async def which(self, name: str) -> str | None:
        """Locate `name` on the search path, or `None` when it is not there."""

        ...

    async def is_file(self, path: str) -> bool:
        """True iff `path` names an existing regular file. Never raises for missing paths."""

        ...

    def absolute(self, path: str) -> str:
        ...

    def join(self, base: str, name: str) -> str:
        ...
