"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Validación en el borde y modelos inmutables (`frozen=True`) sin acoplar el
  Core a la CLI ni al sistema de ficheros.
- Serialización directa a JSON para la salida `--json`.

Nota:
- Estos modelos describen *qué* se resuelve, no *cómo* se busca en el PATH.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

BAZEL = "bazel"
PUB = "pub"
PUBSPEC_FILENAME = "pubspec.yaml"


class ExplicitExecutable(BaseModel):
    """An executable path given by the user; it must name a regular file."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["explicit"] = "explicit"
    path: str = Field(
        ...,
        min_length=1,
        description="Ruta al ejecutable tal y como la escribió el usuario.",
    )


class SearchPathExecutable(BaseModel):
    """No path was given: look the program up on the search path by name."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["search_path"] = "search_path"
    name: str = Field(
        ...,
        min_length=1,
        description="Nombre del programa a buscar en el PATH.",
    )


ExecutableSource = Annotated[
    Union[ExplicitExecutable, SearchPathExecutable],
    Field(discriminator="kind"),
]


def executable_source(path: str | None, *, name: str) -> ExplicitExecutable | SearchPathExecutable:
    """Map the nullable CLI value to the sum type (`None` -> search path)."""

    if path is None:
        return SearchPathExecutable(name=name)
    return ExplicitExecutable(path=path)


class ResolutionRequest(BaseModel):
    """Parsed command-line input, before anything is looked up.

    Built once from the CLI; `resolve` derives a `ResolvedConfig` from it.
    """

    model_config = ConfigDict(frozen=True)

    bazel: ExecutableSource = Field(
        default_factory=lambda: SearchPathExecutable(name=BAZEL),
        description="Dónde encontrar `bazel`. Por defecto, en el PATH.",
    )
    pub: ExecutableSource = Field(
        default_factory=lambda: SearchPathExecutable(name=PUB),
        description="Dónde encontrar `pub`. Por defecto, en el PATH.",
    )
    package_dir: str = Field(
        ...,
        description="Directorio donde está `pubspec.yaml`. Obligatorio.",
    )

    @classmethod
    def from_options(
        cls,
        *,
        bazel_executable: str | None = None,
        pub_executable: str | None = None,
        package_dir: str,
    ) -> "ResolutionRequest":
        return cls(
            bazel=executable_source(bazel_executable, name=BAZEL),
            pub=executable_source(pub_executable, name=PUB),
            package_dir=package_dir,
        )

    @property
    def bazel_executable(self) -> str | None:
        """Explicit `bazel` path, or `None` when it defaults to the PATH."""

        return self.bazel.path if isinstance(self.bazel, ExplicitExecutable) else None

    @property
    def pub_executable(self) -> str | None:
        """Explicit `pub` path, or `None` when it defaults to the PATH."""

        return self.pub.path if isinstance(self.pub, ExplicitExecutable) else None


class ResolvedConfig(BaseModel):
    """Fully resolved configuration.

    Both executables pointed to existing files at resolution time; the fields
    are returned exactly as they were constructed.
    """

    model_config = ConfigDict(frozen=True)

    bazel_executable: str = Field(
        ...,
        min_length=1,
        description="Ruta (absoluta o relativa al PATH) al ejecutable `bazel`.",
    )
    pub_executable: str = Field(
        ...,
        min_length=1,
        description="Ruta (absoluta o relativa al PATH) al ejecutable `pub`.",
    )
    package_dir: str = Field(
        ...,
        description="Directorio del paquete, sin modificar respecto a la petición.",
    )


class ToolStatus(BaseModel):
    """Outcome of a single check reported by `doctor`."""

    model_config = ConfigDict(frozen=True)

    name: str
    ok: bool
    detail: str = ""
