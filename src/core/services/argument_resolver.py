"""Resolution of `bazelify` arguments.

Turns a `ResolutionRequest` into a `ResolvedConfig`: executables given by
name are looked up on the search path, explicit paths are checked to be
regular files, and the package directory must contain `pubspec.yaml`.

Every failure is terminal. Checks run one after another and the first one
that fails aborts the whole operation; no partial result is returned.
"""

from __future__ import annotations

import logging

from adapters.local_system import LocalSystem
from core.domain.models import (
    PUBSPEC_FILENAME,
    ExplicitExecutable,
    ResolutionRequest,
    ResolvedConfig,
    SearchPathExecutable,
    ToolStatus,
)
from core.errors import BazelifyError, ExecutableNotFound, ExecutableUnresolvable, PubspecMissing
from core.interfaces.system import SystemProbe

logger = logging.getLogger(__name__)


def is_resolved(request: ResolutionRequest) -> bool:
    """Whether both executables were given explicitly.

    If `False`, use `resolve` to find them on the search path.
    """

    return isinstance(request.bazel, ExplicitExecutable) and isinstance(request.pub, ExplicitExecutable)


async def resolve_executable(
    source: ExplicitExecutable | SearchPathExecutable,
    *,
    name: str,
    system: SystemProbe,
) -> str:
    """Resolve a single executable source to a path."""

    if isinstance(source, SearchPathExecutable):
        found = await system.which(source.name)
        if not found:
            raise ExecutableUnresolvable(source.name)
        logger.debug("Found %s on search path at %s", source.name, found)
        return found

    if not await system.is_file(source.path):
        raise ExecutableNotFound(name, source.path)
    logger.debug("Using explicit %s at %s", name, source.path)
    return source.path


async def check_pubspec(package_dir: str, *, system: SystemProbe) -> str:
    """Return the joined `pubspec.yaml` path, or raise `PubspecMissing`.

    The error carries the absolute path even when `package_dir` is relative.
    """

    pubspec = system.join(package_dir, PUBSPEC_FILENAME)
    if not await system.is_file(pubspec):
        raise PubspecMissing(system.absolute(pubspec))
    return pubspec


async def resolve(
    request: ResolutionRequest,
    *,
    system: SystemProbe | None = None,
    strict_package_check: bool = False,
) -> ResolvedConfig:
    """Resolve `request` into a `ResolvedConfig`.

    When both executables are explicit the request is returned as-is without
    touching the filesystem for them. The package directory is then only
    validated if `strict_package_check` is set.
    """

    system = system or LocalSystem()

    if is_resolved(request):
        if strict_package_check:
            await check_pubspec(request.package_dir, system=system)
        return ResolvedConfig(
            bazel_executable=request.bazel.path,
            pub_executable=request.pub.path,
            package_dir=request.package_dir,
        )

    bazel = await resolve_executable(request.bazel, name="bazel", system=system)
    pub = await resolve_executable(request.pub, name="pub", system=system)
    await check_pubspec(request.package_dir, system=system)

    return ResolvedConfig(
        bazel_executable=bazel,
        pub_executable=pub,
        package_dir=request.package_dir,
    )


async def diagnose(
    request: ResolutionRequest,
    *,
    system: SystemProbe | None = None,
) -> list[ToolStatus]:
    """Run every check without stopping at the first failure.

    Used by `doctor` to show the whole picture in one pass.
    """

    system = system or LocalSystem()
    statuses: list[ToolStatus] = []

    for name, source in (("bazel", request.bazel), ("pub", request.pub)):
        try:
            path = await resolve_executable(source, name=name, system=system)
        except BazelifyError as exc:
            statuses.append(ToolStatus(name=name, ok=False, detail=str(exc)))
        else:
            statuses.append(ToolStatus(name=name, ok=True, detail=path))

    try:
        pubspec = await check_pubspec(request.package_dir, system=system)
    except PubspecMissing as exc:
        statuses.append(ToolStatus(name=PUBSPEC_FILENAME, ok=False, detail=str(exc)))
    else:
        statuses.append(ToolStatus(name=PUBSPEC_FILENAME, ok=True, detail=system.absolute(pubspec)))

    return statuses
