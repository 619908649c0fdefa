"""Registry access through the authenticated GitHub CLI (``gh api``)."""

from __future__ import annotations

import logging
import shutil
import subprocess
from typing import TypeVar

from pydantic import TypeAdapter, ValidationError

from ghcr_cli.config import (
    ACCEPT_HEADER,
    API_VERSION_HEADER,
    GH_BINARY,
    PACKAGES_PATH,
    VERSION_PATH,
    VERSIONS_PATH,
)
from ghcr_cli.core.errors import (
    PackageNotFoundError,
    RegistryCommandError,
    RegistryResponseError,
)
from ghcr_cli.models import Package, Version

logger = logging.getLogger(__name__)

_PACKAGES = TypeAdapter(list[Package] | None)
_VERSIONS = TypeAdapter(list[Version] | None)

_T = TypeVar("_T")


def gh_available() -> bool:
    return shutil.which(GH_BINARY) is not None


def run_gh_api(path: str, method: str | None = None) -> tuple[int, str]:
    """Run ``gh api`` against *path* and return (exit status, combined stdout/stderr).

    Raises RegistryCommandError when the process cannot be started at all.
    """
    args = [GH_BINARY, "api", "-H", ACCEPT_HEADER, "-H", API_VERSION_HEADER]
    if method is not None:
        args += ["-X", method]
    args.append(path)

    logger.debug("Running %s", " ".join(args))
    try:
        result = subprocess.run(
            args,
            check=False,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            encoding="utf-8",
            errors="replace",
        )
    except OSError as exc:
        raise RegistryCommandError(f"error running {GH_BINARY}: {exc}") from exc
    logger.debug("%s exited with status %d", GH_BINARY, result.returncode)
    return result.returncode, result.stdout or ""


class GhApiClient:
    """Implements the ``RegistryClient`` protocol on top of ``gh api``."""

    def resolve_package_name(self, owner: str, repo: str) -> str:
        returncode, output = run_gh_api(PACKAGES_PATH)
        if returncode != 0:
            raise RegistryCommandError(f"error listing packages: exit status {returncode}", output)
        packages = _decode(_PACKAGES, output)

        full_name = f"{owner}/{repo}"
        for package in packages:
            if package.repository is not None and package.repository.full_name == full_name:
                logger.debug("Resolved %s to package %s", full_name, package.name)
                return package.name
        raise PackageNotFoundError(f"package not found for {full_name}")

    def list_versions(self, name: str) -> list[Version]:
        returncode, output = run_gh_api(VERSIONS_PATH.format(name=name))
        if returncode != 0:
            raise RegistryCommandError(f"error getting versions: exit status {returncode}", output)
        return _decode(_VERSIONS, output)

    def delete_version(self, name: str, version_id: int) -> None:
        returncode, output = run_gh_api(VERSION_PATH.format(name=name, version_id=version_id), method="DELETE")
        if returncode != 0:
            raise RegistryCommandError(f"error deleting version: exit status {returncode}", output)


def _decode(adapter: TypeAdapter[list[_T] | None], output: str) -> list[_T]:
    # a JSON null body decodes to no records
    try:
        return adapter.validate_json(output) or []
    except ValidationError as exc:
        raise RegistryResponseError(f"error parsing JSON: {exc}") from exc
