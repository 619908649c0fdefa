"""Version listing and deletion commands."""

from __future__ import annotations

import logging
from typing import Annotated, NoReturn

import typer
from rich.console import Console

from ghcr_cli.core.errors import GhcrCliError, HelperNotFoundError
from ghcr_cli.core.ports.registry import RegistryClient
from ghcr_cli.core.versions import (
    confirmation_prompt,
    is_confirmed,
    list_output_versions,
    render_versions_json,
    resolve_package,
)
from ghcr_cli.gh import GhApiClient, gh_available

logger = logging.getLogger(__name__)
console = Console()
err_console = Console(stderr=True)


def _get_client() -> RegistryClient:
    if not gh_available():
        raise HelperNotFoundError("GitHub CLI (gh) is not installed or not in PATH. Please install it and try again")
    return GhApiClient()


def _fail(exc: GhcrCliError) -> NoReturn:
    logger.debug("Command failed", exc_info=exc)
    err_console.print(str(exc), style="red", markup=False, highlight=False, soft_wrap=True)
    raise typer.Exit(1) from exc


def _read_confirmation(package_name: str, version_id: int) -> bool:
    try:
        response = console.input(confirmation_prompt(package_name, version_id), markup=False)
    except EOFError:
        console.print()
        return False
    return is_confirmed(response)


def list_versions(
    owner_repo: Annotated[str, typer.Argument(metavar="OWNER/REPO", help="Repository the package is linked to.")],
) -> None:
    """List Docker images in GitHub Container Registry."""
    try:
        versions = list_output_versions(_get_client(), owner_repo)
    except GhcrCliError as exc:
        _fail(exc)
    typer.echo(render_versions_json(versions))


def delete(
    owner_repo: Annotated[str, typer.Argument(metavar="OWNER/REPO", help="Repository the package is linked to.")],
    version_id: Annotated[int, typer.Argument(help="Numeric id of the version to delete.")],
    yes: Annotated[bool, typer.Option("--yes", "-y", help="Skip the confirmation prompt.")] = False,
) -> None:
    """Delete a Docker image version from GitHub Container Registry."""
    try:
        client = _get_client()
        package_name = resolve_package(client, owner_repo)

        if not yes and not _read_confirmation(package_name, version_id):
            console.print("Deletion cancelled.", highlight=False, soft_wrap=True)
            return

        client.delete_version(package_name, version_id)
    except GhcrCliError as exc:
        _fail(exc)
    console.print(
        f"Successfully deleted image {package_name} version {version_id}",
        markup=False,
        highlight=False,
        soft_wrap=True,
    )
