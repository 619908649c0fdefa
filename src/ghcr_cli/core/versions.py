import json
from collections.abc import Sequence

from ghcr_cli.core.owner_repo import parse_owner_repo
from ghcr_cli.core.ports.registry import RegistryClient
from ghcr_cli.models import OutputVersion

_CONFIRM_ANSWERS = frozenset({"y", "yes"})


def resolve_package(client: RegistryClient, owner_repo: str) -> str:
    owner, repo = parse_owner_repo(owner_repo)
    return client.resolve_package_name(owner, repo)


def list_output_versions(client: RegistryClient, owner_repo: str) -> list[OutputVersion]:
    """Resolve *owner_repo* to its package and tag every version with the package name."""
    package_name = resolve_package(client, owner_repo)
    return [
        OutputVersion(package=package_name, name=version.name, id=version.id)
        for version in client.list_versions(package_name)
    ]


def render_versions_json(versions: Sequence[OutputVersion]) -> str:
    return json.dumps([v.model_dump() for v in versions], indent=2)


def is_confirmed(response: str) -> bool:
    return response.strip().lower() in _CONFIRM_ANSWERS


def confirmation_prompt(package_name: str, version_id: int) -> str:
    return f"Are you sure you want to delete image {package_name} version {version_id}? (y/N): "
