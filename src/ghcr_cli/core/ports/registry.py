from typing import Protocol

from ghcr_cli.models import Version


class RegistryClient(Protocol):
    def resolve_package_name(self, owner: str, repo: str) -> str: ...

    def list_versions(self, name: str) -> list[Version]: ...

    def delete_version(self, name: str, version_id: int) -> None: ...
