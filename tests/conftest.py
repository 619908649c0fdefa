"""Shared fixtures and helpers for tests."""

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from ghcr_cli.core.errors import PackageNotFoundError
from ghcr_cli.models import Version

_REPO_ROOT = Path(__file__).parent.parent


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Fake registry client
# ---------------------------------------------------------------------------


class FakeRegistryClient:
    """In-memory stand-in for ``GhApiClient`` that records every call."""

    def __init__(self, packages: dict[str, str], versions: list[Version]) -> None:
        self.packages = packages
        self.versions = versions
        self.calls: list[tuple[Any, ...]] = []

    def resolve_package_name(self, owner: str, repo: str) -> str:
        self.calls.append(("resolve", owner, repo))
        full_name = f"{owner}/{repo}"
        if full_name not in self.packages:
            raise PackageNotFoundError(f"package not found for {full_name}")
        return self.packages[full_name]

    def list_versions(self, name: str) -> list[Version]:
        self.calls.append(("list", name))
        return list(self.versions)

    def delete_version(self, name: str, version_id: int) -> None:
        self.calls.append(("delete", name, version_id))

    @property
    def deletions(self) -> list[tuple[Any, ...]]:
        return [c for c in self.calls if c[0] == "delete"]


@pytest.fixture
def make_fake_client() -> Callable[..., FakeRegistryClient]:
    def _make(packages: dict[str, str] | None = None, versions: list[Version] | None = None) -> FakeRegistryClient:
        return FakeRegistryClient(
            packages=packages if packages is not None else {"octo/app": "pkg"},
            versions=versions if versions is not None else [Version(name="v1", id=1), Version(name="v2", id=2)],
        )

    return _make


@pytest.fixture
def fake_client(make_fake_client: Callable[..., FakeRegistryClient]) -> FakeRegistryClient:
    return make_fake_client()
