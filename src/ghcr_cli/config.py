"""Fixed registry settings and logging setup."""

import logging
import sys

GH_BINARY = "gh"
ACCEPT_HEADER = "Accept: application/vnd.github+json"
API_VERSION_HEADER = "X-GitHub-Api-Version: 2022-11-28"

# https://docs.github.com/en/rest/packages/packages?apiVersion=2022-11-28
PACKAGES_PATH = "/user/packages?package_type=container"
VERSIONS_PATH = "/user/packages/container/{name}/versions"
VERSION_PATH = "/user/packages/container/{name}/versions/{version_id}"


def setup_logging(verbose: bool = False) -> None:
    """Configure the root logger on stderr so stdout stays machine-readable."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )
