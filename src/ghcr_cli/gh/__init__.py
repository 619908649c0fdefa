from ghcr_cli.gh.client import GhApiClient, gh_available, run_gh_api

__all__ = [
    "GhApiClient",
    "gh_available",
    "run_gh_api",
]
