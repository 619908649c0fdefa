from ghcr_cli.core.errors import InvalidOwnerRepoError


def parse_owner_repo(value: str) -> tuple[str, str]:
    parts = value.split("/")
    if len(parts) != 2 or not all(parts):
        raise InvalidOwnerRepoError("invalid owner/repo format. Expected 'owner/repo'")
    return parts[0], parts[1]
