class GhcrCliError(Exception):
    """Base class for every error that ends a command."""


class HelperNotFoundError(GhcrCliError):
    pass


class InvalidOwnerRepoError(GhcrCliError, ValueError):
    pass


class RegistryCommandError(GhcrCliError):
    """``gh api`` could not be run or exited non-zero."""

    def __init__(self, message: str, output: str = "") -> None:
        self.output = output
        if output:
            message = f"{message}\nOutput: {output}"
        super().__init__(message)


class RegistryResponseError(GhcrCliError):
    pass


class PackageNotFoundError(GhcrCliError):
    pass
