from typing import Annotated

import typer

from ghcr_cli.cli.versions import delete, list_versions
from ghcr_cli.config import setup_logging

app = typer.Typer(
    name="ghcr-cli",
    help="List and delete container image versions in GitHub Container Registry.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback()
def root(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log gh invocations to stderr.")] = False,
) -> None:
    setup_logging(verbose)


app.command("list")(list_versions)
app.command("delete")(delete)


def main() -> None:
    app()
