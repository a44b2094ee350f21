"""CLI entry point: registers the analysis command."""

import typer

app = typer.Typer(
    name="git-dig",
    help="git-dig - dig into your git history",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import commands to register them
from .analyze import dig as _dig  # noqa: F401, E402


def main() -> None:
    app()
