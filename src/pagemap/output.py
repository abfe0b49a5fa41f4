"""Console output for pagemap."""

from collections.abc import Sequence

import typer

from pagemap.models import PageDescriptor

LOG_PREFIX = "pagemap"


def log(message: str) -> None:
    """Print a prefixed status message to stderr.

    Stdout is reserved for command output.
    """
    prefix = typer.style(LOG_PREFIX, fg=typer.colors.YELLOW)
    typer.echo(f"{prefix}: {message}", err=True)


def error(message: str) -> None:
    """Print a prefixed message to stderr."""
    prefix = typer.style(LOG_PREFIX, fg=typer.colors.RED)
    typer.echo(f"{prefix}: {message}", err=True)


def print_pages(pages: Sequence[PageDescriptor]) -> None:
    """Print discovered pages with their routes and overrides.

    Args:
        pages: Pages in discovery order
    """
    for page in pages:
        typer.secho(page.page_id, bold=True)
        typer.secho(f"  path: {page.page_path}", fg=typer.colors.BRIGHT_BLACK)
        for route in page.routes:
            params = ", ".join(f"{k}={v}" for k, v in route.items())
            typer.secho(f"  route: {params}", fg=typer.colors.BRIGHT_BLACK)
        if page.serverless_function_overrides:
            overrides = ", ".join(
                f"{k}={v}" for k, v in page.serverless_function_overrides.items()
            )
            typer.secho(f"  overrides: {overrides}", fg=typer.colors.BRIGHT_BLACK)

    num_pages = len(pages)
    typer.secho(
        f"✓ {num_pages} page{'s' if num_pages != 1 else ''}",
        fg=typer.colors.GREEN,
        bold=True,
    )
