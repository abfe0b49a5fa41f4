"""Command-line interface for pagemap."""

import asyncio
import json
from pathlib import Path
from typing import Annotated

import typer

from pagemap import __version__
from pagemap.config import DiscoveryOptions
from pagemap.exceptions import ConfigValidationError
from pagemap.exceptions import PagemapError
from pagemap.files import PluginBuildDir
from pagemap.operations import copy_build_files
from pagemap.operations import discover_pages
from pagemap.output import print_pages

app = typer.Typer(help="Discover deployable pages in a Next.js serverless build")


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"pagemap {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version", callback=version_callback, is_eager=True, help="Show version"
        ),
    ] = None,
) -> None:
    """Discover deployable pages in a Next.js serverless build."""
    pass


@app.command()
def discover(
    build_dir: Annotated[Path, typer.Argument(help="Build output directory to scan")],
    config: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Options file (JSON)"),
    ] = None,
    exclude: Annotated[
        list[str] | None,
        typer.Option("--exclude", "-x", help="Extra file name to exclude"),
    ] = None,
    as_json: Annotated[
        bool, typer.Option("--json", help="Print pages as JSON")
    ] = False,
) -> None:
    """List the pages found in a build directory."""
    try:
        options = DiscoveryOptions.load(config)
        if exclude:
            options.additional_excludes = [*options.additional_excludes, *exclude]

        pages = asyncio.run(discover_pages(build_dir, options))
    except ConfigValidationError as e:
        typer.secho(f"✗ Config error: {e}", fg=typer.colors.RED, bold=True, err=True)
        raise typer.Exit(1) from None
    except FileNotFoundError as e:
        typer.secho(f"✗ Not found: {e}", fg=typer.colors.RED, bold=True, err=True)
        raise typer.Exit(1) from None
    except PermissionError as e:
        typer.secho(
            f"✗ Permission denied: {e}", fg=typer.colors.RED, bold=True, err=True
        )
        raise typer.Exit(1) from None
    except OSError as e:
        typer.secho(
            f"✗ Filesystem error: {e}", fg=typer.colors.RED, bold=True, err=True
        )
        raise typer.Exit(1) from None
    except PagemapError as e:
        typer.secho(f"✗ Error: {e}", fg=typer.colors.RED, bold=True, err=True)
        raise typer.Exit(1) from None

    if as_json:
        typer.echo(json.dumps([page.to_dict() for page in pages], indent=2))
    else:
        print_pages(pages)


@app.command()
def copy(
    next_build_dir: Annotated[
        Path, typer.Argument(help="Next.js build output directory (e.g. .next)")
    ],
    base_dir: Annotated[
        Path,
        typer.Option("--base-dir", help="Directory to create the build directory in"),
    ] = Path("."),
) -> None:
    """Copy serverless pages into a fresh build directory."""
    try:
        target = copy_build_files(next_build_dir, PluginBuildDir(base_dir))
    except FileNotFoundError as e:
        typer.secho(f"✗ {e}", fg=typer.colors.RED, bold=True, err=True)
        raise typer.Exit(1) from None
    except PermissionError as e:
        typer.secho(
            f"✗ Permission denied: {e}", fg=typer.colors.RED, bold=True, err=True
        )
        raise typer.Exit(1) from None
    except OSError as e:
        typer.secho(
            f"✗ Filesystem error: {e}", fg=typer.colors.RED, bold=True, err=True
        )
        typer.secho(
            "   Warning: Build directory may be partially copied. Run "
            "'pagemap clean' and try again.",
            err=True,
        )
        raise typer.Exit(1) from None

    typer.secho(f"✓ Copied pages to {target}", fg=typer.colors.GREEN, bold=True)


@app.command()
def clean(
    base_dir: Annotated[
        Path,
        typer.Option("--base-dir", help="Directory containing the build directory"),
    ] = Path("."),
) -> None:
    """Remove the build directory."""
    plugin_build_dir = PluginBuildDir(base_dir)
    try:
        plugin_build_dir.remove_build_dir()
    except OSError as e:
        typer.secho(
            f"✗ Filesystem error: {e}", fg=typer.colors.RED, bold=True, err=True
        )
        raise typer.Exit(1) from None

    typer.secho(
        f"✓ Removed {plugin_build_dir.build_dir}", fg=typer.colors.GREEN, bold=True
    )


def main() -> None:
    """Main entry point for the pagemap CLI."""
    app()


if __name__ == "__main__":
    main()
