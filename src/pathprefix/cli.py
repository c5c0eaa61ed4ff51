"""CLI interface for pathprefix.

Command-line tool for joining path tokens onto a configured prefix.
"""

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

import click

from pathprefix.config import Config
from pathprefix.errors import PathPrefixError


@click.group()
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output (debug logging)",
)
def cli(verbose: bool) -> None:
    """pathprefix - separator-clean path joining."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


def _prefix_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Attach the options shared by the join commands."""
    func = click.option(
        "--config",
        "-c",
        "config_path",
        type=click.Path(exists=True, path_type=Path),
        default=None,
        help="Path to configuration file (default: auto-discover pathprefix.toml)",
    )(func)
    func = click.option(
        "--separator",
        "-s",
        default=None,
        help="Separator between tokens (overrides config)",
    )(func)
    func = click.option(
        "--base",
        "-b",
        default=None,
        help="Prefix to join onto (overrides config)",
    )(func)
    return func


def _load_config(
    config_path: Path | None,
    base: str | None,
    separator: str | None,
) -> Config:
    try:
        config = Config.load(config_path)
    except ValueError as e:
        raise click.ClickException(f"Invalid configuration: {e}") from e
    return config.with_overrides(base=base, separator=separator)


@cli.command()
@click.argument("tokens", nargs=-1)
@_prefix_options
def join(
    tokens: tuple[str, ...],
    base: str | None,
    separator: str | None,
    config_path: Path | None,
) -> None:
    """Join TOKENS onto the prefix and print the absolute path."""
    config = _load_config(config_path, base, separator)
    try:
        click.echo(config.path_prefix().join(*tokens))
    except PathPrefixError as e:
        raise click.ClickException(str(e)) from e


@cli.command("relative-join")
@click.argument("tokens", nargs=-1)
@_prefix_options
def relative_join(
    tokens: tuple[str, ...],
    base: str | None,
    separator: str | None,
    config_path: Path | None,
) -> None:
    """Join TOKENS onto the prefix without a leading separator."""
    config = _load_config(config_path, base, separator)
    try:
        click.echo(config.path_prefix().relative_join(list(tokens)))
    except PathPrefixError as e:
        raise click.ClickException(str(e)) from e


@cli.command()
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover pathprefix.toml)",
)
@click.option(
    "--base",
    "-b",
    default=None,
    help="Mount point for the API (overrides config)",
)
@click.option(
    "--host",
    default=None,
    help="Host to bind to (overrides config)",
)
@click.option(
    "--port",
    "-p",
    type=int,
    default=None,
    help="Port to bind to (overrides config)",
)
def serve(
    config_path: Path | None,
    base: str | None,
    host: str | None,
    port: int | None,
) -> None:
    """Start the join API server."""
    from pathprefix.routing import run_server

    config = _load_config(config_path, base, None).with_overrides(host=host, port=port)

    click.echo(f"Starting server on {config.server.host}:{config.server.port}")
    click.echo(f"Mounted at: {config.path_prefix().join()}")

    run_server(config)


if __name__ == "__main__":
    cli()
