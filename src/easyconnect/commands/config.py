from typing import cast

import typer

from easyconnect.cli_config import CliConfig
from easyconnect.exceptions import EasyConnectError
from easyconnect.toolkit.config_store import (
    generate_config,
    get_config_path,
    read_config,
)

config_ns = typer.Typer()


@config_ns.command()
def show(ctx: typer.Context):
    cli_config = cast(CliConfig, ctx.obj)

    try:
        config_path = cli_config.config_path or get_config_path()
    except EasyConnectError as e:
        typer.echo(f"Error loading config: {e}")
        raise typer.Exit(code=1)

    if not config_path.exists():
        typer.echo(f"No configuration at '{config_path}'.")
        raise typer.Exit(code=1)

    try:
        config = read_config(config_path)
    except EasyConnectError as e:
        typer.echo(f"Error loading config: {e}")
        raise typer.Exit(code=1)

    typer.echo(f"Configuration file: {config_path}")
    typer.echo(f"Server: {config.server}")
    typer.echo(f"Group: {config.group}")
    typer.echo(f"Username: {config.username}")
    typer.echo("Password: ********")
    typer.echo(f"Cisco logs: {'enabled' if config.cisco_logs else 'disabled'}")


@config_ns.command()
def generate(ctx: typer.Context):
    """
    Ask for the VPN settings again and overwrite the configuration file.
    """
    cli_config = cast(CliConfig, ctx.obj)

    try:
        generate_config(cli_config.config_path)
    except EasyConnectError as e:
        typer.echo(f"Error generating config: {e}")
        raise typer.Exit(code=1)
