from typing import Optional, Sequence, cast

import typer

from easyconnect.cli_config import CliConfig
from easyconnect.exceptions import EasyConnectError
from easyconnect.toolkit.config_store import VpnConfig, load_config
from easyconnect.toolkit.status import VpnState, check_vpn_status
from easyconnect.toolkit.vpncli import (
    DISCONNECT_ARGS,
    CommandResult,
    CommandRunner,
    connect_args,
    get_vpn_executable,
    make_connect_input,
    run_vpn_command,
)


def make_runner(cli_config: CliConfig) -> CommandRunner:
    def runner(args: Sequence[str], stdin_text: str) -> CommandResult:
        if cli_config.verbose:
            typer.echo(f"Running: {' '.join([get_vpn_executable(), *args])}")
        return run_vpn_command(args, stdin_text)

    return runner


def _run_and_log(
    config: VpnConfig, runner: CommandRunner, args: Sequence[str], stdin_text: str
) -> str:
    output, error = runner(args, stdin_text)

    # The client output is shown even when the call failed
    if config.cisco_logs:
        typer.echo(output)

    if error is not None:
        raise error

    return output


def connect_vpn(config: VpnConfig, runner: CommandRunner) -> str:
    return _run_and_log(
        config, runner, connect_args(config), make_connect_input(config)
    )


def disconnect_vpn(config: VpnConfig, runner: CommandRunner) -> str:
    return _run_and_log(config, runner, DISCONNECT_ARGS, "")


def load_config_or_exit(cli_config: CliConfig) -> VpnConfig:
    try:
        return load_config(cli_config.config_path)
    except EasyConnectError as e:
        typer.echo(f"Error loading config: {e}")
        raise typer.Exit(code=1)


def check_status_or_exit(runner: CommandRunner) -> VpnState:
    try:
        return check_vpn_status(runner)
    except EasyConnectError as e:
        typer.echo(f"Error checking VPN status: {e}")
        raise typer.Exit(code=1)


def connect_or_exit(config: VpnConfig, runner: CommandRunner) -> None:
    try:
        connect_vpn(config, runner)
    except EasyConnectError as e:
        typer.echo(f"Error connecting VPN: {e}")
        raise typer.Exit(code=1)

    typer.echo("VPN connected successfully.")


def disconnect_or_exit(config: VpnConfig, runner: CommandRunner) -> None:
    try:
        disconnect_vpn(config, runner)
    except EasyConnectError as e:
        typer.echo(f"Error disconnecting VPN: {e}")
        raise typer.Exit(code=1)

    typer.echo("VPN disconnected successfully.")


def run_toggle(
    cli_config: CliConfig, runner: Optional[CommandRunner] = None
) -> VpnState:
    """
    Disconnects the VPN if it is up, connects it otherwise.

    Any failure is reported on the terminal and ends the program with exit
    code 1. Returns the state the VPN was put in.
    """
    config = load_config_or_exit(cli_config)
    runner = runner or make_runner(cli_config)

    if check_status_or_exit(runner) == VpnState.CONNECTED:
        typer.echo("VPN is currently connected. Disconnecting...")
        disconnect_or_exit(config, runner)
        return VpnState.DISCONNECTED

    typer.echo("VPN is not connected. Connecting...")
    connect_or_exit(config, runner)
    return VpnState.CONNECTED


def status(ctx: typer.Context):
    """
    Show whether the VPN is connected.
    """
    cli_config = cast(CliConfig, ctx.obj)

    state = check_status_or_exit(make_runner(cli_config))
    if state == VpnState.CONNECTED:
        typer.echo("VPN is connected.")
    else:
        typer.echo("VPN is not connected.")


def connect(ctx: typer.Context):
    """
    Connect the VPN, unless it is already connected.
    """
    cli_config = cast(CliConfig, ctx.obj)
    config = load_config_or_exit(cli_config)
    runner = make_runner(cli_config)

    if check_status_or_exit(runner) == VpnState.CONNECTED:
        typer.echo("VPN is already connected.")
        return

    typer.echo("Connecting...")
    connect_or_exit(config, runner)


def disconnect(ctx: typer.Context):
    """
    Disconnect the VPN, unless it is already disconnected.
    """
    cli_config = cast(CliConfig, ctx.obj)
    config = load_config_or_exit(cli_config)
    runner = make_runner(cli_config)

    if check_status_or_exit(runner) == VpnState.DISCONNECTED:
        typer.echo("VPN is not connected.")
        return

    typer.echo("Disconnecting...")
    disconnect_or_exit(config, runner)
