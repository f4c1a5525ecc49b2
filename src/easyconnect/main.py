from pathlib import Path
from typing import Optional

import typer

from easyconnect.cli_config import CliConfig
from easyconnect.commands import vpn
from easyconnect.commands.config import config_ns

app = typer.Typer()


def validate_config_file_path(config: Optional[Path]) -> Optional[Path]:
    if config is not None:
        if config.exists() and not config.is_file():
            raise typer.BadParameter(f"'{config.absolute()}' is not a file")

    return config


def pause_before_exit():
    typer.echo("Press Enter to exit...")
    try:
        typer.prompt("", default="", show_default=False, prompt_suffix="")
    except typer.Abort:
        # Closed stdin, nothing to wait for
        pass


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None,
        help="Configuration file to use instead of the per-user default.",
        callback=validate_config_file_path,
    ),
    pause: bool = typer.Option(
        True, help="Wait for Enter before exiting after a connect/disconnect."
    ),
    verbose: bool = typer.Option(False, help="Show more information."),
):
    """
    Toggle the Cisco AnyConnect VPN: disconnect if connected, connect otherwise.
    """
    cli_config = CliConfig(
        config_path=config,
        pause=pause,
        verbose=verbose,
    )

    ctx.obj = cli_config

    if ctx.invoked_subcommand is not None:
        return

    try:
        vpn.run_toggle(cli_config)
    finally:
        if cli_config.pause:
            pause_before_exit()


app.command()(vpn.status)
app.command()(vpn.connect)
app.command()(vpn.disconnect)
app.add_typer(config_ns, name="config", help="Show or regenerate the VPN configuration.")


if __name__ == "__main__":
    app()
