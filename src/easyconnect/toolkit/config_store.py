"""
Persistent VPN settings, stored as JSON in a per-user directory.
"""

import json
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import typer

from easyconnect.exceptions import ConfigIOError, ConfigParseError, PromptReadError

CONFIG_FILENAME = "config.json"
REQUIRED_FIELDS = ("server", "group", "username", "password")


@dataclass
class VpnConfig:
    server: str
    group: str
    username: str
    password: str = field(repr=False)
    cisco_logs: bool = False

    def is_complete(self) -> bool:
        return all(getattr(self, name) for name in REQUIRED_FIELDS)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "server": self.server,
            "group": self.group,
            "username": self.username,
            "password": self.password,
            "cisco_logs": self.cisco_logs,
        }

    @classmethod
    def from_dict(cls, data: Any) -> "VpnConfig":
        if not isinstance(data, dict):
            raise ConfigParseError(
                f"expected a JSON object, got {type(data).__name__}"
            )

        values = {}
        for name in REQUIRED_FIELDS:
            value = data.get(name, "")
            if not isinstance(value, str):
                raise ConfigParseError(f"'{name}' must be a string")
            values[name] = value

        cisco_logs = data.get("cisco_logs", False)
        if not isinstance(cisco_logs, bool):
            raise ConfigParseError("'cisco_logs' must be a boolean")

        return cls(cisco_logs=cisco_logs, **values)


def get_config_dir(platform: Optional[str] = None) -> Path:
    platform = platform or sys.platform
    if platform == "win32":
        return Path(os.environ.get("APPDATA", "")) / "easyconnect"

    return Path(os.environ.get("HOME", "")) / ".easyconnect"


def _ensure_dir(config_dir: Path) -> None:
    try:
        config_dir.mkdir(mode=0o700, parents=True, exist_ok=True)
    except OSError as e:
        raise ConfigIOError(f"cannot create '{config_dir}': {e}") from e


def get_config_path(platform: Optional[str] = None) -> Path:
    config_dir = get_config_dir(platform)
    _ensure_dir(config_dir)
    return config_dir / CONFIG_FILENAME


def save_config(config: VpnConfig, config_path: Path) -> None:
    try:
        with config_path.open("w") as f:
            json.dump(config.to_dict(), f, indent=2)
            f.write("\n")
    except OSError as e:
        raise ConfigIOError(f"cannot write '{config_path}': {e}") from e


def _prompt(text: str, **kwargs) -> str:
    try:
        return typer.prompt(text, **kwargs)
    except typer.Abort as e:
        raise PromptReadError(f"no answer for '{text}'") from e


def generate_config(config_path: Optional[Path] = None) -> VpnConfig:
    """
    Asks for the VPN settings on the terminal and writes them to `config_path`,
    replacing whatever was there.
    """
    config_path = config_path or get_config_path()
    _ensure_dir(config_path.parent)

    typer.echo("Configuration file not found. Let's create one.")
    server = _prompt("Enter VPN server address")
    group = _prompt("Enter VPN group name(number)")
    username = _prompt("Enter VPN username")
    password = _prompt("Enter VPN password", hide_input=True)
    # Anything but "y" disables logging, including an empty answer.
    cisco_logs = _prompt(
        "Do you want to enable Cisco logs? (y/n)", default="", show_default=False
    )

    config = VpnConfig(
        server=server,
        group=group,
        username=username,
        password=password,
        cisco_logs=cisco_logs.strip().lower() == "y",
    )

    save_config(config, config_path)
    typer.echo(f"Configuration saved to {config_path}")
    return config


def read_config(config_path: Path) -> VpnConfig:
    try:
        content = config_path.read_text()
    except OSError as e:
        raise ConfigIOError(f"cannot read '{config_path}': {e}") from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"invalid JSON in '{config_path}': {e}") from e

    return VpnConfig.from_dict(data)


def load_config(config_path: Optional[Path] = None) -> VpnConfig:
    """
    Reads the VPN settings, falling back to the interactive prompt when the file
    is missing or one of the required fields is empty.
    """
    config_path = config_path or get_config_path()
    _ensure_dir(config_path.parent)

    if not config_path.exists():
        return generate_config(config_path)

    config = read_config(config_path)
    if not config.is_complete():
        return generate_config(config_path)

    return config
