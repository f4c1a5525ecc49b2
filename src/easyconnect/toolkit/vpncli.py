import subprocess
import sys
from typing import Callable, Optional, Sequence, Tuple

from easyconnect.exceptions import EasyConnectError, ProcessExitError, ProcessSpawnError
from easyconnect.toolkit.config_store import VpnConfig

UNIX_VPN_EXECUTABLE = "/opt/cisco/anyconnect/bin/vpn"
WINDOWS_VPN_EXECUTABLE = "vpncli.exe"

STATUS_ARGS = ("status",)
DISCONNECT_ARGS = ("disconnect",)

CommandResult = Tuple[str, Optional[EasyConnectError]]
# (args, stdin_text) -> (combined output, error or None)
CommandRunner = Callable[[Sequence[str], str], CommandResult]


def get_vpn_executable(platform: Optional[str] = None) -> str:
    platform = platform or sys.platform
    if platform == "win32":
        # Resolved through PATH
        return WINDOWS_VPN_EXECUTABLE

    return UNIX_VPN_EXECUTABLE


def run_vpn_command(args: Sequence[str], stdin_text: str = "") -> CommandResult:
    """
    Runs the AnyConnect command-line client once and waits for it to exit.

    stdout and stderr are captured interleaved into a single string. The call
    blocks until the client exits, there is no timeout.
    """
    command = [get_vpn_executable(), *args]
    try:
        result = subprocess.run(
            command,
            input=stdin_text.encode(),
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
        )
    except OSError as e:
        return "", ProcessSpawnError(f"cannot run '{command[0]}': {e}")

    # The client output is not guaranteed to be valid in any encoding
    output = result.stdout.decode(errors="replace")

    if result.returncode != 0:
        return output, ProcessExitError(" ".join(command), result.returncode)

    return output, None


def make_connect_input(config: VpnConfig) -> str:
    # Answers to the client's prompts, the last one accepts the login banner
    return f"{config.group}\n{config.username}\n{config.password}\ny\n"


def connect_args(config: VpnConfig) -> Tuple[str, ...]:
    return ("-s", "connect", config.server)
