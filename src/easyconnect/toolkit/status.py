from enum import Enum

from easyconnect.toolkit.vpncli import STATUS_ARGS, CommandRunner

STATE_MARKER = ">> state:"


class VpnState(str, Enum):
    CONNECTED = "connected"
    DISCONNECTED = "disconnected"


def parse_status(output: str) -> bool:
    """
    Looks for a `>> state: <value>` line in the output of `vpn status`.

    The marker is matched case-sensitively, the value is not. Any state other
    than "Connected" (Disconnected, Connecting, Reconnecting...) counts as not
    connected, and so does output without a state line.
    """
    for line in output.splitlines():
        line = line.strip()
        if not line.startswith(STATE_MARKER):
            continue

        state = line[len(STATE_MARKER) :].strip()
        if state.lower() == "connected":
            return True

    return False


def check_vpn_status(runner: CommandRunner) -> VpnState:
    output, error = runner(STATUS_ARGS, "")
    if error is not None:
        raise error

    return VpnState.CONNECTED if parse_status(output) else VpnState.DISCONNECTED
