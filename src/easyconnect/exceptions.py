class EasyConnectError(Exception):
    ...


class ConfigIOError(EasyConnectError):
    """
    The configuration directory or file could not be created, read or written.
    """


class ConfigParseError(EasyConnectError):
    """
    The configuration file is not a valid JSON configuration object.
    """


class PromptReadError(EasyConnectError):
    """
    Interactive input was aborted or the input stream was closed.
    """


class ProcessSpawnError(EasyConnectError):
    """
    The VPN client executable could not be started.
    """


class ProcessExitError(EasyConnectError):
    def __init__(self, command: str, returncode: int):
        super().__init__(f"'{command}' exited with status {returncode}")
        self.command = command
        self.returncode = returncode
