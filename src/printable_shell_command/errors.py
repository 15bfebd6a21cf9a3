from typing import Union


class PrintableShellCommandError(Exception):
    pass


class DecodingError(PrintableShellCommandError, ValueError):
    """A token could not be converted to text in strict mode."""

    def __init__(self, token: Union[str, bytes]):
        self.token = token
        super().__init__(f"token is not valid UTF-8 text: {token!r}")


class InvariantViolation(PrintableShellCommandError, RuntimeError):
    """The caller broke a documented precondition. Not meant to be caught."""


class ArgsDivergedError(InvariantViolation):
    """The wrapped argv no longer starts with the args already recorded."""


class ConfigError(PrintableShellCommandError, ValueError):
    pass
