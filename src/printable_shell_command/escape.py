from enum import Enum

from printable_shell_command.options import Quoting


class Role(Enum):
    PROGRAM_NAME = "program_name"
    ARGUMENT = "argument"


ARG_UNSAFE_CHARS = frozenset(" \"'`|$*?<>()[]{}&\\;#")
# `FOO=bar` in command position is read by the shell as an assignment.
PROGRAM_NAME_UNSAFE_CHARS = ARG_UNSAFE_CHARS | {"="}


def needs_quoting(token: str, role: Role = Role.ARGUMENT) -> bool:
    if role is Role.PROGRAM_NAME:
        unsafe = PROGRAM_NAME_UNSAFE_CHARS
    else:
        unsafe = ARG_UNSAFE_CHARS
    return any(c in unsafe for c in token)


def quote(token: str) -> str:
    """Wrap *token* in single quotes, escaping backslashes first, then quotes."""
    escaped = token.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def escape(
    token: str, role: Role = Role.ARGUMENT, quoting: Quoting = Quoting.AUTO
) -> str:
    if quoting is Quoting.EXTRA_SAFE or needs_quoting(token, role):
        return quote(token)
    return token
