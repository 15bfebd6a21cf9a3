"""Split a flat argument list into option/value groups."""

from typing import Sequence

from printable_shell_command.text import Token, raw_token


def is_option(token) -> bool:
    token = raw_token(token)
    dash, eq = ("-", "=") if isinstance(token, str) else (b"-", b"=")
    if not token.startswith(dash) or token in (dash, dash * 2):
        return False
    return eq not in token


def group_flag_values(tokens: Sequence[Token]) -> list[list]:
    """Group each option with the value that follows it.

    `--opt=value`, a lone `-`/`--` and positional args stay on their own.
    Everything after `--` is positional.
    """
    arg_groups: list[list] = []
    expecting_value = False
    options_ended = False

    for tok in tokens:
        tok = raw_token(tok)
        if options_ended:
            arg_groups.append([tok])
        elif tok in ("--", b"--"):
            arg_groups.append([tok])
            expecting_value = False
            options_ended = True
        elif is_option(tok):
            arg_groups.append([tok])
            expecting_value = True
        elif expecting_value:
            arg_groups[-1].append(tok)
            expecting_value = False
        else:
            arg_groups.append([tok])

    return arg_groups
