"""A printable wrapper around an argv list that remembers how args were grouped.

Usage:
    cmd = PrintableShellCommand("rsync")
    cmd.arg("-avz").args(["--exclude", ".git"]).arg(src).arg(dst)
    cmd.print_invocation()
    subprocess.run(cmd.argv)
"""

import itertools
from typing import Iterable, Sequence

from printable_shell_command.errors import ArgsDivergedError
from printable_shell_command.shell_printable import ShellPrintable
from printable_shell_command.text import Token, raw_token

_MISSING = object()


class PrintableShellCommand(ShellPrintable):
    """Builds `argv` while recording arg groups for printing.

    `argv` may also be appended to directly (e.g. `cmd.argv.append(...)`);
    such args are adopted as individual groups. Removing, reordering or
    editing args that were already seen is not supported.
    """

    def __init__(self, program: Token):
        self.argv: list = [raw_token(program)]
        self.arg_groups: list[list] = []

    @classmethod
    def from_argv(cls, argv: Sequence[Token]) -> "PrintableShellCommand":
        """Adopt an existing argv, treating each arg as its own group."""
        if not argv:
            raise ValueError("argv must contain at least the program name")
        cmd = cls(argv[0])
        cmd.argv.extend(raw_token(arg) for arg in argv[1:])
        return cmd.adopt_args()

    @property
    def program(self):
        return self.argv[0]

    def arg(self, arg: Token) -> "PrintableShellCommand":
        self.adopt_args()
        arg = raw_token(arg)
        self.arg_groups.append([arg])
        self.argv.append(arg)
        return self

    def args(self, args: Iterable[Token]) -> "PrintableShellCommand":
        self.adopt_args()
        args = [raw_token(arg) for arg in args]
        if args:
            self.arg_groups.append(args)
            self.argv.extend(args)
        return self

    def _args_to_adopt(self) -> list:
        to_adopt = []
        seen = itertools.chain.from_iterable(self.arg_groups)
        current = (raw_token(arg) for arg in self.argv[1:])
        for i, (ours, theirs) in enumerate(
            itertools.zip_longest(seen, current, fillvalue=_MISSING)
        ):
            if ours is _MISSING:
                to_adopt.append(theirs)
            elif theirs is _MISSING:
                raise ArgsDivergedError(
                    f"argv is missing previously seen arg #{i}: {ours!r}"
                )
            elif ours != theirs:
                raise ArgsDivergedError(
                    f"argv arg #{i} changed from {ours!r} to {theirs!r}"
                )
        return to_adopt

    def adopt_args(self) -> "PrintableShellCommand":
        """Fold args appended directly to `argv` into single-arg groups."""
        for arg in self._args_to_adopt():
            self.arg_groups.append([arg])
        return self

    def _program_and_arg_groups(self):
        unadopted = [[arg] for arg in self._args_to_adopt()]
        return self.program, self.arg_groups + unadopted

    def __repr__(self):
        return f"PrintableShellCommand({self.argv!r})"

