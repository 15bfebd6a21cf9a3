from typing import Callable, Iterable, Optional, Sequence

from printable_shell_command.options import FormattingOptions
from printable_shell_command.print_builder import PrintBuilder
from printable_shell_command.text import Token, to_text, to_text_lossy


class ShellPrintable:
    """Mixin that renders `_program_and_arg_groups()` as a printable command."""

    def _program_and_arg_groups(self) -> tuple[Token, Iterable[Sequence[Token]]]:
        raise NotImplementedError

    def _render(
        self, options: Optional[FormattingOptions], convert: Callable[[Token], str]
    ) -> str:
        program, arg_groups = self._program_and_arg_groups()
        print_builder = PrintBuilder(options)
        print_builder.add_program_name(convert(program))
        for arg_group in arg_groups:
            print_builder.add_arg_group([convert(arg) for arg in arg_group])
        return print_builder.get()

    def printable_invocation_string(
        self, options: Optional[FormattingOptions] = None
    ) -> str:
        """Render the invocation. Raises `DecodingError` on non-UTF-8 tokens."""
        return self._render(options, to_text)

    def printable_invocation_string_lossy(
        self, options: Optional[FormattingOptions] = None
    ) -> str:
        """Render the invocation, replacing undecodable bytes with U+FFFD."""
        return self._render(options, to_text_lossy)

    def print_invocation(self, options: Optional[FormattingOptions] = None):
        print(self.printable_invocation_string(options))
        return self

    def print_invocation_lossy(self, options: Optional[FormattingOptions] = None):
        print(self.printable_invocation_string_lossy(options))
        return self


class _Argv(ShellPrintable):
    def __init__(self, argv: Sequence[Token]):
        if not argv:
            raise ValueError("argv must contain at least the program name")
        self.argv = argv

    def _program_and_arg_groups(self):
        return self.argv[0], ([arg] for arg in self.argv[1:])


def format_argv(
    argv: Sequence[Token], options: Optional[FormattingOptions] = None
) -> str:
    """Render a plain argv list, one entry per arg."""
    return _Argv(argv).printable_invocation_string(options)


def format_argv_lossy(
    argv: Sequence[Token], options: Optional[FormattingOptions] = None
) -> str:
    return _Argv(argv).printable_invocation_string_lossy(options)
