from typing import Iterable, Optional

from printable_shell_command.errors import InvariantViolation
from printable_shell_command.escape import Role, escape
from printable_shell_command.options import ArgumentLineWrapping, FormattingOptions

INLINE_SEPARATOR = " "
LINE_WRAP_LINE_END = " \\\n"


class CachedFormattingInfo:
    """Separators derived once from a `FormattingOptions`."""

    def __init__(self, options: FormattingOptions):
        self.options = options
        self.main_indentation = options.main_indentation

        wrapping = options.argument_line_wrapping
        arg_indentation = options.arg_indentation
        entry_line_start = LINE_WRAP_LINE_END + self.main_indentation + arg_indentation

        if wrapping is ArgumentLineWrapping.BY_ARGUMENT:
            self.arg_tuple_separator = entry_line_start
        elif wrapping is ArgumentLineWrapping.NESTED_BY_ENTRY:
            self.arg_tuple_separator = (
                LINE_WRAP_LINE_END + arg_indentation + arg_indentation
            )
        else:
            self.arg_tuple_separator = INLINE_SEPARATOR

        if wrapping is ArgumentLineWrapping.INLINE:
            self.entry_separator = INLINE_SEPARATOR
        else:
            self.entry_separator = entry_line_start

    def escape_arglike(self, arglike: str, role: Role) -> str:
        return escape(arglike, role, self.options.quoting)


class PrintBuilder:
    """Accumulates a program name and arg groups, then joins them into one string.

    The program name must be added exactly once, before any args.
    """

    def __init__(self, options: Optional[FormattingOptions] = None):
        self.serialized_entries: list[str] = []
        self.cached_formatting_info = CachedFormattingInfo(
            options if options is not None else FormattingOptions()
        )

    def add_program_name(self, program_name: str) -> "PrintBuilder":
        if self.serialized_entries:
            raise InvariantViolation(
                "The program name must be added exactly once, before any args."
            )
        info = self.cached_formatting_info
        self.serialized_entries.append(
            info.main_indentation
            + info.escape_arglike(program_name, Role.PROGRAM_NAME)
        )
        return self

    def add_single_arg(self, arg: str) -> "PrintBuilder":
        return self.add_arg_group([arg])

    def add_arg_group(self, args: Iterable[str]) -> "PrintBuilder":
        if not self.serialized_entries:
            raise InvariantViolation("Args were added before the program name.")

        info = self.cached_formatting_info
        escaped = [info.escape_arglike(arg, Role.ARGUMENT) for arg in args]
        if not escaped:
            raise InvariantViolation("An arg group must contain at least one arg.")

        self.serialized_entries.append(info.arg_tuple_separator.join(escaped))
        return self

    def get(self) -> str:
        if not self.serialized_entries:
            raise InvariantViolation("No program name was added.")
        return self.cached_formatting_info.entry_separator.join(
            self.serialized_entries
        )
