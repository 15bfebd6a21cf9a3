from printable_shell_command.command import PrintableShellCommand
from printable_shell_command.errors import (
    ArgsDivergedError,
    ConfigError,
    DecodingError,
    InvariantViolation,
    PrintableShellCommandError,
)
from printable_shell_command.escape import Role, escape, needs_quoting, quote
from printable_shell_command.options import (
    ArgumentLineWrapping,
    FormattingOptions,
    Quoting,
    load_options,
)
from printable_shell_command.print_builder import PrintBuilder
from printable_shell_command.shell_printable import (
    ShellPrintable,
    format_argv,
    format_argv_lossy,
)

__version__ = "0.1.0"
