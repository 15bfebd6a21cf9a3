"""Print a command the way it would be typed into a shell.

Usage:
    psc fmt rsync -avz --exclude .git ./src host:dst      # one arg per line
    psc fmt -g rsync -avz --exclude .git ./src host:dst   # keep --exclude .git together
    psc fmt -w inline -x ls -la "My Documents"            # print, then execute
    psc options                                           # show effective options
    psc history -n 5                                      # last executed commands
"""

import os
import subprocess
from pathlib import Path
from typing import List, Optional

import tabulate
import typer

from printable_shell_command.command import PrintableShellCommand
from printable_shell_command.errors import ConfigError, DecodingError
from printable_shell_command.grouping import group_flag_values
from printable_shell_command.history import Logger
from printable_shell_command.options import (
    ArgumentLineWrapping,
    FormattingOptions,
    Quoting,
    load_options,
)
from printable_shell_command.ui import dim, error_line, section_header

app = typer.Typer(help="Print shell commands in a readable, copy-pasteable form.")

DEFAULT_CONFIG = Path.home() / ".psc.yaml"


def _fail(message: str) -> None:
    typer.echo(error_line(message), err=True)
    raise typer.Exit(1)


def _load_options(config: Optional[Path]) -> FormattingOptions:
    if config is None:
        config = Path(os.environ.get("PSC_CONFIG", DEFAULT_CONFIG))
    elif not config.exists():
        _fail(f"config file not found: {config}")

    try:
        return load_options(config)
    except ConfigError as e:
        _fail(str(e))


def _build_command(program: str, args: List[str], group: bool) -> PrintableShellCommand:
    cmd = PrintableShellCommand(program)
    if group:
        for arg_group in group_flag_values(args):
            cmd.args(arg_group)
    else:
        for arg in args:
            cmd.arg(arg)
    return cmd


@app.command(
    context_settings={"allow_interspersed_args": False, "ignore_unknown_options": True}
)
def fmt(
    program: str = typer.Argument(..., help="Program to run"),
    args: Optional[List[str]] = typer.Argument(None, help="Program arguments"),
    main_indent: Optional[str] = typer.Option(None, "--main-indent"),
    arg_indent: Optional[str] = typer.Option(None, "--arg-indent"),
    quoting: Optional[Quoting] = typer.Option(None, "--quoting", "-q"),
    wrap: Optional[ArgumentLineWrapping] = typer.Option(None, "--wrap", "-w"),
    group: bool = typer.Option(
        False, "--group", "-g", help="Keep each option on a line with its value"
    ),
    lossy: bool = typer.Option(
        False, "--lossy", help="Replace undecodable bytes instead of failing"
    ),
    execute: bool = typer.Option(False, "-x", "--exec", help="Execute the command"),
    config: Optional[Path] = typer.Option(None, "--config"),
) -> None:
    """Print PROGRAM and ARGS as a formatted shell command."""
    options = _load_options(config).replace(
        main_indentation=main_indent,
        arg_indentation=arg_indent,
        quoting=quoting,
        argument_line_wrapping=wrap,
    )
    cmd = _build_command(program, args or [], group)

    if lossy:
        printable = cmd.printable_invocation_string_lossy(options)
    else:
        try:
            printable = cmd.printable_invocation_string(options)
        except DecodingError as e:
            _fail(f"{e} (use --lossy to print it anyway)")

    typer.echo(printable)

    if execute:
        returncode = subprocess.call(cmd.argv)
        Logger().log_one(cmd.printable_invocation_string_lossy(options), returncode)
        raise typer.Exit(returncode)


@app.command()
def options(config: Optional[Path] = typer.Option(None, "--config")) -> None:
    """Show the effective formatting options."""
    rows = _load_options(config).as_rows()
    typer.echo(section_header("Formatting Options"))
    typer.echo(
        tabulate.tabulate(rows, headers=["Option", "Value"], tablefmt="fancy_grid")
    )


@app.command()
def history(
    last: int = typer.Option(1, "--last", "-n", help="Number of entries to show"),
) -> None:
    """Show the most recently executed commands."""
    logs = Logger().read_logs(last=last)
    if not logs:
        typer.echo(dim("  No executed commands yet"))
        return

    typer.echo(section_header("History"))
    for log_item in logs:
        log_item.print()


if __name__ == "__main__":
    app()
