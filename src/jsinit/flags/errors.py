"""Errors raised while resolving the command line."""

import click

from jsinit.flags.usage import PROG_NAME, usage_text

EXIT_USAGE = 2
EXIT_HELP = 3


class UsageError(click.ClickException):
    """Bad or missing arguments. Reported with the usage text on stderr."""

    exit_code = EXIT_USAGE

    def show(self, file=None):
        click.echo(f"{PROG_NAME}: {self.format_message()}", file=file, err=True)
        click.echo(usage_text(), file=file, err=True, nl=False)


class HelpRequested(click.ClickException):
    """-h/--help was given. Usage goes to stdout with a distinguished status."""

    exit_code = EXIT_HELP

    def __init__(self):
        super().__init__("help requested")

    def show(self, file=None):
        click.echo(usage_text(), file=file, nl=False)
