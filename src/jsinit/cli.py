"""Click entry point for the jsinit CLI."""

import os
import sys
from typing import Callable

import click

from jsinit.flags.resolver import resolve_flags
from jsinit.provision.provision_opts import ProvisionOpts
from jsinit.provision.provisioner import ProjectProvisioner, Provisioner


def default_provisioner() -> Provisioner:
    """Build a ProjectProvisioner configured from the environment."""
    return ProjectProvisioner(ProvisionOpts.from_environ(), cwd=os.getcwd())


def run(argv, provisioner_factory: Callable[[], Provisioner]) -> int:
    """Resolve argv and hand the selection to a provisioner.

    Usage and help errors propagate as click exceptions. Returns the exit status.
    """
    record = resolve_flags(argv)
    try:
        provisioner = provisioner_factory()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0 if provisioner.provision(record) else 1


@click.command(
    "jsinit",
    context_settings={"ignore_unknown_options": True, "help_option_names": []},
)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
def main(args):
    """Initialize a JavaScript project with ESLint, Prettier, Jest, Husky and lint-staged."""
    sys.exit(run(args, default_provisioner))
