"""Errors raised while provisioning a project."""


class ProvisionError(Exception):
    """A provisioning step failed; the message is shown to the user."""
