"""Shared fixtures for provisioning tests."""

import os
import sys

import pytest

from jsinit.flags.resolver import resolve_flags

# Ensure tests/provision/ is on sys.path so test files can import
# fake_command_runner unambiguously.
sys.path.insert(0, os.path.dirname(__file__))

from fake_command_runner import FakeCommandRunner  # noqa: E402, F401


@pytest.fixture
def record_for():
    """Build a SelectionRecord from command-line style arguments."""
    def _record_for(*argv):
        return resolve_flags(list(argv))
    return _record_for
