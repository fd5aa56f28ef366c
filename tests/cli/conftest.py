"""Shared setup for CLI tests."""

import os
import sys

# Ensure tests/cli/ is on sys.path so test files can import
# fake_provisioner unambiguously.
sys.path.insert(0, os.path.dirname(__file__))
