"""Presence checks for the external binaries provisioning relies on."""

import shutil

from jsinit.flags.toggles import FeatureToggle
from jsinit.provision.errors import ProvisionError


def required_binaries(record, opts):
    """Binaries that must be on PATH for this selection and options."""
    binaries = []
    if not opts.skip_install:
        binaries.extend(["node", opts.package_manager])
    if record.is_enabled(FeatureToggle.HUSKY):
        binaries.append("git")
    return binaries


def check_dependencies(record, opts, which=shutil.which):
    """Raise ProvisionError listing every required binary missing from PATH."""
    missing = [name for name in required_binaries(record, opts) if not which(name)]
    if missing:
        raise ProvisionError(f"Required commands not found on PATH: {', '.join(missing)}")
