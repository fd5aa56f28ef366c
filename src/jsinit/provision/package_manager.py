"""Dev-dependency installation through npm, yarn or pnpm."""

import subprocess

from jsinit.flags.toggles import FeatureToggle
from jsinit.provision.errors import ProvisionError

TOGGLE_PACKAGES = {
    FeatureToggle.ESLINT: ["eslint", "@eslint/js", "globals"],
    FeatureToggle.PRETTIER: ["prettier"],
    FeatureToggle.JEST: ["jest"],
    FeatureToggle.HUSKY: ["husky"],
    FeatureToggle.LINT_STAGED: ["lint-staged"],
}

_ADD_DEV = {
    "npm": ["npm", "install", "--save-dev"],
    "yarn": ["yarn", "add", "--dev"],
    "pnpm": ["pnpm", "add", "--save-dev"],
}


def dev_dependencies(record):
    """Packages to install for the enabled toggles, in toggle order."""
    packages = []
    for toggle in record.enabled_toggles():
        packages.extend(TOGGLE_PACKAGES[toggle])
    if record.is_enabled(FeatureToggle.ESLINT) and record.is_enabled(FeatureToggle.PRETTIER):
        packages.append("eslint-config-prettier")
    return packages


def build_install_command(package_manager, packages):
    return _ADD_DEV[package_manager] + list(packages)


class CommandRunner:
    """Runs a command in a directory, inheriting the terminal."""

    def run(self, cmd, cwd):
        return subprocess.run(cmd, cwd=cwd)


def install_dev_dependencies(record, opts, cwd, runner):
    """Install the dev dependencies for record into cwd. Returns the command run."""
    cmd = build_install_command(opts.package_manager, dev_dependencies(record))
    print(f"Running: {' '.join(cmd)}")
    result = runner.run(cmd, cwd=cwd)
    if result.returncode != 0:
        raise ProvisionError(f"{opts.package_manager} exited with status {result.returncode}")
    return cmd
