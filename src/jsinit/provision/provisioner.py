"""Provisioner: turns a SelectionRecord into a project on disk."""

import os
import shutil
import sys
from typing import Protocol

import click
from git.exc import GitError

from jsinit.flags.toggles import FeatureToggle, SelectionRecord
from jsinit.provision.dependency_check import check_dependencies
from jsinit.provision.errors import ProvisionError
from jsinit.provision.git_setup import ensure_git_repository
from jsinit.provision.package_manager import CommandRunner, install_dev_dependencies
from jsinit.provision.package_manifest import write_manifest
from jsinit.provision.provision_opts import ProvisionOpts
from jsinit.provision.tool_configs import check_config_sources, write_tool_configs


class Provisioner(Protocol):
    def provision(self, record: SelectionRecord) -> bool:
        ...


class ProjectProvisioner(Provisioner):
    """Creates the project layout, configs and manifest, then installs tools."""

    def __init__(self, opts: ProvisionOpts, cwd: str, runner=None,
                 confirm_fn=click.confirm, which=shutil.which):
        self._opts = opts
        self._cwd = cwd
        self._runner = runner or CommandRunner()
        self._confirm_fn = confirm_fn
        self._which = which

    def provision(self, record: SelectionRecord) -> bool:
        """Provision record.target_path. Returns False after reporting a failure."""
        try:
            self._provision(record)
        except (ProvisionError, OSError, GitError) as e:
            print(f"Error: {e}", file=sys.stderr)
            return False
        return True

    def _provision(self, record):
        check_dependencies(record, self._opts, which=self._which)
        check_config_sources(record, self._cwd)
        project_dir = self._ensure_target_directory(record.target_path)

        self._create_layout(record, project_dir)
        for path in write_tool_configs(record, project_dir, self._cwd):
            print(f"Created {os.path.relpath(path, project_dir)}")
        write_manifest(record, project_dir)

        if record.is_enabled(FeatureToggle.HUSKY) and ensure_git_repository(project_dir):
            print(f"Initialized git repository in {project_dir}")

        if not self._opts.skip_install:
            install_dev_dependencies(record, self._opts, project_dir, self._runner)

    def _ensure_target_directory(self, target_path):
        project_dir = os.path.join(self._cwd, os.path.expanduser(target_path))
        if os.path.isdir(project_dir):
            return project_dir
        if os.path.exists(project_dir):
            raise ProvisionError(f"Target exists and is not a directory: {target_path}")
        if not self._opts.assume_yes and not self._confirm_fn(
            f"Directory {target_path} does not exist. Create it?", default=True
        ):
            raise ProvisionError("Aborted: target directory not created")
        os.makedirs(project_dir)
        return project_dir

    def _create_layout(self, record, project_dir):
        directories = ["src"]
        if record.is_enabled(FeatureToggle.JEST):
            directories.append("test")
        for name in directories:
            os.makedirs(os.path.join(project_dir, name), exist_ok=True)
