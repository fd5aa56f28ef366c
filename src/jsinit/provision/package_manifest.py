"""package.json construction and in-place update."""

import json
import os
import re

from jsinit.flags.toggles import FeatureToggle
from jsinit.provision.errors import ProvisionError

MANIFEST_NAME = "package.json"

TOGGLE_SCRIPTS = {
    FeatureToggle.ESLINT: ("lint", "eslint ."),
    FeatureToggle.PRETTIER: ("format", "prettier --write ."),
    FeatureToggle.JEST: ("test", "jest"),
    FeatureToggle.HUSKY: ("prepare", "husky"),
}


def package_name(project_dir):
    """npm-safe package name derived from the project directory name."""
    base = os.path.basename(os.path.abspath(project_dir)).lower()
    name = re.sub(r"[^a-z0-9._~-]+", "-", base).strip("-._")
    return name or "app"


def new_manifest(project_dir):
    return {
        "name": package_name(project_dir),
        "version": "1.0.0",
        "private": True,
        "scripts": {},
        "devDependencies": {},
    }


def add_scripts(manifest, record):
    """Add scripts for enabled toggles without overwriting existing ones.

    Returns the names of the scripts that were added.
    """
    scripts = manifest.setdefault("scripts", {})
    added = []
    for toggle in record.enabled_toggles():
        if toggle not in TOGGLE_SCRIPTS:
            continue
        name, command = TOGGLE_SCRIPTS[toggle]
        if name not in scripts or _is_npm_placeholder(name, scripts[name]):
            scripts[name] = command
            added.append(name)
    return added


def _is_npm_placeholder(name, command):
    return name == "test" and "no test specified" in command


def _load_manifest(path):
    try:
        with open(path) as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ProvisionError(f"Cannot parse {path}: {e}") from e


def write_manifest(record, project_dir):
    """Create or update project_dir/package.json. Returns its path."""
    path = os.path.join(project_dir, MANIFEST_NAME)
    if os.path.isfile(path):
        manifest = _load_manifest(path)
    else:
        manifest = new_manifest(project_dir)
    add_scripts(manifest, record)
    with open(path, "w") as f:
        json.dump(manifest, f, indent=2)
        f.write("\n")
    return path
