"""Place a config file for each enabled toggle: reuse a given one or generate a default."""

import json
import os
import shutil
import stat
from dataclasses import dataclass

from jsinit.flags.toggles import FeatureToggle
from jsinit.provision.errors import ProvisionError
from jsinit.templates.template_renderer import render_template


@dataclass(frozen=True)
class ConfigLayout:
    """Where a toggle's config lives and which file names the tool recognizes."""

    default_name: str
    recognized_names: tuple[str, ...] = ()
    directory: str = ""
    executable: bool = False


CONFIG_LAYOUTS = {
    FeatureToggle.ESLINT: ConfigLayout(
        "eslint.config.js",
        ("eslint.config.mjs", "eslint.config.cjs", "eslint.config.ts",
         ".eslintrc", ".eslintrc.js", ".eslintrc.cjs", ".eslintrc.json", ".eslintrc.yml"),
    ),
    FeatureToggle.PRETTIER: ConfigLayout(
        ".prettierrc.json",
        (".prettierrc", ".prettierrc.js", ".prettierrc.cjs", ".prettierrc.yml",
         ".prettierrc.yaml", ".prettierrc.toml", "prettier.config.js", "prettier.config.cjs"),
    ),
    FeatureToggle.JEST: ConfigLayout(
        "jest.config.js",
        ("jest.config.cjs", "jest.config.mjs", "jest.config.ts", "jest.config.json"),
    ),
    FeatureToggle.HUSKY: ConfigLayout(
        "pre-commit",
        ("commit-msg", "pre-push", "prepare-commit-msg"),
        directory=".husky",
        executable=True,
    ),
    FeatureToggle.LINT_STAGED: ConfigLayout(
        ".lintstagedrc.json",
        (".lintstagedrc", ".lintstagedrc.js", ".lintstagedrc.cjs", ".lintstagedrc.yml",
         ".lintstagedrc.yaml", "lint-staged.config.js"),
    ),
}


def destination_name(toggle, source_path=None):
    """File name for toggle's config; keeps a recognized source basename."""
    layout = CONFIG_LAYOUTS[toggle]
    if source_path:
        basename = os.path.basename(source_path)
        if basename == layout.default_name or basename in layout.recognized_names:
            return basename
    return layout.default_name


def hook_command(record):
    """Command the Husky pre-commit hook runs for this selection."""
    if record.is_enabled(FeatureToggle.LINT_STAGED):
        return "npx lint-staged"
    if record.is_enabled(FeatureToggle.JEST):
        return "npm test"
    if record.is_enabled(FeatureToggle.ESLINT):
        return "npm run lint"
    return "exit 0"


def lint_staged_config(record):
    """lint-staged task map for the linters and formatters that are enabled."""
    eslint = record.is_enabled(FeatureToggle.ESLINT)
    prettier = record.is_enabled(FeatureToggle.PRETTIER)
    config = {}
    source_tasks = []
    if eslint:
        source_tasks.append("eslint --fix")
    if prettier:
        source_tasks.append("prettier --write")
    if source_tasks:
        config["*.{js,jsx,ts,tsx}"] = source_tasks
    if prettier:
        config["*.{json,md,css,yml,yaml}"] = ["prettier --write"]
    if not config and record.is_enabled(FeatureToggle.JEST):
        config["*.{js,jsx,ts,tsx}"] = ["jest --bail --findRelatedTests --passWithNoTests"]
    if not config:
        # lint-staged rejects an empty task map.
        config["*"] = ["true"]
    return config


def render_default_config(toggle, record):
    if toggle is FeatureToggle.LINT_STAGED:
        return json.dumps(lint_staged_config(record), indent=2) + "\n"
    template_name = {
        FeatureToggle.ESLINT: "eslint.config.js.j2",
        FeatureToggle.PRETTIER: "prettierrc.json.j2",
        FeatureToggle.JEST: "jest.config.js.j2",
        FeatureToggle.HUSKY: "pre-commit.j2",
    }[toggle]
    return render_template(
        template_name,
        package=__package__,
        with_prettier=record.is_enabled(FeatureToggle.PRETTIER),
        with_jest=record.is_enabled(FeatureToggle.JEST),
        hook_command=hook_command(record),
    )


def _resolve_source(config_path, cwd):
    source = os.path.join(cwd, os.path.expanduser(config_path))
    if not os.path.isfile(source):
        raise ProvisionError(f"Config file not found: {config_path}")
    return source


def check_config_sources(record, cwd):
    """Raise ProvisionError unless every reused config path names an existing file."""
    for toggle in record.enabled_toggles():
        config_path = record.config_path(toggle)
        if config_path:
            _resolve_source(config_path, cwd)


def write_tool_config(toggle, record, project_dir, cwd):
    """Write toggle's config into project_dir and return its path."""
    layout = CONFIG_LAYOUTS[toggle]
    config_path = record.config_path(toggle)
    target_dir = os.path.join(project_dir, layout.directory)
    os.makedirs(target_dir, exist_ok=True)
    destination = os.path.join(target_dir, destination_name(toggle, config_path))

    if config_path:
        source = _resolve_source(config_path, cwd)
        if os.path.abspath(source) != os.path.abspath(destination):
            shutil.copyfile(source, destination)
    else:
        with open(destination, "w") as f:
            f.write(render_default_config(toggle, record))

    if layout.executable:
        mode = os.stat(destination).st_mode
        os.chmod(destination, mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return destination


def write_tool_configs(record, project_dir, cwd):
    """Write configs for every enabled toggle. Returns the written paths."""
    return [
        write_tool_config(toggle, record, project_dir, cwd)
        for toggle in record.enabled_toggles()
    ]
