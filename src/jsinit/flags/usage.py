"""Usage text for the jsinit command line."""

PROG_NAME = "jsinit"

USAGE = f"""\
Usage: {PROG_NAME} [-e|--eslint[=path]] [-p|--prettier[=path]] [-j|--jest[=path]]
              [-hu|--husky[=path]] [-l|--lint-staged[=path]] [-h|--help]
              targetPath

Initialize a JavaScript project in targetPath.

With no feature flags every tool is enabled with a generated config.
Naming any feature flag enables only the named tools.

Options:
  -e, --eslint[=path]       Enable ESLint, optionally reusing the config at path
  -p, --prettier[=path]     Enable Prettier, optionally reusing the config at path
  -j, --jest[=path]         Enable Jest, optionally reusing the config at path
  -hu, --husky[=path]       Enable Husky, optionally reusing the hook at path
  -l, --lint-staged[=path]  Enable lint-staged, optionally reusing the config at path
  -h, --help                Show this message and exit

A config path may be written inline (-ecfg.json, --eslint=cfg.json) or as the
next argument (-e cfg.json), as long as targetPath comes last.
"""


def usage_text() -> str:
    return USAGE
