"""Flag table and tokenizer for the jsinit command line.

Every toggle flag takes an optional config path. Short forms take the value
appended directly (``-ecfg.json``), long forms after ``=`` (``--eslint=cfg.json``).
A toggle without an inline value takes the next argument as its value when that
argument is not flag-like and is not the last one, which is reserved for the
target path.
"""

from dataclasses import dataclass

from jsinit.flags.errors import UsageError
from jsinit.flags.toggles import FeatureToggle


@dataclass(frozen=True)
class FlagSpec:
    short_names: tuple[str, ...]
    long_names: tuple[str, ...]
    toggle: FeatureToggle | None = None

    @property
    def takes_value(self):
        return self.toggle is not None

    @property
    def display_name(self):
        return f"--{self.long_names[0]}"


HELP = FlagSpec(short_names=("h",), long_names=("help",))

FLAGS = (
    FlagSpec(("e",), ("eslint",), FeatureToggle.ESLINT),
    FlagSpec(("p",), ("prettier",), FeatureToggle.PRETTIER),
    FlagSpec(("j",), ("jest",), FeatureToggle.JEST),
    FlagSpec(("hu",), ("husky", "hu"), FeatureToggle.HUSKY),
    FlagSpec(("l",), ("lint-staged",), FeatureToggle.LINT_STAGED),
    HELP,
)

_LONG = {name: spec for spec in FLAGS for name in spec.long_names}
# Longest first so "-hu" wins over "-h".
_SHORT = sorted(
    ((name, spec) for spec in FLAGS for name in spec.short_names),
    key=lambda item: len(item[0]),
    reverse=True,
)


@dataclass(frozen=True)
class FlagToken:
    spec: FlagSpec
    value: str | None = None

    @property
    def is_help(self):
        return self.spec is HELP


@dataclass(frozen=True)
class PositionalToken:
    value: str


def _is_flag_like(arg):
    return arg.startswith("-") and arg != "-"


def _parse_long(arg):
    name, sep, value = arg[2:].partition("=")
    spec = _LONG.get(name)
    if spec is None:
        raise UsageError(f"unrecognized option '--{name}'")
    if sep and not spec.takes_value:
        raise UsageError(f"option '--{name}' doesn't allow an argument")
    return spec, (value if sep else None)


def _parse_short(arg):
    body = arg[1:]
    for name, spec in _SHORT:
        if not body.startswith(name):
            continue
        rest = body[len(name):]
        if rest and not spec.takes_value:
            raise UsageError(f"option '-{name}' doesn't allow an argument")
        return spec, (rest if rest else None)
    raise UsageError(f"invalid option -- '{body[0]}'")


def _parse_flag(arg):
    if arg.startswith("--"):
        return _parse_long(arg)
    return _parse_short(arg)


def tokenize(argv) -> list[FlagToken | PositionalToken]:
    """Split argv into flag and positional tokens.

    Raises UsageError on an unknown flag or malformed flag syntax.
    """
    args = list(argv)
    tokens = []
    i = 0
    while i < len(args):
        arg = args[i]
        i += 1
        if arg == "--":
            tokens.extend(PositionalToken(rest) for rest in args[i:])
            break
        if not _is_flag_like(arg):
            tokens.append(PositionalToken(arg))
            continue
        spec, value = _parse_flag(arg)
        if spec.takes_value and value is None and _can_take_next(args, i):
            value = args[i]
            i += 1
        tokens.append(FlagToken(spec, value or None))
    return tokens


def _can_take_next(args, i):
    return i < len(args) - 1 and not _is_flag_like(args[i])
