"""Resolve the jsinit command line into a SelectionRecord."""

from jsinit.flags.errors import HelpRequested, UsageError
from jsinit.flags.grammar import FlagToken, PositionalToken, tokenize
from jsinit.flags.toggles import FeatureToggle, SelectionRecord, ToggleState


def resolve_flags(argv) -> SelectionRecord:
    """Parse argv into a SelectionRecord.

    Raises:
        HelpRequested: -h/--help was given.
        UsageError: unknown or malformed flags, a positional count other than
            one, or an empty target path.
    """
    tokens = tokenize(argv)
    flags = [t for t in tokens if isinstance(t, FlagToken)]
    if any(flag.is_help for flag in flags):
        raise HelpRequested()

    target_path = _target_path([t for t in tokens if isinstance(t, PositionalToken)])
    observed = _observe_toggles(flags)
    return SelectionRecord(target_path=target_path, toggles=apply_defaults(observed))


def _target_path(positionals):
    if not positionals:
        raise UsageError("missing target path")
    if len(positionals) > 1:
        extra = " ".join(p.value for p in positionals[1:])
        raise UsageError(f"expected exactly one target path, got extra: {extra}")
    target_path = positionals[0].value.strip()
    if not target_path:
        raise UsageError("target path must not be empty")
    return target_path


def _observe_toggles(flags):
    """Map each named toggle to the last config path given for it, or None."""
    observed = {}
    for flag in flags:
        toggle = flag.spec.toggle
        observed[toggle] = flag.value or observed.get(toggle)
    return observed


def apply_defaults(observed) -> dict[FeatureToggle, ToggleState]:
    """Apply the default-enablement rule to explicit toggle observations.

    With no toggle named at all, every toggle is enabled with a generated
    config. Once any toggle is named, only the named ones are enabled.
    """
    if not observed:
        return {toggle: ToggleState(enabled=True) for toggle in FeatureToggle}
    return {
        toggle: ToggleState(enabled=toggle in observed, config_path=observed.get(toggle))
        for toggle in FeatureToggle
    }
