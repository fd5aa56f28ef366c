"""Unit tests for the flag tokenizer."""

import pytest

from jsinit.flags.errors import UsageError
from jsinit.flags.grammar import FlagToken, PositionalToken, tokenize
from jsinit.flags.toggles import FeatureToggle


def _flags(tokens):
    return [(t.spec.toggle, t.value) for t in tokens if isinstance(t, FlagToken) and not t.is_help]


def _positionals(tokens):
    return [t.value for t in tokens if isinstance(t, PositionalToken)]


@pytest.mark.unit
class TestShortFlags:

    @pytest.mark.parametrize("flag,toggle", [
        ("-e", FeatureToggle.ESLINT),
        ("-p", FeatureToggle.PRETTIER),
        ("-j", FeatureToggle.JEST),
        ("-hu", FeatureToggle.HUSKY),
        ("-l", FeatureToggle.LINT_STAGED),
    ])
    def test_bare_short_flag(self, flag, toggle):
        tokens = tokenize([flag, "app"])
        assert _flags(tokens) == [(toggle, None)]
        assert _positionals(tokens) == ["app"]

    def test_inline_value_appended_to_short_flag(self):
        tokens = tokenize(["-ecfg/.eslintrc.json", "app"])
        assert _flags(tokens) == [(FeatureToggle.ESLINT, "cfg/.eslintrc.json")]

    def test_husky_short_form_with_inline_value(self):
        tokens = tokenize(["-hupre-commit", "app"])
        assert _flags(tokens) == [(FeatureToggle.HUSKY, "pre-commit")]

    def test_short_h_is_help(self):
        tokens = tokenize(["-h"])
        assert len(tokens) == 1
        assert tokens[0].is_help

    def test_help_with_trailing_characters_is_rejected(self):
        with pytest.raises(UsageError, match="doesn't allow an argument"):
            tokenize(["-hx", "app"])

    def test_unknown_short_flag_is_rejected(self):
        with pytest.raises(UsageError, match="invalid option -- 'x'"):
            tokenize(["-x", "app"])


@pytest.mark.unit
class TestLongFlags:

    @pytest.mark.parametrize("flag,toggle", [
        ("--eslint", FeatureToggle.ESLINT),
        ("--prettier", FeatureToggle.PRETTIER),
        ("--jest", FeatureToggle.JEST),
        ("--husky", FeatureToggle.HUSKY),
        ("--hu", FeatureToggle.HUSKY),
        ("--lint-staged", FeatureToggle.LINT_STAGED),
    ])
    def test_bare_long_flag(self, flag, toggle):
        assert _flags(tokenize([flag, "app"])) == [(toggle, None)]

    def test_inline_value_after_equals(self):
        tokens = tokenize(["--prettier=shared/.prettierrc", "app"])
        assert _flags(tokens) == [(FeatureToggle.PRETTIER, "shared/.prettierrc")]

    def test_empty_inline_value_means_no_path(self):
        tokens = tokenize(["--jest=", "app"])
        assert _flags(tokens) == [(FeatureToggle.JEST, None)]

    def test_empty_inline_value_does_not_take_next_argument(self):
        tokens = tokenize(["--jest=", "cfg", "app"])
        assert _flags(tokens) == [(FeatureToggle.JEST, None)]
        assert _positionals(tokens) == ["cfg", "app"]

    def test_unknown_long_flag_is_rejected(self):
        with pytest.raises(UsageError, match="unrecognized option '--unknown-flag'"):
            tokenize(["--unknown-flag", "app"])

    def test_help_does_not_accept_a_value(self):
        with pytest.raises(UsageError, match="'--help' doesn't allow"):
            tokenize(["--help=yes"])


@pytest.mark.unit
class TestSeparatedValues:

    def test_next_argument_is_taken_as_value(self):
        tokens = tokenize(["-e", "path/to/cfg", "target"])
        assert _flags(tokens) == [(FeatureToggle.ESLINT, "path/to/cfg")]
        assert _positionals(tokens) == ["target"]

    def test_last_argument_is_never_taken_as_value(self):
        tokens = tokenize(["-p", "target"])
        assert _flags(tokens) == [(FeatureToggle.PRETTIER, None)]
        assert _positionals(tokens) == ["target"]

    def test_following_flag_is_not_taken_as_value(self):
        tokens = tokenize(["-e", "-p", "target"])
        assert _flags(tokens) == [
            (FeatureToggle.ESLINT, None),
            (FeatureToggle.PRETTIER, None),
        ]

    def test_each_flag_takes_its_own_value(self):
        tokens = tokenize(["--eslint", "a.json", "-j", "jest.config.js", "target"])
        assert _flags(tokens) == [
            (FeatureToggle.ESLINT, "a.json"),
            (FeatureToggle.JEST, "jest.config.js"),
        ]
        assert _positionals(tokens) == ["target"]


@pytest.mark.unit
class TestPositionals:

    def test_double_dash_ends_flags(self):
        tokens = tokenize(["-e", "--", "-weird-dir"])
        assert _flags(tokens) == [(FeatureToggle.ESLINT, None)]
        assert _positionals(tokens) == ["-weird-dir"]

    def test_single_dash_is_positional(self):
        assert _positionals(tokenize(["-"])) == ["-"]

    def test_empty_argv(self):
        assert tokenize([]) == []
