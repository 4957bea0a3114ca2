# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for strict and progressive report rendering."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from critgate.core.models import GateMode, ReportConfig, Violation
from critgate.reporting.formatters import (
    ViolationTemplate,
    render_bypass_hint,
    render_progressive,
    render_strict,
    short_rule_name,
)
from critgate.reporting.highlighting import NEUTRAL_STYLE, colorize, severity_style

PATH = "lib/Foo.pm"


def _lines(text: str) -> list[str]:
    return text.splitlines()


def test_render_strict_uses_template_in_sorted_order(make_violation) -> None:
    config = ReportConfig(template="{line}:{column} {rule} {severity} {message}")
    violations = [
        make_violation(rule="B", severity=2, line=3, column=1, message="second"),
        make_violation(rule="A", severity=5, line=9, column=4, message="first"),
    ]

    text = render_strict(violations, PATH, config)

    assert _lines(text) == [
        "lib/Foo.pm: 9:4 A 5 first",
        "lib/Foo.pm: 3:1 B 2 second",
    ]
    assert text.endswith("\n")


def test_render_strict_default_template(make_violation) -> None:
    text = render_strict([make_violation(rule="R", severity=3, line=7, column=2, message="msg")], PATH, ReportConfig())

    assert text == "lib/Foo.pm:7:2: [R] msg (Severity: 3)\n"


def test_render_strict_empty_when_clean() -> None:
    assert render_strict([], PATH, ReportConfig()) == ""


def test_render_strict_truncates_after_sorting(make_violation) -> None:
    violations = [make_violation(rule=f"R{index:02d}", severity=1, line=index) for index in range(55)]
    violations += [make_violation(rule="Severe", severity=5, line=index) for index in range(5)]
    config = ReportConfig(max_violations=50)

    lines = _lines(render_strict(violations, PATH, config))

    assert len(lines) == 51
    assert lines[-1] == "Only 50/60 most severe violations are shown"
    assert sum("[Severe]" in line for line in lines) == 5
    assert "[R44]" in lines[-2]
    assert not any("[R45]" in line for line in lines)


def test_render_strict_no_notice_at_exact_cap(make_violation) -> None:
    violations = [make_violation(line=index) for index in range(3)]

    lines = _lines(render_strict(violations, PATH, ReportConfig(max_violations=3)))

    assert len(lines) == 3
    assert not any(line.startswith("Only ") for line in lines)


def test_render_strict_highlights_by_severity(make_violation) -> None:
    config = ReportConfig(highlight_by_severity=True)
    text = render_strict([make_violation(severity=5)], PATH, config)

    assert text.startswith("\x1b[31m")
    assert text.rstrip("\n").endswith("\x1b[0m")


def test_unknown_severity_uses_neutral_band() -> None:
    config = ReportConfig(highlight_by_severity=True)
    violation = Violation(rule="Odd", severity=42, line=1, column=1, message="m")

    text = render_strict([violation], PATH, config)

    assert severity_style(42) == NEUTRAL_STYLE
    assert "\x1b[" not in text
    assert colorize("plain", NEUTRAL_STYLE) == "plain"


@pytest.mark.parametrize("severity", [1, 2, 3, 4, 5])
def test_every_known_severity_has_a_band(severity: int) -> None:
    assert severity_style(severity) != NEUTRAL_STYLE


def test_template_without_file_gets_file_prefix() -> None:
    config = ReportConfig(template="{message}")

    assert config.template == "{file}: {message}"


@pytest.mark.parametrize("template", ["{nope}", "{0}", "{file"])
def test_invalid_templates_are_rejected(template: str) -> None:
    with pytest.raises(ValidationError):
        ReportConfig(template=template)


def test_template_format_errors_fall_back_to_default(make_violation) -> None:
    template = ViolationTemplate("{file}: {rule:d}")

    rendered = template.render(make_violation(rule="R", severity=2, line=1, column=1, message="m"), PATH)

    assert rendered == "lib/Foo.pm:1:1: [R] m (Severity: 2)"


def test_progressive_empty_when_nothing_regressed(make_violation) -> None:
    before = [make_violation(rule="X"), make_violation(rule="X", line=2)]
    after = [make_violation(rule="X", line=5), make_violation(rule="X", line=6)]
    config = ReportConfig(mode=GateMode.PROGRESSIVE)

    assert render_progressive(before, after, PATH, config) == ""


def test_progressive_lists_violations_then_regressions(make_violation) -> None:
    rule = "Perl::Critic::Policy::Subroutines::ProhibitExplicitReturnUndef"
    after = [make_violation(rule=rule, severity=5, line=line, message="return undef") for line in (1, 2, 3)]
    config = ReportConfig(mode=GateMode.PROGRESSIVE)

    lines = _lines(render_progressive([], after, PATH, config))

    assert len(lines) == 4
    assert lines[0].startswith("lib/Foo.pm:1:1: [Perl::Critic::Policy::Subroutines")
    assert lines[-1] == (
        "lib/Foo.pm: [Subroutines::ProhibitExplicitReturnUndef] You should fix at least 3 violation(s) "
        "of this type (was: 0, now: 3) (Severity: 5)"
    )


def test_progressive_over_cap_suppresses_listing(make_violation) -> None:
    after = [make_violation(rule="X", line=line) for line in range(6)]
    before = [make_violation(rule="X", line=line) for line in range(4)]
    config = ReportConfig(mode=GateMode.PROGRESSIVE, max_violations=5)

    lines = _lines(render_progressive(before, after, PATH, config))

    assert lines == [
        "lib/Foo.pm: Too many violations (6). Please run perlcritic locally, e.g.: "
        "perlcritic --single-policy PolicyNameFromBelow lib/Foo.pm",
        "lib/Foo.pm: [X] You should fix at least 2 violation(s) of this type (was: 4, now: 6) (Severity: 5)",
    ]


def test_progressive_regression_lines_follow_regression_order(make_violation) -> None:
    after = [
        make_violation(rule="Mild", severity=2),
        make_violation(rule="Harsh", severity=4),
        make_violation(rule="Harsh", severity=4, line=2),
        make_violation(rule="Quick", severity=4),
    ]
    config = ReportConfig(mode=GateMode.PROGRESSIVE)

    lines = [line for line in _lines(render_progressive([], after, PATH, config)) if "You should fix" in line]

    assert [line.split("[", 1)[1].split("]", 1)[0] for line in lines] == ["Quick", "Harsh", "Mild"]


def test_progressive_highlight_marks_regression_lines(make_violation) -> None:
    config = ReportConfig(mode=GateMode.PROGRESSIVE, highlight_by_severity=True)

    lines = _lines(render_progressive([], [make_violation(severity=9)], PATH, config))

    assert "\x1b[" not in lines[0]
    assert lines[1].startswith("\x1b[")


def test_short_rule_name_strips_policy_namespace() -> None:
    assert short_rule_name("Perl::Critic::Policy::Variables::ProhibitPunctuationVars") == (
        "Variables::ProhibitPunctuationVars"
    )
    assert short_rule_name("Custom::Rule") == "Custom::Rule"


def test_render_bypass_hint_names_prefix() -> None:
    hint = render_bypass_hint("NO CRITIC")

    assert hint.startswith("---\n")
    assert "'NO CRITIC'" in hint
    assert '"NO CRITIC: emergency hotfix"' in hint


def test_render_bypass_hint_uses_commit_command() -> None:
    hint = render_bypass_hint("NO CRITIC", commit_command="svn ci")

    assert 'e.g.: svn ci -m "NO CRITIC: emergency hotfix"' in hint
    assert "git commit" not in hint
