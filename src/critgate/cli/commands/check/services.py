# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Service helpers backing the ``check`` command."""

from __future__ import annotations

from ....config import ConfigError, GateConfig, load_config
from ....core.models import GateVerdict
from ....gate import Gate
from ....reporting.formatters import render_bypass_hint
from ....tools.perlcritic import AnalyzerError, PerlCriticAnalyzer
from ....vcs import GitSnapshotProvider, SnapshotError, SnapshotProvider, SvnLookSnapshotProvider
from ...core.shared import EXIT_ERROR, CLIError, CLILogger
from .models import CheckCLIOptions, VcsKind


def load_gate_config(options: CheckCLIOptions) -> GateConfig:
    """Load the configuration named on the command line.

    Args:
        options: Parsed command options.

    Returns:
        GateConfig: Validated configuration.

    Raises:
        CLIError: If the configuration is missing or invalid.
    """

    try:
        return load_config(options.config)
    except ConfigError as exc:
        raise CLIError(str(exc), exit_code=EXIT_ERROR) from exc


def build_snapshot_provider(options: CheckCLIOptions) -> SnapshotProvider:
    """Return the snapshot provider matching the requested VCS.

    Args:
        options: Parsed command options.

    Returns:
        SnapshotProvider: Provider for the change under inspection.

    Raises:
        CLIError: If the transaction/revision arguments are inconsistent.
    """

    if options.vcs is VcsKind.GIT:
        if options.transaction is not None:
            raise CLIError("--transaction is only supported with --vcs svn")
        return GitSnapshotProvider(
            options.repository,
            revision=options.revision,
            message_file=options.message_file,
        )

    if options.transaction and options.revision:
        raise CLIError("You cannot set both transaction and revision IDs")
    if not options.transaction and not options.revision:
        raise CLIError("You should set either transaction or revision ID")
    revision: int | None = None
    if options.revision is not None:
        try:
            revision = int(options.revision)
        except ValueError as exc:
            raise CLIError(f"Subversion revision must be an integer, got {options.revision!r}") from exc
    return SvnLookSnapshotProvider(options.repository, transaction=options.transaction, revision=revision)


def build_gate(config: GateConfig, *, logger: CLILogger) -> Gate:
    """Assemble the gate and its collaborators from ``config``.

    Args:
        config: Validated configuration.
        logger: CLI logger receiving debug output.

    Returns:
        Gate: Gate ready to evaluate a change.
    """

    analyzer = PerlCriticAnalyzer(executable=config.perlcritic, timeout=config.analyzer_timeout)
    return Gate(
        config.report_config(),
        analyzer=analyzer,
        resolver=config.profile_resolver(),
        bypass=config.bypass(),
        debug=logger.debug,
    )


def render_verdict(
    verdict: GateVerdict,
    config: GateConfig,
    *,
    logger: CLILogger,
    vcs: VcsKind = VcsKind.GIT,
) -> None:
    """Write the verdict's report to stderr.

    Args:
        verdict: Decided verdict.
        config: Configuration providing the bypass hint settings.
        logger: CLI logger used for output.
        vcs: Version-control system named in the bypass example.
    """

    if verdict.bypassed:
        logger.warn("Emergency commit: all checks bypassed")
        return
    if verdict.allowed:
        logger.debug(f"allowed files={len(verdict.files)}")
        return
    logger.echo(verdict.report_text)
    if config.allow_emergency_commits:
        logger.echo(render_bypass_hint(config.emergency_comment_prefix, commit_command=vcs.commit_command))


def run_check(options: CheckCLIOptions, *, logger: CLILogger) -> int:
    """Evaluate the change described by ``options`` and return the exit code.

    Args:
        options: Parsed command options.
        logger: CLI logger used for output.

    Returns:
        int: ``0`` to allow the change, ``1`` to deny it, ``255`` on errors.
    """

    try:
        config = load_gate_config(options)
        snapshots = build_snapshot_provider(options)
        verdict = build_gate(config, logger=logger).evaluate(snapshots)
    except CLIError as exc:
        logger.fail(str(exc))
        return exc.exit_code
    except (AnalyzerError, SnapshotError) as exc:
        logger.fail(str(exc))
        return EXIT_ERROR
    render_verdict(verdict, config, logger=logger, vcs=options.vcs)
    return verdict.exit_code()


__all__ = [
    "build_gate",
    "build_snapshot_provider",
    "load_gate_config",
    "render_verdict",
    "run_check",
]
