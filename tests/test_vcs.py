# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the git and svnlook snapshot providers."""

from __future__ import annotations

import shutil
import subprocess
from collections.abc import Mapping, Sequence
from pathlib import Path

import pytest

from critgate.vcs import ChangeSet, GitSnapshotProvider, SnapshotError, SvnLookSnapshotProvider
from critgate.vcs.base import SubprocessRunner


class _Runner:
    def __init__(self, responses: Mapping[tuple[str, ...], str]) -> None:
        self.responses = dict(responses)
        self.calls: list[tuple[str, ...]] = []

    def __call__(self, args: Sequence[str]) -> str:
        key = tuple(args)
        self.calls.append(key)
        if key not in self.responses:
            raise SnapshotError(f"unexpected command: {key}")
        return self.responses[key]


def test_changeset_sorts_and_drops_directories() -> None:
    changes = ChangeSet(added=["b.pm", "dir/", "a.pm", "a.pm"], modified=[])

    assert changes.added == ("a.pm", "b.pm")


def test_git_staged_changes(tmp_path: Path) -> None:
    runner = _Runner(
        {
            ("git", "diff", "--cached", "--name-status", "--no-renames"): (
                "A\tlib/New.pm\nM\tlib/Old.pm\nD\tlib/Gone.pm\nT\tbin/tool.pl\n"
            ),
        },
    )
    provider = GitSnapshotProvider(tmp_path, runner=runner)

    changes = provider.changes()

    assert changes.added == ("lib/New.pm",)
    assert changes.modified == ("bin/tool.pl", "lib/Old.pm")


def test_git_staged_content_and_baseline(tmp_path: Path) -> None:
    runner = _Runner(
        {
            ("git", "show", ":lib/Old.pm"): "new\n",
            ("git", "show", "HEAD:lib/Old.pm"): "old\n",
        },
    )
    provider = GitSnapshotProvider(tmp_path, runner=runner)

    assert provider.current("lib/Old.pm") == "new\n"
    assert provider.previous("lib/Old.pm") == "old\n"
    assert provider.log_message() == ""


def test_git_revision_mode(tmp_path: Path) -> None:
    runner = _Runner(
        {
            ("git", "rev-list", "--parents", "-n", "1", "abc123"): "abc123 f00d\n",
            ("git", "diff", "--name-status", "--no-renames", "f00d", "abc123"): "M\tlib/A.pm\n",
            ("git", "show", "abc123:lib/A.pm"): "after",
            ("git", "show", "abc123^:lib/A.pm"): "before",
            ("git", "log", "-1", "--format=%B", "abc123"): "NO CRITIC: hotfix\n",
        },
    )
    provider = GitSnapshotProvider(tmp_path, revision="abc123", runner=runner)

    assert provider.changes().modified == ("lib/A.pm",)
    assert provider.current("lib/A.pm") == "after"
    assert provider.previous("lib/A.pm") == "before"
    assert provider.log_message().startswith("NO CRITIC")


def test_git_root_revision_lists_every_file(tmp_path: Path) -> None:
    runner = _Runner(
        {
            ("git", "rev-list", "--parents", "-n", "1", "root1"): "root1\n",
            ("git", "diff-tree", "-r", "--root", "--no-commit-id", "--name-status", "--no-renames", "root1"): (
                "A\tlib/A.pm\n"
            ),
        },
    )
    provider = GitSnapshotProvider(tmp_path, revision="root1", runner=runner)

    assert provider.changes().added == ("lib/A.pm",)


def test_git_message_file(tmp_path: Path) -> None:
    message = tmp_path / "COMMIT_EDITMSG"
    message.write_text("Fix parser\n", encoding="utf-8")
    provider = GitSnapshotProvider(tmp_path, message_file=message, runner=_Runner({}))

    assert provider.log_message() == "Fix parser\n"


def test_git_missing_message_file(tmp_path: Path) -> None:
    provider = GitSnapshotProvider(tmp_path, message_file=tmp_path / "nope", runner=_Runner({}))

    with pytest.raises(SnapshotError, match="Cannot read commit message"):
        provider.log_message()


def test_svn_transaction(tmp_path: Path) -> None:
    repo = str(tmp_path)
    runner = _Runner(
        {
            ("svnlook", "changed", "-t", "7-1", repo): (
                "A   trunk/lib/New.pm\nU   trunk/lib/Old.pm\n_U  trunk/lib/Props.pm\nD   trunk/lib/Gone.pm\nA   trunk/lib/\n"
            ),
            ("svnlook", "cat", "-t", "7-1", repo, "trunk/lib/Old.pm"): "new",
            ("svnlook", "youngest", repo): "6\n",
            ("svnlook", "cat", "-r", "6", repo, "trunk/lib/Old.pm"): "old",
            ("svnlook", "log", "-t", "7-1", repo): "NO CRITIC: hurry\n",
        },
    )
    provider = SvnLookSnapshotProvider(tmp_path, transaction="7-1", runner=runner)

    changes = provider.changes()

    assert changes.added == ("trunk/lib/New.pm",)
    assert changes.modified == ("trunk/lib/Old.pm", "trunk/lib/Props.pm")
    assert provider.current("trunk/lib/Old.pm") == "new"
    assert provider.previous("trunk/lib/Old.pm") == "old"
    assert provider.previous("trunk/lib/Old.pm") == "old"
    assert runner.calls.count(("svnlook", "youngest", repo)) == 1
    assert provider.log_message() == "NO CRITIC: hurry\n"


def test_svn_revision_compares_with_previous_revision(tmp_path: Path) -> None:
    provider = SvnLookSnapshotProvider(tmp_path, revision=12, runner=_Runner({}))

    assert provider.previous_revision() == 11


def test_svn_bad_youngest(tmp_path: Path) -> None:
    runner = _Runner({("svnlook", "youngest", str(tmp_path)): "garbage"})
    provider = SvnLookSnapshotProvider(tmp_path, transaction="1-1", runner=runner)

    with pytest.raises(SnapshotError, match="youngest"):
        provider.previous_revision()


@pytest.mark.parametrize(("transaction", "revision"), [(None, None), ("1-1", 2)])
def test_svn_requires_exactly_one_target(tmp_path: Path, transaction, revision) -> None:
    with pytest.raises(ValueError):
        SvnLookSnapshotProvider(tmp_path, transaction=transaction, revision=revision)


def test_subprocess_runner_wraps_missing_tool() -> None:
    runner = SubprocessRunner(tool="svnlook-missing-xyz")

    with pytest.raises(SnapshotError, match="Cannot run"):
        runner(["svnlook-missing-xyz", "youngest", "/tmp"])


requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")


def _git(repo: Path, *args: str) -> None:
    subprocess.run(["git", *args], cwd=repo, check=True, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)


def _init_repo(repo: Path) -> None:
    _git(repo, "init")
    _git(repo, "config", "user.name", "CritgateTest")
    _git(repo, "config", "user.email", "critgate@example.com")
    _git(repo, "config", "commit.gpgsign", "false")


@requires_git
def test_git_latin1_source_survives(tmp_path: Path) -> None:
    _init_repo(tmp_path)
    (tmp_path / "Legacy.pm").write_bytes(b"package Legacy;\n# caf\xe9\n1;\n")
    _git(tmp_path, "add", "Legacy.pm")
    provider = GitSnapshotProvider(tmp_path)

    content = provider.current("Legacy.pm")

    assert content.startswith("package Legacy;\n")
    assert content.encode("utf-8", "surrogateescape") == b"package Legacy;\n# caf\xe9\n1;\n"
    assert provider.changes().added == ("Legacy.pm",)


@requires_git
def test_git_merge_revision_compares_with_first_parent(tmp_path: Path) -> None:
    _init_repo(tmp_path)
    (tmp_path / "Base.pm").write_text("package Base;\n1;\n", encoding="utf-8")
    (tmp_path / "Side.pm").write_text("package Side;\n1;\n", encoding="utf-8")
    _git(tmp_path, "add", ".")
    _git(tmp_path, "commit", "-m", "initial")
    _git(tmp_path, "checkout", "-b", "side")
    (tmp_path / "Side.pm").write_text("package Side;\nprint 1;\n1;\n", encoding="utf-8")
    _git(tmp_path, "commit", "-am", "side change")
    _git(tmp_path, "checkout", "-")
    (tmp_path / "Base.pm").write_text("package Base;\nprint 2;\n1;\n", encoding="utf-8")
    _git(tmp_path, "commit", "-am", "mainline change")
    _git(tmp_path, "merge", "--no-ff", "--no-edit", "side")
    provider = GitSnapshotProvider(tmp_path, revision="HEAD")

    changes = provider.changes()

    assert changes.modified == ("Side.pm",)
    assert provider.previous("Side.pm") == "package Side;\n1;\n"
    assert "print 1;" in provider.current("Side.pm")
