from __future__ import annotations

import shutil

import pytest
from git import Actor, Repo

from codecity.parser import parse_log
from codecity.repo import GIT_LOG_ARGS, get_log_text, git_log_command, open_repo

pytestmark = pytest.mark.skipif(shutil.which("git") is None, reason="git executable not available")


@pytest.fixture()
def history(tmp_path):
    repo = Repo.init(tmp_path)
    alice = Actor("Alice Liddell", "alice@example.com")
    bob = Actor("Bob", "bob@example.com")

    (tmp_path / "a.txt").write_text("one\ntwo\n")
    repo.index.add(["a.txt"])
    repo.index.commit("first", author=alice, committer=alice, author_date="2024-01-01T10:00:00", commit_date="2024-01-01T10:00:00")

    (tmp_path / "a.txt").write_text("one\n")
    (tmp_path / "b.txt").write_text("x\ny\nz\n")
    repo.index.add(["a.txt", "b.txt"])
    repo.index.commit("second", author=bob, committer=bob, author_date="2024-01-02T10:00:00", commit_date="2024-01-02T10:00:00")
    return repo


def test_git_log_command():
    assert git_log_command() == "git log --all --numstat --date=short --pretty=format:--%h--%ad--%aN --no-renames"
    assert "--no-renames" in GIT_LOG_ARGS


def test_open_repo_from_subdirectory(history, tmp_path):
    sub = tmp_path / "nested"
    sub.mkdir()
    assert open_repo(sub).working_dir == history.working_dir


def test_open_repo_without_git(tmp_path_factory):
    with pytest.raises(ValueError, match="No git repository"):
        open_repo(tmp_path_factory.mktemp("plain") / "missing")


def test_log_text_parses_into_records(history):
    records = parse_log(get_log_text(history))
    by_author = {(r.author, r.entity): r for r in records}
    assert len(records) == 3
    assert by_author[("Alice Liddell", "a.txt")].loc_added == 2
    assert by_author[("Bob", "a.txt")].loc_deleted == 1
    assert by_author[("Bob", "b.txt")].date == "2024-01-02"
    assert len({r.rev for r in records}) == 2
