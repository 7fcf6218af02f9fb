import json
from pathlib import Path

import pytest

from dev_utils.domain.models import CommandResult
from dev_utils.errors import InventoryError
from dev_utils.infra.github_cli import GitHubCli


def _record_run(monkeypatch, result):
    calls = []

    def fake_run_command(command, **kwargs):
        calls.append(list(command))
        return result

    monkeypatch.setattr("dev_utils.infra.github_cli.run_command", fake_run_command)
    return calls


def test_list_repos_requests_non_archived_names(monkeypatch):
    payload = json.dumps([{"nameWithOwner": "acme/api"}, {"nameWithOwner": "acme/web"}])
    calls = _record_run(monkeypatch, CommandResult(0, payload, ""))

    repos = GitHubCli().list_repos("acme", 5000)

    assert repos == ["acme/api", "acme/web"]
    assert calls == [[
        "gh", "repo", "list", "acme", "--limit", "5000", "--no-archived", "--json", "nameWithOwner",
    ]]


def test_list_repos_empty_output(monkeypatch):
    _record_run(monkeypatch, CommandResult(0, "[]\n", ""))
    assert GitHubCli().list_repos("acme", 10) == []


def test_list_repos_failure_raises(monkeypatch):
    _record_run(monkeypatch, CommandResult(1, "", "GraphQL: Could not resolve to an Organization"))

    with pytest.raises(InventoryError, match="Could not resolve"):
        GitHubCli().list_repos("nope", 10)


def test_list_repos_bad_payload_raises(monkeypatch):
    _record_run(monkeypatch, CommandResult(0, "{not json", ""))

    with pytest.raises(InventoryError):
        GitHubCli().list_repos("acme", 10)


def test_clone_and_auth_status_commands(monkeypatch):
    calls = _record_run(monkeypatch, CommandResult(0))
    gh = GitHubCli()

    gh.clone("acme/api", Path("acme_repos") / "api")
    gh.auth_status()

    assert calls == [
        ["gh", "repo", "clone", "acme/api", str(Path("acme_repos") / "api")],
        ["gh", "auth", "status"],
    ]
