from dev_utils.core.pull import _extract_pull_failure_reason


def test_extract_pull_failure_reason_known_cases():
    assert _extract_pull_failure_reason("fatal: not a git repository") == "not_git_repo"
    assert _extract_pull_failure_reason("error: could not apply 3f2a1b0... wip") == "rebase_conflict"
    assert _extract_pull_failure_reason("CONFLICT (content): Merge conflict in a.txt") == "rebase_conflict"
    assert _extract_pull_failure_reason("error: cannot pull with rebase: You have unstaged changes.") == "local_changes_conflict"
    assert _extract_pull_failure_reason("There is no tracking information for the current branch.") == "no_upstream"
    assert _extract_pull_failure_reason("fatal: couldn't find remote ref main") == "remote_ref_missing"
    assert _extract_pull_failure_reason("fatal: refusing to merge unrelated histories") == "unrelated_histories"
    assert _extract_pull_failure_reason("fatal: Could not resolve host: github.com") == "network_error"
    assert _extract_pull_failure_reason("remote: Permission denied\nfatal: Authentication failed") == "auth_error"


def test_extract_pull_failure_reason_unknown_and_empty():
    assert _extract_pull_failure_reason("") == "unknown"
    assert _extract_pull_failure_reason("random unexpected stderr") == "unknown"
