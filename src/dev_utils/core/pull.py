"""Rebase-pull for repositories that are already cloned."""

from typing import Tuple

from ..domain.models import RepoTask
from ..infra.logger import log_error, log_info, log_success


def _extract_pull_failure_reason(stderr_text: str) -> str:
    """Map common git pull stderr to concise reason tags."""
    text = (stderr_text or "").lower()
    if not text:
        return "unknown"
    if "not a git repository" in text:
        return "not_git_repo"
    if "could not apply" in text or "resolve all conflicts" in text or "merge conflict" in text:
        return "rebase_conflict"
    if "your local changes" in text or "would be overwritten" in text or "unstaged changes" in text:
        return "local_changes_conflict"
    if "no tracking information" in text:
        return "no_upstream"
    if "couldn't find remote ref" in text or "no such remote" in text:
        return "remote_ref_missing"
    if "refusing to merge unrelated histories" in text:
        return "unrelated_histories"
    if "could not resolve host" in text or "failed to connect" in text or "timed out" in text:
        return "network_error"
    if "authentication failed" in text or "permission denied" in text:
        return "auth_error"
    return "unknown"


def pull_repo(vcs, task: RepoTask) -> Tuple[bool, str]:
    """Run `git pull --rebase` for one local repository.

    Conflicts are left for the user to resolve; there is no retry.
    """
    repo_path = task.clone_path
    log_info(" -> directory exists. Updating (git pull --rebase)...")

    result = vcs.pull_rebase(repo_path)
    if not result.ok:
        reason = _extract_pull_failure_reason(result.stderr)
        log_error(f"failed to update '{task.repo_name}' [{reason}]. Check for conflicts in {repo_path}")
        return False, reason

    log_success(f" -> update successful for '{task.repo_name}'")
    return True, ""
