"""Application service: clone or update every repository of an organization."""

from pathlib import Path
from typing import Callable, List, Optional, Protocol

from ..core.check import check_gh_auth, check_required_tools, classify_local_path
from ..core.clone import clone_repo
from ..core.pull import pull_repo
from ..domain.inventory import build_repo_tasks, default_target_dir
from ..domain.models import CommandResult, LocalState, RepoOutcome, RepoTask, SyncAction, SyncSummary
from ..errors import UsageError
from ..infra.config import DEFAULT_REPO_LIMIT
from ..infra.github_cli import GitHubCli
from ..infra.git_cli import GitCli
from ..infra.logger import log_error, log_info, log_warning
from ..infra.paths import ensure_directory, expand_path

REQUIRED_TOOLS = ("gh", "git")
USAGE = (
    "clone-org <org_name> [target_directory]\n"
    "Example: clone-org my-github-org ~/dev/my-github-org"
)

OutcomeCallback = Callable[[RepoOutcome], None]


class RepoHost(Protocol):
    def list_repos(self, org: str, limit: int) -> List[str]: ...

    def clone(self, repo_full: str, path: Path) -> CommandResult: ...


class VersionControl(Protocol):
    def is_working_copy(self, path: Path) -> bool: ...

    def pull_rebase(self, path: Path) -> CommandResult: ...


def verify_environment(github: GitHubCli, tools=REQUIRED_TOOLS) -> None:
    """Fail before any work when a tool or the gh login is missing."""
    check_required_tools(tools)
    check_gh_auth(github)


def reconcile_repo(task: RepoTask, host: RepoHost, vcs: VersionControl) -> RepoOutcome:
    """Clone, update or skip one repository depending on its local state.

    An OSError while inspecting or touching the clone path (e.g. an unreadable
    directory) fails this repository only. It is reported as a failed clone
    unless the path was already classified as a working copy.
    """
    action = SyncAction.CLONE
    try:
        state = classify_local_path(task.clone_path, vcs.is_working_copy)

        if state is LocalState.OCCUPIED_NON_VC:
            log_warning(
                f"path '{task.clone_path}' exists but is not a git repository. "
                f"Skipping '{task.repo_name}'."
            )
            return RepoOutcome(task.repo_full, SyncAction.SKIP, True, "path_occupied")

        if state is LocalState.VERSION_CONTROLLED:
            action = SyncAction.UPDATE
            success, reason = pull_repo(vcs, task)
        else:
            success, reason = clone_repo(host, task)
    except OSError as e:
        log_error(f"cannot process '{task.repo_name}' at '{task.clone_path}': {e}")
        return RepoOutcome(task.repo_full, action, False, "os_error")

    return RepoOutcome(task.repo_full, action, success, reason)


def sync_org_repos(
    org: Optional[str],
    target_dir: Optional[Path] = None,
    host: Optional[RepoHost] = None,
    vcs: Optional[VersionControl] = None,
    limit: int = DEFAULT_REPO_LIMIT,
    on_outcome: Optional[OutcomeCallback] = None,
) -> SyncSummary:
    """Reconcile local clones of all non-archived repositories in `org`.

    Args:
        org: organization identifier (required)
        target_dir: clone root; defaults to ./<org>_repos
        host: hosting adapter (defaults to GitHubCli)
        vcs: version-control adapter (defaults to GitCli)
        limit: maximum number of repositories fetched
        on_outcome: called after each repository is processed

    Returns:
        SyncSummary for the run

    Raises:
        UsageError: empty organization
        InventoryError: the repository list could not be fetched
        PreconditionError: the target directory could not be created
    """
    if not org or not org.strip():
        raise UsageError("organization name is required", usage=USAGE)
    org = org.strip()

    host = host or GitHubCli()
    vcs = vcs or GitCli()
    target = expand_path(target_dir) if target_dir else default_target_dir(org)

    log_info(f"fetching repository list for organization: '{org}'...")
    tasks = build_repo_tasks(host.list_repos(org, limit), target)

    summary = SyncSummary(total=len(tasks))
    if not tasks:
        log_warning(f"no non-archived repositories found for organization '{org}' or you may lack permissions")
        return summary

    if len(tasks) >= limit:
        log_warning(f"repository list reached the limit of {limit}; raise --limit to see more")

    log_info(f"target directory: '{target}'")
    ensure_directory(target)

    log_info(f"processing {summary.total} repositories...")
    for task in tasks:
        log_info(f"processing '{task.repo_name}' (from {task.repo_full})...")
        outcome = reconcile_repo(task, host, vcs)
        summary.record(outcome)
        if on_outcome:
            on_outcome(outcome)

    return summary


def write_failed_repos(summary: SyncSummary, failed_repos_file: Path) -> None:
    """Write failed qualified names one per line; no file when nothing failed."""
    failed = summary.failed_repos
    if not failed:
        return
    try:
        failed_repos_file.write_text("\n".join(failed) + "\n", encoding="utf-8")
    except OSError as e:
        log_warning(f"could not save failed list: {failed_repos_file} - {e}")
        return
    log_info(f"failed list saved to: {failed_repos_file}")


def clear_failed_repos(failed_repos_file: Path) -> None:
    if failed_repos_file.exists():
        failed_repos_file.unlink()
