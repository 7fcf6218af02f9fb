# Clone module: clone one absent repository
#
# Main features:
#   - clone_repo(): clone owner/repo into its clone path through the hosting CLI
#
# Behavior:
#   - only called for paths classified ABSENT, so nothing pre-existing is touched
#   - a partial directory left by a failed clone is removed

import shutil
from pathlib import Path
from typing import Tuple

from ..domain.models import RepoTask
from ..infra.logger import log_error, log_info, log_success, log_warning


def clone_repo(host, task: RepoTask) -> Tuple[bool, str]:
    """Clone a single repository.

    Args:
        host: object with clone(repo_full, path) -> CommandResult
        task: repository task (clone_path must be absent)

    Returns:
        (success, reason tag)
    """
    target_path = task.clone_path
    log_info(f" -> cloning '{task.repo_full}' into '{target_path}'...")

    result = host.clone(task.repo_full, target_path)
    if result.ok:
        log_success(f" -> clone successful for '{task.repo_name}'")
        return True, ""

    log_error(f"failed to clone '{task.repo_name}' using 'gh repo clone'")
    _log_stderr_tail(result.stderr)
    _cleanup_failed_directory(target_path)
    return False, "clone_failed"


def _log_stderr_tail(stderr: str, lines: int = 5) -> None:
    tail = [line for line in (stderr or "").strip().splitlines() if line.strip()][-lines:]
    for line in tail:
        log_error(f"    {line}")


def _cleanup_failed_directory(target_path: Path) -> None:
    """Remove the directory a failed clone left behind."""
    if not target_path.exists():
        return

    try:
        shutil.rmtree(target_path)
    except OSError as e:
        log_warning(f"could not remove partial clone '{target_path}': {e}")
