# Checks module: host prerequisites and local clone-path state
#
# Main features:
#   - classify_local_path(): which of the three LocalState variants a path is in
#   - check_required_tools(): fail fast when an executable is not on PATH
#   - check_gh_auth(): fail fast when the GitHub CLI is not logged in
#
# Classification rules:
#   - a `.git` entry inside the path → VERSION_CONTROLLED
#   - anything else at the path (file, plain dir, broken symlink) → OCCUPIED_NON_VC
#   - nothing at the path → ABSENT

import os
import shutil
from pathlib import Path
from typing import Callable, Iterable

from ..domain.models import LocalState
from ..errors import PreconditionError
from ..infra.github_cli import GitHubCli


def _has_git_metadata(path: Path) -> bool:
    return (path / ".git").exists()


def classify_local_path(
    path: Path,
    is_working_copy: Callable[[Path], bool] = _has_git_metadata,
) -> LocalState:
    """Classify what currently occupies a repository's clone path.

    Args:
        path: target_dir / repo_name
        is_working_copy: version-control check (defaults to looking for `.git`)

    Returns:
        LocalState variant
    """
    if is_working_copy(path):
        return LocalState.VERSION_CONTROLLED

    # lexists also catches dangling symlinks, which Path.exists() reports as missing
    if os.path.lexists(path):
        return LocalState.OCCUPIED_NON_VC

    return LocalState.ABSENT


def check_required_tools(tools: Iterable[str]) -> None:
    """Raise PreconditionError for the first tool missing from PATH."""
    for tool in tools:
        if shutil.which(tool) is None:
            raise PreconditionError(f"required command '{tool}' not found on PATH")


def check_gh_auth(github: GitHubCli) -> None:
    result = github.auth_status()
    if not result.ok:
        raise PreconditionError("not logged into GitHub CLI. Run 'gh auth login'.")
