# GitHub CLI adapter: repository inventory and clone through `gh`
#
# Main features:
#   - GitHubCli.list_repos(): non-archived repositories of an organization
#   - GitHubCli.clone(): `gh repo clone owner/repo path`
#   - GitHubCli.auth_status(): whether `gh` is logged in
#
# `gh` handles protocol choice and credentials itself, so there is no URL
# building here.

from pathlib import Path
from typing import List

from ..domain.inventory import InventoryFormatError, parse_inventory_json
from ..domain.models import CommandResult
from ..errors import InventoryError
from .process import run_command


class GitHubCli:
    """Thin wrapper around the `gh` executable."""

    def __init__(self, executable: str = "gh"):
        self.executable = executable

    def auth_status(self) -> CommandResult:
        return run_command([self.executable, "auth", "status"])

    def list_repos(self, org: str, limit: int) -> List[str]:
        """Qualified names (owner/repo) of the organization's non-archived repositories.

        Args:
            org: organization or user login
            limit: maximum number of repositories requested

        Returns:
            names in the order `gh` returned them

        Raises:
            InventoryError: `gh` failed or returned an unreadable payload
        """
        result = run_command([
            self.executable,
            "repo",
            "list",
            org,
            "--limit",
            str(limit),
            "--no-archived",
            "--json",
            "nameWithOwner",
        ])
        if not result.ok:
            detail = result.stderr.strip() or f"exit code {result.returncode}"
            raise InventoryError(
                f"failed to fetch repository list for '{org}' ({detail}). "
                "Check the organization name and your permissions."
            )

        try:
            return parse_inventory_json(result.stdout)
        except InventoryFormatError as e:
            raise InventoryError(str(e)) from e

    def clone(self, repo_full: str, path: Path) -> CommandResult:
        return run_command([self.executable, "repo", "clone", repo_full, str(path)])
