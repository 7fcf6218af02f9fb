"""Git adapter: every git invocation the toolbox makes goes through here."""

from pathlib import Path
from typing import Optional

from ..domain.models import CommandResult
from .process import run_command


class GitCli:
    """Thin wrapper around the `git` executable.

    Methods return CommandResult and never raise on a non-zero exit.
    """

    def __init__(self, executable: str = "git"):
        self.executable = executable

    def run(self, *args: str, repo: Optional[Path] = None, capture: bool = True) -> CommandResult:
        """
        Run a git command.

        Args:
            *args: git arguments (e.g. "pull", "--rebase")
            repo: repository path passed as `-C`; defaults to the current directory
            capture: capture output instead of streaming it to the terminal

        Example:
            GitCli().run("status", capture=False)
            GitCli().run("pull", "--rebase", repo=Path("acme_repos/api"))
        """
        cmd = [self.executable]
        if repo is not None:
            cmd.extend(["-C", str(repo)])
        cmd.extend(args)
        return run_command(cmd, capture=capture)

    def is_working_copy(self, path: Path) -> bool:
        """Whether `path` holds git metadata (a `.git` dir, or a `.git` file for worktrees)."""
        return (path / ".git").exists()

    def pull_rebase(self, path: Path) -> CommandResult:
        return self.run("pull", "--rebase", repo=path)

    def current_branch(self) -> Optional[str]:
        """Checked-out branch name, or None when detached or outside a repository."""
        result = self.run("symbolic-ref", "--short", "HEAD")
        if result.ok and result.stdout.strip():
            return result.stdout.strip()

        result = self.run("branch", "--show-current")
        if result.ok and result.stdout.strip():
            return result.stdout.strip()
        return None

    def checkout(self, branch: str, create: bool = False, quiet: bool = False) -> CommandResult:
        """Checkout `branch`; `quiet` captures git's output instead of streaming it."""
        args = ["checkout", "-b", branch] if create else ["checkout", branch]
        return self.run(*args, capture=quiet)

    def pull(self) -> CommandResult:
        return self.run("pull", capture=False)

    def rebase(self, onto: str) -> CommandResult:
        return self.run("rebase", onto, capture=False)

    def commit_all(self, message: str, no_verify: bool = False) -> CommandResult:
        args = ["commit", "-am", message]
        if no_verify:
            args.append("--no-verify")
        return self.run(*args, capture=False)

    def status(self) -> CommandResult:
        return self.run("status", capture=False)
