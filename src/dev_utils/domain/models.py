"""Domain data structures."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, List


class LocalState(Enum):
    """What currently occupies a repository's local clone path."""

    ABSENT = "absent"
    VERSION_CONTROLLED = "version_controlled"
    OCCUPIED_NON_VC = "occupied_non_vc"


class SyncAction(Enum):
    CLONE = "clone"
    UPDATE = "update"
    SKIP = "skip"


@dataclass(frozen=True)
class CommandResult:
    """Outcome of one external command."""

    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


@dataclass(frozen=True)
class RepoTask:
    """A single repository to reconcile, derived from an inventory entry."""

    repo_full: str
    repo_name: str
    target_dir: Path

    @property
    def clone_path(self) -> Path:
        return self.target_dir / self.repo_name


@dataclass(frozen=True)
class RepoOutcome:
    repo_full: str
    action: SyncAction
    success: bool
    reason: str = ""

    def to_dict(self) -> Dict[str, object]:
        return {
            "event": "repo",
            "repo": self.repo_full,
            "action": self.action.value,
            "success": self.success,
            "reason": self.reason,
        }


@dataclass
class SyncSummary:
    """Counters accumulated over one synchronizer run.

    Every recorded outcome increments exactly one of cloned / updated /
    skipped / failed, so the four always add up to ``total``.
    """

    total: int = 0
    cloned: int = 0
    updated: int = 0
    skipped: int = 0
    failed: int = 0
    outcomes: List[RepoOutcome] = field(default_factory=list)

    def record(self, outcome: RepoOutcome) -> None:
        self.outcomes.append(outcome)
        if not outcome.success:
            self.failed += 1
        elif outcome.action is SyncAction.CLONE:
            self.cloned += 1
        elif outcome.action is SyncAction.UPDATE:
            self.updated += 1
        else:
            self.skipped += 1

    @property
    def failed_repos(self) -> List[str]:
        return [outcome.repo_full for outcome in self.outcomes if not outcome.success]

    @property
    def exit_code(self) -> int:
        return 1 if self.failed > 0 else 0

    def to_dict(self) -> Dict[str, object]:
        return {
            "event": "summary",
            "total": self.total,
            "cloned": self.cloned,
            "updated": self.updated,
            "skipped": self.skipped,
            "failed": self.failed,
        }
