"""Repository inventory parsing in the domain layer."""

import json
from pathlib import Path
from typing import Iterable, List

from .models import RepoTask


class InventoryFormatError(ValueError):
    """Raised when the hosting service returns an unexpected payload."""


def parse_inventory_json(payload: str) -> List[str]:
    """Extract ``nameWithOwner`` values from `gh repo list --json` output.

    Entries without a usable name are dropped. Order is preserved.
    """
    text = (payload or "").strip()
    if not text:
        return []

    try:
        data = json.loads(text)
    except ValueError as e:
        raise InventoryFormatError(f"repository list is not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise InventoryFormatError("repository list is not a JSON array")

    names: List[str] = []
    for item in data:
        if not isinstance(item, dict):
            continue
        name = item.get("nameWithOwner")
        if isinstance(name, str) and name.strip():
            names.append(name.strip())
    return names


def repo_name_from_full(repo_full: str) -> str:
    """Local name of a repository: the segment after the last ``/``."""
    return repo_full.rstrip("/").rsplit("/", 1)[-1]


def default_target_dir(org: str) -> Path:
    return Path(f"./{org}_repos")


def build_repo_tasks(repo_fulls: Iterable[str], target_dir: Path) -> List[RepoTask]:
    """Turn inventory entries into tasks, skipping blank entries."""
    tasks: List[RepoTask] = []
    for entry in repo_fulls:
        repo_full = (entry or "").strip()
        if not repo_full:
            continue
        tasks.append(
            RepoTask(
                repo_full=repo_full,
                repo_name=repo_name_from_full(repo_full),
                target_dir=target_dir,
            )
        )
    return tasks


__all__ = [
    "InventoryFormatError",
    "parse_inventory_json",
    "repo_name_from_full",
    "default_target_dir",
    "build_repo_tasks",
]
