"""Domain models, inventory parsing and text transforms."""

from .inventory import (
    InventoryFormatError,
    build_repo_tasks,
    default_target_dir,
    parse_inventory_json,
    repo_name_from_full,
)
from .models import CommandResult, LocalState, RepoOutcome, RepoTask, SyncAction, SyncSummary
from .text_case import TRANSFORMS, new_uuid, transform_lines

__all__ = [
    "CommandResult",
    "LocalState",
    "RepoOutcome",
    "RepoTask",
    "SyncAction",
    "SyncSummary",
    "InventoryFormatError",
    "build_repo_tasks",
    "default_target_dir",
    "parse_inventory_json",
    "repo_name_from_full",
    "TRANSFORMS",
    "new_uuid",
    "transform_lines",
]
