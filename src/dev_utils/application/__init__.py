"""Application services orchestrating domain and core capabilities."""

from .org_sync import reconcile_repo, sync_org_repos, verify_environment

__all__ = [
    "reconcile_repo",
    "sync_org_repos",
    "verify_environment",
]
