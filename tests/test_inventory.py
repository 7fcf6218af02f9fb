from pathlib import Path

import pytest

from dev_utils.domain.inventory import (
    InventoryFormatError,
    build_repo_tasks,
    default_target_dir,
    parse_inventory_json,
    repo_name_from_full,
)


def test_parse_inventory_json_keeps_order_and_drops_unnamed():
    payload = '[{"nameWithOwner": "o/b"}, {"nameWithOwner": ""}, {"other": 1}, "junk", {"nameWithOwner": "o/a"}]'
    assert parse_inventory_json(payload) == ["o/b", "o/a"]


def test_parse_inventory_json_rejects_non_array():
    with pytest.raises(InventoryFormatError):
        parse_inventory_json('{"message": "Not Found"}')


def test_repo_name_is_last_segment():
    assert repo_name_from_full("acme/api") == "api"
    assert repo_name_from_full("acme/team/api") == "api"


def test_default_target_dir():
    assert default_target_dir("acme") == Path("acme_repos")


def test_build_repo_tasks_skips_blank_entries(tmp_path):
    tasks = build_repo_tasks(["o/a", "", "  ", " o/b "], tmp_path)

    assert [task.repo_full for task in tasks] == ["o/a", "o/b"]
    assert tasks[1].clone_path == tmp_path / "b"
