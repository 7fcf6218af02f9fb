from pathlib import Path
import sys

import pytest


ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch, tmp_path):
    from dev_utils.infra.logger import use_stderr

    monkeypatch.setenv("DEV_UTILS_CONFIG_DIR", str(tmp_path / "config"))
    for name in ("DEV_UTILS_REPO_LIMIT", "DEV_UTILS_DEFAULT_BRANCH", "DEV_UTILS_TERRAFORM_ENV_DIR"):
        monkeypatch.delenv(name, raising=False)
    use_stderr(False)
    yield
    use_stderr(False)
