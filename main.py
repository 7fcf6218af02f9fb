#!/usr/bin/env python3
# dev-utils launcher: run the toolbox straight from a checkout
#
#   python main.py clone-org my-github-org
#   python main.py rebase
#
# Installed copies use the `dev-utils` console script instead.

import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parent / "src"
if SRC_DIR.is_dir() and str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from dev_utils.cli.main import main  # noqa: E402


if __name__ == '__main__':
    sys.exit(main())
