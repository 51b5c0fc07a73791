# main.py

from __future__ import annotations

import sys
from pathlib import Path

# Ensure that the src/ directory is on sys.path when running
# `uv run main.py <trips.csv>` from the project root.
ROOT_DIR = Path(__file__).resolve().parent
SRC_DIR = ROOT_DIR / "src"

if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from trip_hotspots.cli import main  # type: ignore[import]


if __name__ == "__main__":
    raise SystemExit(main())
