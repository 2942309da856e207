from __future__ import annotations

import argparse
import importlib.util
import subprocess
import sys
from pathlib import Path

SCENARIOS = {
    "unit": ["-q", "tests/unit"],
    "integration": ["-q", "-m", "integration", "tests/integration"],
    "all": ["-q", "tests"],
}


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run urltop test scenarios locally")
    parser.add_argument(
        "--scenario",
        choices=tuple(SCENARIOS.keys()),
        default="all",
        help="Which scenario to run.",
    )
    return parser.parse_args()


def main() -> int:
    args = _parse_args()

    if importlib.util.find_spec("pytest") is None:
        print("[urltop-test-runner] Module pytest is not installed in this interpreter.")
        print("Run: pip install -e '.[test]' in the same .venv and retry.")
        return 1

    repo_root = Path(__file__).resolve().parents[1]
    cmd = [sys.executable, "-m", "pytest", *SCENARIOS[args.scenario]]
    result = subprocess.run(cmd, cwd=repo_root)
    return int(result.returncode)


if __name__ == "__main__":
    raise SystemExit(main())
