"""Simple launcher for the landmark router.

This script asks whether you want the web form or the terminal menu,
then starts the corresponding interface.
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path


def ask_choice(prompt: str) -> str:
    while True:
        choice = input(prompt).strip().lower()
        if choice in {"1", "gui", "web", "g"}:
            return "gui"
        if choice in {"2", "cli", "terminal", "c"}:
            return "cli"
        print("Error: Input must be 1 or 2. Please try again.")


def main() -> None:
    project_root = Path(__file__).resolve().parent

    print("=== Landmark Router launcher ===")
    print("1) Graphical interface (apps/app.py)")
    print("2) Command line interface")
    choice = ask_choice("Choice (1/2): ")

    if choice == "gui":
        cmd = [sys.executable, str(project_root / "apps" / "app.py")]
    else:
        cmd = [sys.executable, "-m", "landmark_router.cli"]

    print(f"Starting with: {' '.join(cmd)}")
    subprocess.run(cmd, check=False, cwd=project_root)


if __name__ == "__main__":
    main()
