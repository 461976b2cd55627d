#!/usr/bin/env python3
"""
Study Planner - Quick launcher for the interactive menu.

This is a convenience wrapper that launches the planner's interactive menu.
For the one-shot commands, use: python -m src.cli.planner --help

Usage:
    python study_planner.py           # Launch interactive menu
    python study_planner.py --demo    # Launch with the demo subjects
    python study_planner.py --help    # Show this help
"""

import subprocess
import sys


def main():
    """Launch the planner interactive menu."""
    if len(sys.argv) > 1 and sys.argv[1] in ("--help", "-h"):
        print(__doc__)
        return

    subprocess.run([sys.executable, "-m", "src.cli.planner", "menu", *sys.argv[1:]])


if __name__ == "__main__":
    main()
