"""Development tasks for winstrap.

Usage: python devops.py <task>
Tasks: fmt, lint, test, clean

Tasks run on Windows and POSIX hosts alike, so cleanup is done with
pathlib instead of find/rm.
"""

import shutil
import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent

CACHE_DIRS = ("__pycache__", ".pytest_cache", ".ruff_cache")
BUILD_DIRS = ("build", "dist")


def _run(commands: list[list[str]]) -> None:
    """Execute a sequence of commands, exiting on first failure."""
    for cmd in commands:
        print(f"$ {' '.join(cmd)}")
        try:
            subprocess.run(cmd, check=True, cwd=ROOT)  # nosec: B603
        except FileNotFoundError:
            print(f"Command not found: {cmd[0]}", file=sys.stderr)
            sys.exit(127)
        except subprocess.CalledProcessError as e:
            print(f"Command failed: {' '.join(e.cmd)}", file=sys.stderr)
            sys.exit(e.returncode)


def format_code() -> None:
    """Format the codebase with Ruff."""
    _run([["ruff", "format", "."], ["ruff", "check", "--fix", "."]])


def lint() -> None:
    """Check formatting and lint rules without changing files."""
    _run([["ruff", "format", "--check", "."], ["ruff", "check", "."]])


def test() -> None:
    """Run the test suite with pytest."""
    _run([[sys.executable, "-m", "pytest", "-q"]])


def clean() -> None:
    """Remove caches and build artifacts."""
    removed = 0
    for name in CACHE_DIRS:
        for path in ROOT.rglob(name):
            if path.is_dir():
                shutil.rmtree(path)
                removed += 1
    for name in BUILD_DIRS:
        path = ROOT / name
        if path.is_dir():
            shutil.rmtree(path)
            removed += 1
    for path in ROOT.rglob("*.egg-info"):
        shutil.rmtree(path)
        removed += 1
    print(f"Removed {removed} director{'y' if removed == 1 else 'ies'}.")


TASKS = {
    "fmt": format_code,
    "lint": lint,
    "test": test,
    "clean": clean,
}


if __name__ == "__main__":
    if len(sys.argv) != 2 or sys.argv[1] not in TASKS:
        print(__doc__, file=sys.stderr)
        sys.exit(2)
    TASKS[sys.argv[1]]()
