#!/usr/bin/env python
"""
Simple test runner for the aerospace-ipc unit tests.

Usage:
    python scripts/run_tests.py                 # all tests
    python scripts/run_tests.py client          # tests/client/
    python scripts/run_tests.py services/focus  # tests/services/test_focus.py
"""

import sys
import subprocess
import os
from pathlib import Path


def run_tests(test_target="", verbose=True):
    """
    Run pytest on the given path under tests/.

    Args:
        test_target: Test directory or module relative to tests/ (default: all)
        verbose: Whether to run with verbose output
    """
    # Change to project root directory
    project_root = Path(__file__).resolve().parent.parent
    os.chdir(project_root)

    # Use sys.executable so the package resolves from the project root
    cmd = [sys.executable, "-m", "pytest", f"tests/{test_target}"]

    if verbose:
        cmd.append("-v")

    # Add short traceback for cleaner output
    cmd.append("--tb=short")

    print(f"Running: {' '.join(cmd)}")
    print("=" * 60)

    try:
        result = subprocess.run(cmd, check=False)
        return result.returncode == 0
    except FileNotFoundError:
        print("Error: pytest not found. Install with: pip install -e .[test]")
        return False


def _resolve_target(name: str) -> str:
    """Map 'client' to a directory and 'services/focus' to its test module."""
    if (Path("tests") / name).is_dir():
        return name
    parent, _, module = name.rpartition("/")
    if not module.startswith("test_"):
        module = f"test_{module}"
    if not module.endswith(".py"):
        module = f"{module}.py"
    return f"{parent}/{module}" if parent else module


def main():
    """Main entry point for test runner."""
    if len(sys.argv) > 1:
        os.chdir(Path(__file__).resolve().parent.parent)
        target = _resolve_target(sys.argv[1])
        print(f"Running tests for: {target}")
        success = run_tests(target)
    else:
        print("Running all unit tests...")
        success = run_tests()

    if success:
        print("\n✅ All tests passed!")
    else:
        print("\n❌ Some tests failed!")
        sys.exit(1)


if __name__ == "__main__":
    main()
