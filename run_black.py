#!/usr/bin/env python3
"""
Script to run black and mypy on the task table codebase.
"""
import subprocess
import os
import sys

PROJECT_ROOT = os.path.dirname(os.path.abspath(__file__))


def run_black(check=False):
    """Run black on the app and tests directories"""
    print("Running black on the task table codebase...")

    command = ["black", f"{PROJECT_ROOT}/app", f"{PROJECT_ROOT}/tests", f"{PROJECT_ROOT}/main.py"]
    if check:
        command.append("--check")

    try:
        subprocess.run(command, check=True)
        print("Black formatting completed successfully!")
        return 0
    except subprocess.CalledProcessError as e:
        print(f"Error running black: {e}")
        return 1


def run_mypy():
    """Run mypy on the app directory"""
    print("Running mypy on the task table codebase...")

    try:
        subprocess.run(
            ["mypy", "--ignore-missing-imports", "--follow-imports=silent", f"{PROJECT_ROOT}/app"],
            check=True,
        )
        print("Mypy type checking completed successfully!")
        return 0
    except subprocess.CalledProcessError as e:
        print(f"Error running mypy: {e}")
        return 1


if __name__ == "__main__":
    black_result = run_black(check="--check" in sys.argv)
    mypy_result = run_mypy()
    sys.exit(black_result or mypy_result)  # Exit with error if either tool failed
