#!/usr/bin/env python3
"""
Code quality checker for the PlanAI backend.

Runs Ruff (import sorting and linting), Black (formatting) and Pylint
(scored analysis) over the application and model packages.
"""

import re
import subprocess
import sys

MIN_PYLINT_SCORE = 9.5

CHECKS = [
    (["ruff", "check", "app/", "models/", "tests/"], "Ruff - Import sorting and linting", False),
    ([sys.executable, "-m", "black", ".", "--check"], "Black - Code formatting check", False),
    ([sys.executable, "-m", "pylint", "app/", "models/", "--score=y"], "Pylint - Code analysis and scoring", True),
]


def run_command(cmd: list[str], description: str, is_pylint: bool = False) -> bool:
    """Run a command and return True if successful."""
    print(f"\n{'='*60}")
    print(f"🔍 {description}")
    print(f"Command: {' '.join(cmd)}")
    print("=" * 60)

    try:
        result = subprocess.run(cmd, capture_output=True, text=True, check=False)
    except OSError as e:
        print(f"💥 Error running {description}: {e}")
        return False

    if result.stdout:
        print("STDOUT:", result.stdout)
    if result.stderr:
        print("STDERR:", result.stderr)

    # Pylint passes on its score, not its exit code
    if is_pylint and result.stdout:
        score_match = re.search(r"rated at ([\d.]+)/10", result.stdout)
        if score_match:
            score = float(score_match.group(1))
            passed = score >= MIN_PYLINT_SCORE
            print(f"{'✅' if passed else '⚠️'} {description} - Score: {score}/10 (minimum: {MIN_PYLINT_SCORE})")
            return passed

    if result.returncode == 0:
        print(f"✅ {description} - PASSED")
        return True

    print(f"❌ {description} - FAILED (exit code: {result.returncode})")
    return False


def main():
    """Run all quality checks."""
    print("🚀 Running PlanAI Backend Quality Checks")

    results = [(description, run_command(cmd, description, is_pylint)) for cmd, description, is_pylint in CHECKS]

    print(f"\n{'='*60}")
    print("📊 QUALITY CHECK SUMMARY")
    print("=" * 60)

    for description, success in results:
        print(f"{description}: {'✅ PASSED' if success else '❌ FAILED'}")

    passed = sum(1 for _, success in results if success)
    print(f"\nOverall: {passed}/{len(results)} checks passed")

    if passed == len(results):
        print("🎉 All quality checks passed!")
        sys.exit(0)

    print("⚠️  Some quality checks failed. Please review and fix.")
    sys.exit(1)


if __name__ == "__main__":
    main()
