#!/usr/bin/env python3
"""
Test runner for the shape button project.

Usage:
    python run_tests.py              # Run unit + integration tests
    python run_tests.py unit         # Run unit tests only
    python run_tests.py integration  # Run integration (widget) tests only
    python run_tests.py all          # Run every test under tests/
    python run_tests.py --coverage   # Run with coverage report

Examples:
    python run_tests.py unit -x            # Stop at the first unit failure
    python run_tests.py -k arc             # Only tests matching "arc"
    python run_tests.py --coverage         # With coverage report
"""

import sys
import subprocess
import argparse


def main():
    parser = argparse.ArgumentParser(
        description="Run shape button tests",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Test Suites:
  unit         Geometry, models, shape files and settings (no widgets)
  integration  ShapeButton widget and demo window on an offscreen QApplication
  all          All test suites

Widget tests force QT_QPA_PLATFORM=offscreen, no display is needed.
        """
    )
    parser.add_argument(
        "suite",
        nargs="?",
        choices=["unit", "integration", "all"],
        default="default",
        help="Test suite to run (default: unit + integration)"
    )
    parser.add_argument(
        "--coverage", "--cov",
        action="store_true",
        help="Run with coverage report"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output"
    )
    parser.add_argument(
        "--failfast", "-x",
        action="store_true",
        help="Stop on first failure"
    )
    parser.add_argument(
        "-k",
        dest="keyword",
        help="Only run tests matching the given keyword expression"
    )

    args = parser.parse_args()

    # Build pytest command
    cmd = [sys.executable, "-m", "pytest"]

    # Select test directory based on suite
    if args.suite == "unit":
        cmd.append("tests/unit")
    elif args.suite == "integration":
        cmd.append("tests/integration")
    elif args.suite == "all":
        cmd.append("tests")
    else:
        cmd.extend(["tests/unit", "tests/integration"])

    if args.verbose:
        cmd.append("-v")

    if args.failfast:
        cmd.append("-x")

    if args.keyword:
        cmd.extend(["-k", args.keyword])

    # Add coverage options
    if args.coverage:
        cmd.extend([
            "--cov=models",
            "--cov=services",
            "--cov=views",
            "--cov-report=term-missing",
            "--cov-report=html:coverage_report"
        ])

    # Print command
    print(f"Running: {' '.join(cmd)}")
    print("-" * 60)

    result = subprocess.run(cmd)
    return result.returncode


if __name__ == "__main__":
    sys.exit(main())
