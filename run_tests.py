#!/usr/bin/env python3
"""
Test runner script for PyTerraNoise.

Shortcuts for running the test suites with consistent pytest flags.
"""
import argparse
import subprocess
import sys

SUITES = {
    "imports": ("tests/test_imports.py", "Import tests"),
    "unit": ("tests/unit/", "Unit tests"),
    "integration": ("tests/integration/", "Integration tests"),
}


def run_command(cmd, description=None):
    """Run a shell command, return True on success."""
    if description:
        print(f"→ {description}")
    return subprocess.run(cmd, shell=True).returncode == 0


def main():
    parser = argparse.ArgumentParser(
        description="PyTerraNoise test runner",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_tests.py --unit             # Run only unit tests
  python run_tests.py --integration      # Run only integration tests
  python run_tests.py --all              # Run every suite one after another
  python run_tests.py --fast             # Skip tests marked slow
  python run_tests.py -k diamond         # Forward a keyword filter to pytest
        """
    )

    for name in SUITES:
        parser.add_argument(f'--{name}', action='store_true', help=f'Run {name} tests only')
    parser.add_argument('--all', action='store_true', help='Run all suites')
    parser.add_argument('--fast', action='store_true', help='Exclude tests marked slow')
    parser.add_argument('-k', dest='keyword', default=None, help='pytest keyword expression')
    parser.add_argument('--verbose', '-v', action='store_true', help='Verbose output')
    parser.add_argument('--coverage', action='store_true', help='Run with coverage report')

    args = parser.parse_args()

    base_cmd = "PYTHONPATH=. python -m pytest"
    base_cmd += " -v" if args.verbose else " -q"
    if args.coverage:
        base_cmd += " --cov=pyterranoise --cov-report=html --cov-report=term"
    if args.fast:
        base_cmd += " -m 'not slow'"
    if args.keyword:
        base_cmd += f" -k '{args.keyword}'"

    selected = [name for name in SUITES if getattr(args, name)]
    if args.all:
        selected = list(SUITES)

    success = True
    if selected:
        for name in selected:
            path, description = SUITES[name]
            if not run_command(f"{base_cmd} {path}", description):
                success = False
    else:
        success = run_command(f"{base_cmd} tests/", "Running complete test suite")

    if success:
        print("\n✅ All tests passed!")
        return 0
    print("\n❌ Some tests failed!")
    return 1


if __name__ == '__main__':
    sys.exit(main())
