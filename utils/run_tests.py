#!/usr/bin/env python3
"""
Script to run tests for the distmap package.

This script provides a simple command-line interface for running tests
in the distmap package. It supports running tests for specific components
or all tests.

Examples:
    python utils/run_tests.py  # Run all tests
    python utils/run_tests.py core  # Run only the distance transform tests
    python utils/run_tests.py core/test_templates.py  # Run a specific test module
"""

import sys
import unittest
import argparse
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent


def run_tests(test_path=None):
    """Run tests from the specified path."""
    if test_path is None:
        test_suite = unittest.defaultTestLoader.discover(str(ROOT / 'tests'), top_level_dir=str(ROOT))
    else:
        test_path = str(test_path)

        # Make sure path starts with tests/ for proper module importing
        if not test_path.startswith('tests'):
            test_path = 'tests/' + test_path.lstrip('./')

        if test_path.endswith('.py'):
            # "tests/core/test_file.py" -> "tests.core.test_file"
            module_name = test_path.replace('/', '.')[:-len('.py')]
            try:
                module = __import__(module_name, fromlist=['*'])
            except ImportError as e:
                print(f"Error importing {module_name}: {e}")
                return unittest.TestResult()
            test_suite = unittest.defaultTestLoader.loadTestsFromModule(module)
        else:
            test_suite = unittest.defaultTestLoader.discover(str(ROOT / test_path), top_level_dir=str(ROOT))

    runner = unittest.TextTestRunner(verbosity=2)
    return runner.run(test_suite)


if __name__ == "__main__":
    sys.path.insert(0, str(ROOT))
    parser = argparse.ArgumentParser(description='Run distmap tests')
    parser.add_argument('test_path', nargs='?', help='Path to specific test or directory')
    args = parser.parse_args()

    result = run_tests(args.test_path)
    sys.exit(not result.wasSuccessful())
