"""
Pytest configuration for fqbn test suite.

Integration tests invoke the installed `fqbn` command and are skipped unless
the --full flag is given.
"""

import pytest


def pytest_addoption(parser):
    """Add custom command-line options."""
    parser.addoption(
        "--full",
        action="store_true",
        default=False,
        help="Run full test suite including integration tests (requires installed package)",
    )


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: tests that run the installed fqbn command"
    )


def pytest_collection_modifyitems(config, items):
    """Skip integration tests unless --full is given."""
    if config.getoption("--full"):
        return
    skip_integration = pytest.mark.skip(reason="needs --full option to run")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)
