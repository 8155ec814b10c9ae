"""
Test configuration and fixtures for the skillfix project.

This file is the root pytest configuration file that sets up pytest
markers and imports fixtures from the fixtures modules to make them
available to all tests.
"""

# Import fixtures from the fixtures modules to make them available to all tests
from tests.fixtures.base import (
    base_test_env,
    clean_env,
    cli_runner,
    frozen_clock,
    mock_env_vars,
    reset_app_config,
    temp_dir,
)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: mark a test as a unit test")
    config.addinivalue_line("markers", "acceptance: mark a test as an acceptance test")
    config.addinivalue_line("markers", "cli: mark a test that tests CLI functionality")
    config.addinivalue_line("markers", "performance: mark a test that measures performance")
    config.addinivalue_line("markers", "slow: mark a test that takes longer than average to run")
