"""
Fixtures package for the SKILLFIX testing framework.

This package provides reusable fixtures and test data factories
to standardize the approach to testing throughout the project.
"""

from tests.fixtures.base import (
    base_test_env,
    clean_env,
    cli_runner,
    frozen_clock,
    mock_env_vars,
    reset_app_config,
    temp_dir,
)
from tests.fixtures.factories import (
    BaseFactory,
    BundleFactory,
    ModelFactory,
    RecordAttributesFactory,
    RecordFactory,
    RecordMetadataFactory,
)
