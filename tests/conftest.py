"""Test configuration for pytest."""

import logging
import os
import pytest

from geoconform.validators.container import ValidatorContainer


@pytest.fixture(autouse=True)
def configure_test_logging():
    """Configure logging for tests to be minimal."""
    # Policy downgrades are logged at WARNING; keep test output quiet
    os.environ['GEOCONFORM_LOG_LEVEL'] = 'ERROR'

    logging.getLogger().setLevel(logging.WARNING)

    for logger_name in ['geoconform.metadata', 'geoconform.citation', 'geoconform.cs']:
        logging.getLogger(logger_name).setLevel(logging.ERROR)


@pytest.fixture
def container():
    """A fresh container with default settings."""
    return ValidatorContainer.default()
