"""
Shared fixtures for DropWatch tests
"""

import logging

import pytest


@pytest.fixture(autouse=True)
def reset_dropwatch_logger():
    """Drop handlers installed by CLI runs so later tests don't log to closed streams"""
    yield
    logger = logging.getLogger('dropwatch')
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def drop_dir(tmp_path):
    """A directory to watch"""
    directory = tmp_path / "inbox"
    directory.mkdir()
    return directory
