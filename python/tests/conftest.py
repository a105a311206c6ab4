"""
Pytest configuration and fixtures for namecase tests.
"""

import logging
import os

import pytest


@pytest.fixture(scope="session", autouse=True)
def isolated_log_dir(tmp_path_factory):
    """
    Keep log files out of the working directory.

    setup_logging() attaches its file handler once per process, so the
    directory has to be in place before the first test runs.
    """
    log_dir = tmp_path_factory.mktemp("namecase_logs")
    previous = os.environ.get("NAMECASE_LOG_DIR")
    os.environ["NAMECASE_LOG_DIR"] = str(log_dir)

    yield log_dir

    if previous is None:
        os.environ.pop("NAMECASE_LOG_DIR", None)
    else:
        os.environ["NAMECASE_LOG_DIR"] = previous


@pytest.fixture
def fresh_logger():
    """Detach namecase handlers before and after a test that inspects them."""
    logger = logging.getLogger("namecase")
    saved = list(logger.handlers)
    for handler in saved:
        logger.removeHandler(handler)

    yield logger

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    for handler in saved:
        logger.addHandler(handler)


@pytest.fixture
def rule_one_words():
    """Words that take the sibilant 'es' plural."""
    return ["bus", "class", "box", "quiz", "dish", "match", "Box", "STATUS", "series"]
