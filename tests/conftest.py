"""
Shared pytest fixtures for the numvec test suite.

Every test runs with:
- user config redirected into tmp_path (the real ~/.numvec is never read)
- NUMVEC_* environment overrides cleared
- the 'numvec' logger restored afterwards

Usage in tests:
    def test_something(thirteen):
        assert len(thirteen) == 13

    def test_lookup(pi_digits):
        assert pi_digits.index_of(4.0) == 2
"""

import logging

import numpy as np
import pytest

from numvec.config import ConfigManager, ENV_OVERRIDES
from numvec.core.vector import DenseVector


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep tests away from the real user config and environment."""
    user_config = tmp_path / "home" / ".numvec" / "config.yaml"
    monkeypatch.setattr(ConfigManager, "USER_CONFIG_FILE", user_config)
    for env_key in ENV_OVERRIDES:
        monkeypatch.delenv(env_key, raising=False)
    monkeypatch.delenv("NUMVEC_ASCII_ONLY", raising=False)
    monkeypatch.delenv("NUMVEC_UNICODE", raising=False)
    return user_config


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Undo handlers and level set by setup_logging()."""
    logger = logging.getLogger("numvec")
    handlers = list(logger.handlers)
    level = logger.level
    yield
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)


@pytest.fixture
def thirteen():
    """DenseVector of the integers 1..13."""
    return DenseVector(np.arange(1, 14, dtype=np.int64))


@pytest.fixture
def pi_digits():
    """DenseVector [3.0, 1.0, 4.0]."""
    return DenseVector([3.0, 1.0, 4.0])


@pytest.fixture
def project_dir(tmp_path):
    """Empty project directory for ConfigManager / CLI tests."""
    path = tmp_path / "project"
    path.mkdir()
    return path
