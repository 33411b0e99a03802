"""Root conftest for all tests.

Provides a quiet project configuration and an initialised logger so converter
and logging tests can run without touching the console or the repository.
"""

from pathlib import Path

import pytest
from omegaconf import OmegaConf

from yearweek.loggers.loguru.config import setup_logger

PROJECT_ROOT = Path(__file__).resolve().parents[1]


def make_config(**weeks):
    """Test configuration with console/file logging off and an optional weeks section."""
    config = {
        "loggers": {
            "loguru": {
                "default_level": "DEBUG",
                "console_enabled": False,
                "file_enabled": False,
                "enqueue": False,
            }
        }
    }
    if weeks:
        config["weeks"] = weeks
    return OmegaConf.create(config)


@pytest.fixture
def config_factory():
    """Builds test configurations with a custom weeks section."""
    return make_config


@pytest.fixture
def cfg():
    """Configuration using the default week policy."""
    return make_config()


@pytest.fixture
def logger_config(cfg, tmp_path):
    """Project logger set up against the test configuration."""
    return setup_logger(cfg, log_dir_override=tmp_path)


@pytest.fixture
def error_messages(logger_config):
    """Collects every ERROR (and above) message logged during a test."""
    messages = []
    handler_id = logger_config.add_custom_sink(messages.append, level="ERROR", format_str="{message}")
    yield messages
    logger_config.logger.remove(handler_id)
