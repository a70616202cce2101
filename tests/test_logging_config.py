import logging

import pytest

from citepanel import MessageRenderer, RenderConfig
from citepanel.utils import setup_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger("citepanel")
    previous = logger.level
    yield logger
    logger.setLevel(previous)


def test_setup_logging_sets_package_level_and_creates_log_dir(tmp_path, package_logger):
    log_file = tmp_path / "logs" / "citepanel.log"
    returned = setup_logging(log_file=str(log_file), package_level="debug")
    assert returned is package_logger
    assert package_logger.level == logging.DEBUG
    assert log_file.parent.is_dir()


def test_unknown_package_level_falls_back_to_info(package_logger):
    setup_logging(package_level="chatty")
    assert package_logger.level == logging.INFO


def test_host_level_is_kept_without_package_level(package_logger):
    package_logger.setLevel(logging.ERROR)
    setup_logging()
    MessageRenderer()
    assert package_logger.level == logging.ERROR


def test_renderer_applies_configured_level(package_logger):
    package_logger.setLevel(logging.ERROR)
    MessageRenderer(RenderConfig(log_level="WARNING"))
    assert package_logger.level == logging.WARNING
