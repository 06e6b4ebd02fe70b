import logging

from app import create_app
from config import Config
from logging_config import ROOT_LOGGER, get_core_logger
from main import create_api


def _core_records_are_handled():
    core = get_core_logger()
    return core.isEnabledFor(logging.INFO) and bool(logging.getLogger(ROOT_LOGGER).handlers)


def test_api_keeps_core_info_logs():
    """Roster and ledger mutations are logged when only the JSON API runs."""
    logging.getLogger(ROOT_LOGGER).setLevel(logging.NOTSET)

    create_api(Config(LOG_LEVEL="INFO"))

    assert _core_records_are_handled()


def test_form_app_keeps_core_info_logs():
    logging.getLogger(ROOT_LOGGER).setLevel(logging.NOTSET)

    create_app(Config(LOG_LEVEL="INFO"))

    assert _core_records_are_handled()


def test_log_level_is_reapplied():
    create_api(Config(LOG_LEVEL="WARNING"))
    assert not get_core_logger().isEnabledFor(logging.INFO)

    create_api(Config(LOG_LEVEL="INFO"))
    assert get_core_logger().isEnabledFor(logging.INFO)
