import json
import logging

import pytest
import structlog

from cosmos_voyager.log import configure_logging


@pytest.fixture(autouse=True)
def restore_logging():
    yield
    structlog.reset_defaults()
    logging.getLogger().setLevel(logging.WARNING)
    for handler in logging.getLogger().handlers[:]:
        logging.getLogger().removeHandler(handler)


def test_json_output(capsys):
    configure_logging("DEBUG", json=True)
    structlog.get_logger("cosmos_voyager.test").info("Galaxy unlocked", galaxy_id="g2")
    line = capsys.readouterr().err.strip().splitlines()[-1]
    event = json.loads(line)
    assert event["event"] == "Galaxy unlocked"
    assert event["galaxy_id"] == "g2"
    assert event["level"] == "info"
    assert "timestamp" in event


def test_level_filters(capsys):
    configure_logging("WARNING")
    assert logging.getLogger().level == logging.WARNING
    structlog.get_logger("cosmos_voyager.test").info("hidden")
    assert "hidden" not in capsys.readouterr().err
