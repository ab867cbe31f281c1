import json
import logging

import pytest

from utils import clamp, load_config, map_range, setup_logging


def test_clamp():
    assert clamp(5, 0, 10) == 5
    assert clamp(-1, 0, 10) == 0
    assert clamp(11, 0, 10) == 10


def test_map_range_is_linear():
    assert map_range(1, 1, 15, 0, 255) == 0
    assert map_range(15, 1, 15, 0, 255) == 255
    assert map_range(8, 1, 15, 0, 255) == pytest.approx(127.5)


def test_map_range_does_not_clamp():
    assert map_range(29, 1, 15, 0, 255) == pytest.approx(510)
    assert map_range(0, 1, 15, 0, 255) == pytest.approx(-255 / 14)


def test_load_config(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"simulation_parameters": {"seed": 5}}))
    assert load_config(str(path)) == {"simulation_parameters": {"seed": 5}}


def test_load_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "missing.json"))


def test_load_config_bad_json(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json")
    with pytest.raises(json.JSONDecodeError):
        load_config(str(path))


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_setup_logging(tmp_path, restore_root_logger):
    log_file = tmp_path / "logs" / "run.log"
    setup_logging({"logging": {"level": "debug", "log_file": str(log_file)}})

    root = restore_root_logger
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 2
    logging.info("hello from the test")
    for handler in root.handlers:
        handler.flush()
    assert "hello from the test" in log_file.read_text()
