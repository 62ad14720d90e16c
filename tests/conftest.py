import logging

import pytest

from tick import config
from tick.lib import ansi


@pytest.fixture
def tmp_tick_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(config, "TICK_DIR", tmp_path)
    monkeypatch.setattr(config, "CONFIG_PATH", tmp_path / "config.yaml")
    monkeypatch.setattr(config, "DATA_PATH", tmp_path / "tasks.txt")
    monkeypatch.setattr(config, "LOG_DIR", tmp_path)
    monkeypatch.setattr(config._config, "_data", {})
    return tmp_path


@pytest.fixture(autouse=True)
def _default_theme():
    ansi.use(ansi.DEFAULT)
    yield
    ansi.use(ansi.DEFAULT)


@pytest.fixture
def plain_theme():
    ansi.use(ansi.PLAIN)


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in list(root.handlers):
        root.removeHandler(h)
        if h not in handlers:
            h.close()
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)
