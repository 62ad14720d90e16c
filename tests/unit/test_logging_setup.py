import logging

from tick.logging_setup import _ConsoleFilter, setup_logging


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)



def test_console_filter_passes_tick_records():
    f = _ConsoleFilter()
    assert f.filter(_record("tick", logging.DEBUG))
    assert f.filter(_record("tick.storage", logging.INFO))


def test_console_filter_quiets_third_party():
    f = _ConsoleFilter()
    assert not f.filter(_record("yaml", logging.WARNING))
    assert not f.filter(_record("ticker", logging.WARNING))
    assert f.filter(_record("yaml", logging.ERROR))


def test_setup_logging_installs_handlers(tmp_path, restore_logging):
    log_file = setup_logging(log_dir=tmp_path / "logs", console_level=logging.INFO)

    root = logging.getLogger()
    assert log_file == tmp_path / "logs" / "tick.log"
    assert len(root.handlers) == 2
    console = next(h for h in root.handlers if not isinstance(h, logging.FileHandler))
    assert console.level == logging.INFO
    assert any(isinstance(f, _ConsoleFilter) for f in console.filters)


def test_setup_logging_writes_debug_to_file(tmp_path, restore_logging):
    log_file = setup_logging(log_dir=tmp_path)

    logging.getLogger("tick.storage").debug("saved 3 tasks")
    logging.getLogger("yaml").warning("noisy")
    for h in logging.getLogger().handlers:
        h.flush()

    text = log_file.read_text(encoding="utf-8")
    assert "DEBUG tick.storage: saved 3 tasks" in text
    assert "noisy" in text


def test_setup_logging_is_idempotent(tmp_path, restore_logging):
    setup_logging(log_dir=tmp_path)
    setup_logging(log_dir=tmp_path)
    assert len(logging.getLogger().handlers) == 2
