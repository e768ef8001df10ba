import datetime
import logging

from gitviz.logs import DailyFileHandler, configure_logging
from gitviz.settings import GitvizSettings


def _fixed_clock(day: int):
    return lambda: datetime.datetime(2024, 5, day, 23, 59, 0)


def _record(message: str, level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord("gitviz.test", level, __file__, 1, message, None, None)


def test_file_name_follows_the_clock(tmp_path):
    handler = DailyFileHandler(tmp_path / "logs", clock=_fixed_clock(7))

    handler.emit(_record("first"))
    handler.clock = _fixed_clock(8)
    handler.emit(_record("second", logging.ERROR))

    first = (tmp_path / "logs" / "gitviz-2024-05-07.log").read_text(encoding="utf-8")
    second = (tmp_path / "logs" / "gitviz-2024-05-08.log").read_text(encoding="utf-8")
    assert first.endswith("[INFO] first\n")
    assert second.endswith("[ERROR] second\n")
    assert first.startswith("[")


def test_lines_are_appended(tmp_path):
    handler = DailyFileHandler(tmp_path, clock=_fixed_clock(1))

    handler.emit(_record("a"))
    handler.emit(_record("b"))

    lines = (tmp_path / "gitviz-2024-05-01.log").read_text(encoding="utf-8").splitlines()
    assert [line.rsplit(" ", 1)[-1] for line in lines] == ["a", "b"]


def test_unwritable_directory_does_not_raise(tmp_path, monkeypatch):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("x", encoding="utf-8")
    handler = DailyFileHandler(blocker / "logs", clock=_fixed_clock(1))
    reported = []
    monkeypatch.setattr(handler, "handleError", reported.append)

    handler.emit(_record("lost"))

    assert len(reported) == 1


def test_configure_logging_is_idempotent(tmp_path):
    settings = GitvizSettings(log_dir=str(tmp_path))

    configure_logging(settings)
    logger = configure_logging(settings, clock=_fixed_clock(3))

    handlers = [h for h in logger.handlers if isinstance(h, DailyFileHandler)]
    assert len(handlers) == 1
    assert handlers[0].current_path() == tmp_path / "gitviz-2024-05-03.log"


def test_configure_logging_without_directory(tmp_path):
    logger = configure_logging(GitvizSettings(log_dir=None))

    assert not any(isinstance(h, DailyFileHandler) for h in logger.handlers)
