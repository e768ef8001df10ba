import datetime
import logging
from pathlib import Path
from typing import Callable

from gitviz.settings import GitvizSettings

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_PREFIX = "gitviz-"

Clock = Callable[[], datetime.datetime]


class DailyFileHandler(logging.Handler):
    """Append log lines to ``<log_dir>/gitviz-YYYY-MM-DD.log``.

    The file name is recomputed on every record from ``clock``, so a
    long-running process rolls over to a new file at midnight. Files are
    opened in append mode per record; concurrent writers get no coordination
    beyond what the OS append primitive provides.

    Failures to create the directory or write the file are reported through
    :meth:`logging.Handler.handleError` and never propagate to the caller.
    """

    def __init__(
        self,
        log_dir: str | Path,
        clock: Clock | None = None,
        level: int = logging.NOTSET,
    ) -> None:
        super().__init__(level)
        self.log_dir = Path(log_dir)
        self.clock = clock or datetime.datetime.now
        self.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))

    def current_path(self) -> Path:
        return self.log_dir / f"{LOG_FILE_PREFIX}{self.clock().date().isoformat()}.log"

    def emit(self, record: logging.LogRecord) -> None:
        try:
            line = self.format(record)
            path = self.current_path()
            path.parent.mkdir(parents=True, exist_ok=True)
            with path.open("a", encoding="utf-8") as fh:
                fh.write(line + "\n")
        except Exception:  # noqa: BLE001
            self.handleError(record)


def configure_logging(settings: GitvizSettings, clock: Clock | None = None) -> logging.Logger:
    """Attach the daily file handler to the ``gitviz`` logger.

    Safe to call repeatedly: a previously installed handler is replaced.
    """
    logger = logging.getLogger("gitviz")
    logger.setLevel(settings.log_level.upper())

    for handler in list(logger.handlers):
        if isinstance(handler, DailyFileHandler):
            logger.removeHandler(handler)
            handler.close()

    if settings.log_dir:
        logger.addHandler(DailyFileHandler(settings.log_dir, clock=clock))
    return logger
