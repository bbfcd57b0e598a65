import logging.config
import time
from logging import Logger, LogRecord
from typing import ContextManager, Final, Optional

from atipy.core.util.defs import PACKAGE_NAME

DEFAULT_LOGGING_CONFIG: Final[dict] = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '[%(asctime)s] %(levelname)s %(name)s: %(message)s',
        }
    },
    'handlers': {
        'default': {
            'class': 'logging.StreamHandler',
            'level': 'DEBUG',
            'formatter': 'simple',
            'stream': 'ext://sys.stdout',
        }
    },
    'loggers': {
        PACKAGE_NAME: {
            'level': 'DEBUG',
            'handlers': ['default'],
            'propagate': False,
        }
    },
    'root': {
        'level': 'INFO',
        'handlers': ['default'],
    }
}


def apply_default_config() -> None:
    """
    Applies the default logging configuration. The library itself never calls this; it is meant for scripts.
    """
    logging.config.dictConfig(DEFAULT_LOGGING_CONFIG)


class _GuideFilter(logging.Filter):
    """
    Prefixes every record passing a logger with a vertical guide line, marking it as part of an open step.
    """
    GUIDE: Final[str] = '│ '

    def filter(self, record: LogRecord) -> bool:
        record.msg = f'{self.GUIDE}{record.msg}'
        return True


class LoggerStep(ContextManager):
    """
    Context manager bracketing a unit of work with an opening and a closing record.
    The closing record carries the elapsed time, ``'{exit_msg} [{elapsed} ms]'``; if the block raised, the exception
    type is named and the closing record is logged at ``WARNING``. Exceptions are never suppressed.
    :ivar elapsed_ms: The duration of the step in milliseconds; ``None`` until the step is closed.
    """

    def __init__(self, logger: Logger, enter_msg: str, exit_msg: str = 'Done', visualize_step: bool = True,
                 level: int = logging.INFO) -> None:
        """
        :param logger: The logger receiving the records of the step.
        :param enter_msg: Opening message.
        :param exit_msg: Closing message (defaults to ``'Done'``).
        :param visualize_step: Whether records logged through ``logger`` while the step is open get a guide line
        prefix (defaults to ``True``).
        :param level: The level of the opening and the regular closing record (defaults to ``INFO``).
        """
        self.logger = logger
        self.enter_msg = enter_msg
        self.exit_msg = f'└ {exit_msg}' if visualize_step else exit_msg
        self.level = level
        self.guide: Optional[_GuideFilter] = _GuideFilter() if visualize_step else None
        self.elapsed_ms: Optional[float] = None
        self._start: Optional[float] = None

    def __enter__(self) -> 'LoggerStep':
        self.logger.log(self.level, self.enter_msg)
        if self.guide is not None:
            self.logger.addFilter(self.guide)
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.elapsed_ms = (time.perf_counter() - self._start) * 1000
        if self.guide is not None:
            self.logger.removeFilter(self.guide)
        if exc_type is None:
            self.logger.log(self.level, f'{self.exit_msg} [{self.elapsed_ms:.3f} ms]')
        else:
            self.logger.warning(f'{self.exit_msg} with {exc_type.__name__}: {exc_val} [{self.elapsed_ms:.3f} ms]')
