"""
Loguru sinks and stdlib interception

Every record carries three extra fields:
- service_context: "<service>@<env>:<pid>"
- chain_start_time: first timestamp of the current @Logger.io call chain
- call_target: file::qualname:line of the decorated callable
"""

from contextvars import ContextVar
from datetime import datetime
from enum import StrEnum
import logging
import os
from pathlib import Path
import re
import sys
from typing import TYPE_CHECKING

from loguru import logger as loguru_logger


if TYPE_CHECKING:
    from loguru import Logger as LoguruLogger

from movie_booking.platform.config.core_setting import settings
from movie_booking.platform.constant.path import LOG_DIR
from movie_booking.platform.logging.service_context import get_service_context


# Keys whose values never reach the log output
SENSITIVE_KEYWORDS = {
    'password',
    'key_secret',
    'razorpay_signature',
}

chain_start_time_var: ContextVar[float] = ContextVar('chain_start_time_var', default=0)
call_depth_var: ContextVar[int] = ContextVar('call_depth_var', default=0)


class ExtraField(StrEnum):
    SERVICE_CONTEXT = 'service_context'
    CHAIN_START_TIME = 'chain_start_time'
    CALL_TARGET = 'call_target'


def _bind_extra(target: 'LoguruLogger') -> 'LoguruLogger':
    return target.bind(
        **{
            ExtraField.SERVICE_CONTEXT: get_service_context(),
            ExtraField.CHAIN_START_TIME: '',
            ExtraField.CALL_TARGET: '',
        }
    )


# uvicorn access line: '127.0.0.1:52144 - "POST /api/bookings/block-seats HTTP/1.1" 400'
_ACCESS_LINE = re.compile(r' - "[A-Z]+ \S+ HTTP/[\d.]+" (?P<status>\d{3})')

# (lowest status, level), checked top-down
_STATUS_LEVELS = (
    (500, 'CRITICAL'),
    (400, 'ERROR'),
    (300, 'WARNING'),
    (200, 'SUCCESS'),
)


def access_log_level(message: str) -> str | None:
    """Log level for a uvicorn access line by its HTTP status; None for other messages."""
    match = _ACCESS_LINE.search(message)
    if match is None:
        return None
    status_code = int(match['status'])
    return next((level for floor, level in _STATUS_LEVELS if status_code >= floor), 'INFO')


class InterceptHandler(logging.Handler):
    """Forward stdlib records (uvicorn, sqlalchemy, asyncio) into loguru"""

    def __init__(self) -> None:
        super().__init__()
        self._logger = _bind_extra(loguru_logger)

    def emit(self, record: logging.LogRecord) -> None:
        message = record.getMessage()
        level: str | int | None = access_log_level(message)
        if level is None:
            try:
                level = loguru_logger.level(record.levelname).name
            except ValueError:
                level = record.levelno

        # Skip logging's own frames so {file}/{line} point at the real caller
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back  # type: ignore[assignment]
            depth += 1

        self._logger.opt(depth=depth, exception=record.exc_info).log(level, message)


io_log_format = ' | '.join(
    (
        f'<c>{{extra[{ExtraField.SERVICE_CONTEXT}]}}</>',
        '<lvl>{level:<8}</>',
        f'<c>{{file}}::{{function}}:{{line}}</>=><y>{{extra[{ExtraField.CALL_TARGET}]}}</>',
        '{message}',
        '<lk>{elapsed}</>',
        f'<lk>{{extra[{ExtraField.CHAIN_START_TIME}]:<18}}</>',
    )
)


def _log_file_path() -> Path:
    test_log_dir = os.environ.get('TEST_LOG_DIR')
    hour = datetime.now().strftime('%Y-%m-%d_%H')
    if test_log_dir:
        return Path(test_log_dir) / f'test_{hour}.log'
    return LOG_DIR / f'{hour}.log'


def _configure_sinks(target: 'LoguruLogger') -> None:
    level = 'DEBUG' if settings.DEBUG else 'INFO'
    target.remove()
    target.add(sys.stdout, format=io_log_format, level=level, enqueue=True)

    # Production ships stdout only
    if settings.DEBUG:
        target.add(
            str(_log_file_path()),
            format=io_log_format,
            level=level,
            rotation='1 hour',
            retention='7 days',
            compression='gz',
            enqueue=True,
        )


_configure_sinks(loguru_logger)
custom_logger = _bind_extra(loguru_logger)

logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
