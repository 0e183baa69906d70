# app/core/logging.py
import logging
import os
import sys
from logging.handlers import TimedRotatingFileHandler
from app.core.config import settings

_LOGGERS = {}
_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"


def _file_handler(formatter: logging.Formatter) -> logging.Handler:
    os.makedirs(settings.LOG_DIR, exist_ok=True)
    fh = TimedRotatingFileHandler(
        os.path.join(settings.LOG_DIR, settings.LOG_FILE_NAME),
        when="midnight",
        backupCount=14,
        encoding="utf-8",
    )
    fh.setFormatter(formatter)
    return fh


def setup_logger(name: str) -> logging.Logger:
    """이름별 로거를 한 번만 구성해 재사용한다. (stdout + 일 단위 로테이션 파일)"""
    if name in _LOGGERS:
        return _LOGGERS[name]

    logger = logging.getLogger(name)
    logger.setLevel(settings.LOG_LEVEL)

    formatter = logging.Formatter(_FORMAT)

    # 중복 핸들러 방지
    if not logger.handlers:
        sh = logging.StreamHandler(sys.stdout)
        sh.setFormatter(formatter)
        logger.addHandler(sh)
        if settings.LOG_TO_FILE:
            logger.addHandler(_file_handler(formatter))

    logger.propagate = False
    _LOGGERS[name] = logger
    return logger
