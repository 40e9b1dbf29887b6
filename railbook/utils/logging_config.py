"""로깅 설정

railbook.* 로거 계층에만 핸들러를 단다. 루트 로거는 건드리지 않는다.
콘솔은 stderr (메뉴 출력은 stdout), 파일 로그는 LedgerConfig.log_file.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from railbook.models.config import LedgerConfig

LOGGER_NAME = "railbook"

# ANSI 컬러 코드
_COLORS = {
    "DEBUG": "\033[36m",     # Cyan
    "INFO": "\033[32m",      # Green
    "WARNING": "\033[33m",   # Yellow
    "ERROR": "\033[31m",     # Red
    "CRITICAL": "\033[35m",  # Magenta
}
_RESET = "\033[0m"


class ComponentFilter(logging.Filter):
    """'railbook.skill.persistence' → record.component = 'skill.persistence'"""

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name
        if name.startswith(LOGGER_NAME + "."):
            name = name[len(LOGGER_NAME) + 1:]
        record.component = name
        return True


class ColorFormatter(logging.Formatter):
    """레벨별 컬러 포매터 (tty가 아니면 컬러 없음)"""

    def __init__(self, fmt: str, datefmt: str, use_color: bool = True) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt)
        self._use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        if not self._use_color:
            return super().format(record)
        original = record.levelname
        record.levelname = f"{_COLORS.get(original, '')}{original:<8}{_RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = original


def _reset_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def setup_logging(config: LedgerConfig) -> logging.Logger:
    """railbook 로거 초기화. 여러 번 호출해도 핸들러가 중복되지 않는다.

    Args:
        config: log_level, log_file, notification_methods 를 사용
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, config.log_level.upper(), logging.WARNING))
    logger.propagate = False
    _reset_handlers(logger)

    handlers: list[logging.Handler] = []

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(ColorFormatter(
        fmt="%(asctime)s %(levelname)s %(component)s │ %(message)s",
        datefmt="%H:%M:%S",
        use_color=sys.stderr.isatty(),
    ))
    handlers.append(console)

    if config.log_file:
        path = Path(config.log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(path, encoding="utf-8")
        fh.setFormatter(logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(component)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
        handlers.append(fh)

    for handler in handlers:
        handler.addFilter(ComponentFilter())
        logger.addHandler(handler)

    # webhook을 쓸 때만 aiohttp 경고를 같은 핸들러로 받는다
    if "webhook" in config.notification_methods:
        client = logging.getLogger("aiohttp.client")
        client.setLevel(logging.WARNING)
        client.propagate = False
        _reset_handlers(client)
        for handler in handlers:
            client.addHandler(handler)

    return logger
