"""
日誌與計時工具

所有模組的 logger 都是 `hanzitoken` 的子 logger，使用者可以透過標準 logging 控制:

    import logging
    logging.getLogger("hanzitoken").setLevel(logging.DEBUG)
"""

import logging
import time
from typing import Callable, Optional

ROOT_LOGGER_NAME = "hanzitoken"
DEFAULT_FORMAT = "[%(asctime)s] %(name)s %(levelname)s: %(message)s"

_handler: Optional[logging.Handler] = None


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    取得 hanzitoken 的子 logger

    Args:
        name: 子 logger 名稱，例如 "tokenizer.chinese"；None 表示根 logger
    """
    if not name:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logger(level: int = logging.INFO, fmt: str = DEFAULT_FORMAT) -> logging.Logger:
    """
    為根 logger 掛上 StreamHandler (只掛一次) 並設定等級
    """
    global _handler
    logger = get_logger()
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(fmt))
        logger.addHandler(_handler)
    logger.setLevel(level)
    return logger


def enable_debug_logging() -> logging.Logger:
    return setup_logger(level=logging.DEBUG)


def enable_timing_logging() -> logging.Logger:
    """計時訊息以 DEBUG 輸出，開啟計時即開啟 DEBUG"""
    return setup_logger(level=logging.DEBUG)


class TimingContext:
    """
    計時 context manager

    結束時以指定等級記錄耗時，並呼叫 callback(operation, elapsed)。
    callback 拋出的例外只記錄，不向外傳遞。
    """

    def __init__(
        self,
        operation: str,
        logger: Optional[logging.Logger] = None,
        level: int = logging.DEBUG,
        callback: Optional[Callable[[str, float], None]] = None,
    ):
        self.operation = operation
        self.logger = logger or get_logger()
        self.level = level
        self.callback = callback
        self.elapsed = 0.0
        self._start = 0.0

    def __enter__(self) -> "TimingContext":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.elapsed = time.perf_counter() - self._start
        self.logger.log(self.level, f"[Timing] {self.operation}: {self.elapsed * 1000:.2f}ms")
        if self.callback is not None:
            try:
                self.callback(self.operation, self.elapsed)
            except Exception:
                self.logger.exception("on_timing 回呼執行失敗")
        return False

