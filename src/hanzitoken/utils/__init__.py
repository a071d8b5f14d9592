"""
工具模組

提供日誌、計時、依賴檢查等通用工具。
"""

from .lazy_imports import (
    CHINESE_INSTALL_HINT,
    check_chinese_dependencies,
    is_chinese_available,
)
from .logger import (
    TimingContext,
    enable_debug_logging,
    enable_timing_logging,
    get_logger,
    setup_logger,
)

__all__ = [
    # 日誌工具
    "get_logger",
    "setup_logger",
    "enable_debug_logging",
    "enable_timing_logging",
    "TimingContext",

    # 依賴檢查
    "is_chinese_available",
    "check_chinese_dependencies",
    "CHINESE_INSTALL_HINT",
]
