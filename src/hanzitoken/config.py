"""
全域配置模組

提供統一的配置類別，控制日誌、計時、事件回呼與斷詞行為。

使用方式:
    from hanzitoken import create_tokenizer, TokenizerConfig

    # 簡單開啟 verbose 模式
    tokenizer = create_tokenizer(TokenizerConfig(verbose=True))

    # 進階: 使用標準 logging 控制
    import logging
    logging.getLogger("hanzitoken").setLevel(logging.DEBUG)
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from .core.events import TokenizerEventHandler
from .utils.logger import setup_logger


def configure_logging(verbose: bool = False) -> None:
    """
    根據 verbose 設定配置 logging

    Args:
        verbose: 是否開啟詳細日誌
    """
    if verbose:
        setup_logger(level=logging.DEBUG)
    # 不主動設定，讓使用者可以透過標準 logging 控制


@dataclass
class TokenizerConfig:
    """
    斷詞器配置類別

    屬性:
        verbose: 是否開啟詳細日誌
        on_timing: 計時回呼函數 (operation: str, elapsed: float) -> None
        on_event: 事件回呼函數，接收 degraded 事件
        enable_surname_overrides: 首字是否查詢多音字姓氏表
        merge_unclassified_runs: 無法轉拼音的漢字是否與相鄰的 UNKNOWN 字元合併成同一個 token
            (預設 False：每個漢字各自成為一個 token)

    使用範例:
        def my_callback(op, elapsed):
            print(f"{op} took {elapsed:.3f}s")

        tokenizer = create_tokenizer(TokenizerConfig(verbose=True, on_timing=my_callback))
    """

    # 日誌控制
    verbose: bool = False

    # 回呼
    on_timing: Optional[Callable[[str, float], None]] = None
    on_event: Optional[TokenizerEventHandler] = None

    # 斷詞行為
    enable_surname_overrides: bool = True
    merge_unclassified_runs: bool = False

    def __post_init__(self):
        """初始化後設定 logger"""
        configure_logging(self.verbose)


# 預設配置實例 (靜默模式)
DEFAULT_CONFIG = TokenizerConfig(verbose=False)
