"""
hanzitoken - 中文姓名拼音斷詞器 (Hanzi-to-Pinyin Name Tokenizer)

核心概念：
- 把姓名字串切成「拉丁字母」、「漢字拼音」、「無法分類」三種 token
- 漢字一字一 token，首字遇到多音字姓氏時採用姓氏讀音
- 拼音引擎不可用時不拋錯，而是回傳空結果 (降級模式)

官方入口（穩定 API）：
- `hanzitoken.tokenize` / `hanzitoken.has_engine`
- `hanzitoken.get_tokenizer` / `hanzitoken.create_tokenizer`
- `hanzitoken.build_sort_key` / `hanzitoken.build_name_lookup_keys`
"""

# =============================================================================
# 資料型別與配置
# =============================================================================
from hanzitoken.config import TokenizerConfig
from hanzitoken.core import Token, TokenizerEvent, TokenType

# =============================================================================
# Tokenizer 層（官方入口）
# =============================================================================
from hanzitoken.languages.chinese.name_keys import build_name_lookup_keys, build_sort_key
from hanzitoken.languages.chinese.tokenizer import (
    HanziTokenizer,
    create_tokenizer,
    get_tokenizer,
    has_engine,
    tokenize,
)

# =============================================================================
# 日誌工具
# =============================================================================
from hanzitoken.utils.logger import enable_debug_logging, enable_timing_logging, get_logger

# =============================================================================
# 依賴檢查工具
# =============================================================================
from hanzitoken.utils.lazy_imports import check_chinese_dependencies, is_chinese_available

__all__ = [
    # Types
    "Token",
    "TokenType",
    "TokenizerEvent",
    "TokenizerConfig",
    # Tokenizer
    "HanziTokenizer",
    "create_tokenizer",
    "get_tokenizer",
    "has_engine",
    "tokenize",
    # Name keys
    "build_sort_key",
    "build_name_lookup_keys",
    # Logging
    "get_logger",
    "enable_debug_logging",
    "enable_timing_logging",
    # Dependency checks
    "is_chinese_available",
    "check_chinese_dependencies",
]

__version__ = "0.1.0"
