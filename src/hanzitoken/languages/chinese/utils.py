"""
中文工具模組

提供 pypinyin / Unidecode 的延遲載入 (Lazy Loading)，以及字元層級的輔助判斷。
"""

import unicodedata
from typing import Any, Optional

from hanzitoken.utils.lazy_imports import CHINESE_INSTALL_HINT
from hanzitoken.utils.logger import get_logger

logger = get_logger(__name__)

_pypinyin_module: Optional[Any] = None
_unidecode_module: Optional[Any] = None

# 對應 Zs/Zl/Zp：只有「空白類」字元才是分隔符，Tab 等控制字元不是
_SPACE_CATEGORIES = frozenset(("Zs", "Zl", "Zp"))


def _get_pypinyin() -> Any:
    """
    取得 pypinyin 模組 (Lazy Loading)

    Raises:
        ImportError: 如果未安裝 pypinyin
    """
    global _pypinyin_module
    if _pypinyin_module is None:
        try:
            import pypinyin

            _pypinyin_module = pypinyin
        except ImportError as e:
            logger.error("無法載入 pypinyin，請確認是否已安裝")
            raise ImportError(f"Missing Chinese dependencies.\n{CHINESE_INSTALL_HINT}") from e
    return _pypinyin_module


def _get_unidecode() -> Any:
    """
    取得 unidecode 模組 (Lazy Loading)

    Raises:
        ImportError: 如果未安裝 Unidecode
    """
    global _unidecode_module
    if _unidecode_module is None:
        try:
            import unidecode

            _unidecode_module = unidecode
        except ImportError as e:
            logger.error("無法載入 unidecode，請確認是否已安裝 Unidecode")
            raise ImportError(f"Missing ASCII folding dependency.\n{CHINESE_INSTALL_HINT}") from e
    return _unidecode_module


def is_space_char(char: str) -> bool:
    """
    判斷字元是否為空白分隔符 (Unicode space separator / line / paragraph separator)

    Args:
        char: 單個字元
    """
    return unicodedata.category(char) in _SPACE_CATEGORIES
