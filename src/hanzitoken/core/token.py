"""
Token 資料型別

tokenizer 的輸出單位：一段原文 (source) 與它在下游要使用的轉寫結果 (target)。
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar


class TokenType(IntEnum):
    """
    Token 類別

    - LATIN: 拉丁字母 (含已折疊成 ASCII 的擴充拉丁字母)
    - PINYIN: 由單一漢字轉出的拼音
    - UNKNOWN: 無法分類的字元，target 與 source 相同
    """

    LATIN = 1
    PINYIN = 2
    UNKNOWN = 3


@dataclass(frozen=True)
class Token:
    type: TokenType
    source: str
    target: str

    # 下游串接各 token target 時使用的分隔符
    SEPARATOR: ClassVar[str] = " "

    def __post_init__(self):
        if not self.source or not self.target:
            raise ValueError(f"Token source/target must be non-empty: {self.source!r} -> {self.target!r}")
