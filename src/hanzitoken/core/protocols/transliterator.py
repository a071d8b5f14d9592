"""
Transliterator Protocol

定義轉寫引擎的最小介面（text -> text）。
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class TransliteratorProtocol(Protocol):
    def transliterate(self, text: str) -> str:
        """將輸入文字轉寫為目標表示"""
        ...
