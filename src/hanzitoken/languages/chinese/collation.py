"""
語系比較器

同一個漢字可能有多種 Unicode 表示 (例如 CJK 相容表意字 U+F9D1 與統一表意字 六)，
在排序規則下兩者相等。比較前先做 NFD 正規化，讓標準等價的字串視為相同。
"""

import unicodedata
from functools import lru_cache


@lru_cache(maxsize=4096)
def _collation_key(text: str) -> str:
    return unicodedata.normalize("NFD", text)


class Collator:
    """
    以標準等價 (canonical equivalence) 為基礎的字串比較器

    只保證「相等與否」與 locale 的排序規則一致；大小順序以正規化後的碼位決定。
    """

    def __init__(self, locale: str = "zh_CN"):
        self.locale = locale

    def compare(self, a: str, b: str) -> int:
        """
        比較兩個字串

        Returns:
            int: a < b 回傳 -1，相等回傳 0，a > b 回傳 1
        """
        key_a = _collation_key(a)
        key_b = _collation_key(b)
        if key_a == key_b:
            return 0
        return -1 if key_a < key_b else 1

    def equals(self, a: str, b: str) -> bool:
        return self.compare(a, b) == 0

    def __repr__(self) -> str:
        return f"Collator(locale={self.locale!r})"
