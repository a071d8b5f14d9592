"""
多音字姓氏表

pypinyin 對單字取的是最常見讀音，但作為姓氏時常常讀錯 (例如 单 作姓讀 shan、
曾 作姓讀 zeng)。這張表只在「輸入的第一個字」查詢，命中時直接採用表中的拼音。
"""

from typing import Iterable, Optional, Tuple

from .collation import Collator

# (姓氏, 拼音)；拼音為大寫 ASCII，不含分隔符
SURNAME_OVERRIDES: Tuple[Tuple[str, str], ...] = (
    ("夏", "XIA"),
    ("瞿", "QU"),
    ("曾", "ZENG"),
    ("石", "SHI"),
    ("解", "XIE"),
    ("藏", "ZANG"),
    ("翟", "ZHAI"),
    ("都", "DU"),
    ("六", "LU"),
    ("薄", "BO"),
    ("贾", "JIA"),
    ("居", "JU"),
    ("查", "ZHA"),
    ("盛", "SHENG"),
    ("塔", "TA"),
    ("和", "HE"),
    ("蓝", "LAN"),
    ("殷", "YIN"),
    ("乾", "QIAN"),
    ("陆", "LU"),
    ("乜", "NIE"),
    ("阚", "KAN"),
    ("叶", "YE"),
    ("强", "QIANG"),
    ("汤", "TANG"),
    ("万", "WAN"),
    ("沈", "SHEN"),
    ("仇", "QIU"),
    ("南", "NAN"),
    ("单", "SHAN"),
    ("卜", "BU"),
    ("鸟", "NIAO"),
    ("思", "SI"),
    ("寻", "XUN"),
    ("於", "YU"),
    ("余", "YU"),
    ("浅", "QIAN"),
    ("浣", "WAN"),
    ("无", "WU"),
    ("信", "XIN"),
    ("許", "XU"),
    ("齐", "QI"),
    ("俞", "YU"),
    ("若", "RUO"),
)


class SurnameOverrideTable:
    """
    姓氏讀音覆寫表

    查詢採線性掃描並以 Collator 判斷相等，只接受完全相符 (不做前綴或模糊比對)。
    表很小且只在首字查詢，O(n) 的成本可以接受。
    """

    def __init__(
        self,
        entries: Iterable[Tuple[str, str]] = SURNAME_OVERRIDES,
        collator: Optional[Collator] = None,
    ):
        self._entries = tuple(entries)
        self._collator = collator or Collator("zh_CN")

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, candidate: str) -> bool:
        return self.lookup(candidate) is not None

    def lookup(self, candidate: str) -> Optional[str]:
        """
        查詢單字姓氏的覆寫拼音

        Args:
            candidate: 單個字元

        Returns:
            Optional[str]: 命中時回傳大寫拼音，否則 None
        """
        for surname, rendering in self._entries:
            if self._collator.equals(candidate, surname):
                return rendering
        return None
