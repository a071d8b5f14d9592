"""
字元分類模組

以固定的碼位範圍把單一字元分成三類：
- ASCII (< 0x80): 原樣輸出
- 擴充拉丁字母 (< 0x250，或 Latin Extended Additional 0x1E00-0x1EFF): 需折疊成 ASCII
- 其他: 視為漢字候選，交給 tokenizer 決定是拼音還是 UNKNOWN
"""

from enum import Enum

ASCII_LIMIT = 0x80
LATIN_EXTENDED_LIMIT = 0x250
LATIN_EXTENDED_ADDITIONAL = (0x1E00, 0x1EFF)


class CharClass(Enum):
    LATIN_PASSTHROUGH = "latin_passthrough"
    LATIN_FOLD = "latin_fold"
    IDEOGRAPH = "ideograph"


def classify_code_point(code: int) -> CharClass:
    if code < ASCII_LIMIT:
        return CharClass.LATIN_PASSTHROUGH

    low, high = LATIN_EXTENDED_ADDITIONAL
    if code < LATIN_EXTENDED_LIMIT or low <= code <= high:
        return CharClass.LATIN_FOLD

    return CharClass.IDEOGRAPH


def classify(char: str) -> CharClass:
    """
    判斷單一字元的類別

    分類對所有碼位都有定義，不會拋出例外。
    超出 BMP 的字元 (例如 CJK 擴充 B 區) 同樣落在漢字候選。

    Args:
        char: 單個字元

    Returns:
        CharClass: 字元類別
    """
    return classify_code_point(ord(char))
