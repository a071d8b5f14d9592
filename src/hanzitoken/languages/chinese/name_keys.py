"""
姓名索引鍵

由 token 序列產生排序鍵與姓名查詢鍵，讓「张三」可以用 ZHANGSAN、ZS、SAN 等方式找到。
"""

from typing import Iterable, List, Sequence, Set

from hanzitoken.core.token import Token, TokenType


def build_sort_key(tokens: Iterable[Token]) -> str:
    """
    產生排序鍵

    拼音 token 先放拼音再放原字，使同音字排在一起、再依原字區分:
        [张 ZHANG][三 SAN] -> "ZHANG 张 SAN 三"
    """
    parts: List[str] = []
    for token in tokens:
        if token.type is TokenType.PINYIN:
            parts.append(token.target)
        parts.append(token.source)
    return Token.SEPARATOR.join(parts)


def build_name_lookup_keys(tokens: Sequence[Token]) -> Set[str]:
    """
    產生姓名查詢鍵

    從最後一個 token 往前累積三種後綴鍵 (原文、全拼、首字母)，每一步都加入集合，
    因此也能用名字 (不含姓) 查到。UNKNOWN token 不參與。

    Args:
        tokens: tokenizer 的輸出

    Returns:
        Set[str]: 查詢鍵集合
    """
    keys: Set[str] = set()
    original = ""
    pinyin = ""
    initials = ""

    for token in reversed(tokens):
        if token.type is TokenType.UNKNOWN:
            continue

        if token.type is TokenType.PINYIN:
            pinyin = token.target + pinyin
            initials = token.target[0] + initials
            original = token.source + original
        else:
            pinyin = _prepend_word(token.target, pinyin)
            initials = token.target[0] + initials
            original = _prepend_word(token.source, original)

        keys.add(original)
        keys.add(pinyin)
        keys.add(initials)

    return keys


def _prepend_word(word: str, key: str) -> str:
    if not key:
        return word
    return word + Token.SEPARATOR + key
