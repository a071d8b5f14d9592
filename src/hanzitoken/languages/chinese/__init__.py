"""
中文斷詞模組

把聯絡人姓名等短字串切成拉丁字母、漢字拼音與無法分類三種 token，
供排序鍵、姓名索引與拼音搜尋使用。

主要類別:
- HanziTokenizer: 斷詞器
- TransliterationAdapter: pypinyin / Unidecode 轉接層
- SurnameOverrideTable: 多音字姓氏表
- Collator: 語系等價比較器
"""

from __future__ import annotations

import importlib
from typing import Any

from hanzitoken.utils.lazy_imports import CHINESE_INSTALL_HINT

INSTALL_HINT = CHINESE_INSTALL_HINT

_LAZY_IMPORTS = {
    "HanziTokenizer": (".tokenizer", "HanziTokenizer"),
    "create_tokenizer": (".tokenizer", "create_tokenizer"),
    "get_tokenizer": (".tokenizer", "get_tokenizer"),
    "has_engine": (".tokenizer", "has_engine"),
    "tokenize": (".tokenizer", "tokenize"),
    "TransliterationAdapter": (".transliterator", "TransliterationAdapter"),
    "TransliteratorUnavailableError": (".transliterator", "TransliteratorUnavailableError"),
    "Ready": (".transliterator", "Ready"),
    "Degraded": (".transliterator", "Degraded"),
    "SurnameOverrideTable": (".surnames", "SurnameOverrideTable"),
    "SURNAME_OVERRIDES": (".surnames", "SURNAME_OVERRIDES"),
    "Collator": (".collation", "Collator"),
    "CharClass": (".classifier", "CharClass"),
    "classify": (".classifier", "classify"),
    "build_sort_key": (".name_keys", "build_sort_key"),
    "build_name_lookup_keys": (".name_keys", "build_name_lookup_keys"),
}

__all__ = [
    "HanziTokenizer",
    "create_tokenizer",
    "get_tokenizer",
    "has_engine",
    "tokenize",
    "TransliterationAdapter",
    "TransliteratorUnavailableError",
    "Ready",
    "Degraded",
    "SurnameOverrideTable",
    "SURNAME_OVERRIDES",
    "Collator",
    "CharClass",
    "classify",
    "build_sort_key",
    "build_name_lookup_keys",
    "CHINESE_INSTALL_HINT",
    "INSTALL_HINT",
]


def __getattr__(name: str) -> Any:
    if name not in _LAZY_IMPORTS:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    module_path, attr_name = _LAZY_IMPORTS[name]
    module = importlib.import_module(module_path, __name__)
    value = getattr(module, attr_name)
    globals()[name] = value
    return value


def __dir__() -> list[str]:
    return sorted(set(list(globals().keys()) + list(_LAZY_IMPORTS.keys())))
