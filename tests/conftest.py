"""
測試共用替身

以固定對照表取代 pypinyin / Unidecode，讓斷詞邏輯的測試不受字典版本影響。
"""

import pytest

from hanzitoken.config import TokenizerConfig
from hanzitoken.languages.chinese.tokenizer import HanziTokenizer
from hanzitoken.languages.chinese.transliterator import TransliterationAdapter


class FakePinyinEngine:
    """查表的拼音引擎；查不到時原樣返回 (與 pypinyin 對非漢字的行為一致)"""

    DEFAULT_TABLE = {
        "中": "ZHONG",
        "张": "ZHANG",
        "三": "SAN",
        "李": "LI",
        "单": "DAN",
        "曾": "CENG",
        "田": "TIAN",
        "芳": "FANG",
    }

    def __init__(self, table=None):
        self.table = dict(self.DEFAULT_TABLE if table is None else table)
        self.calls = []

    def transliterate(self, text: str) -> str:
        self.calls.append(text)
        return self.table.get(text, text)


class FakeAsciiFold:
    DEFAULT_TABLE = {
        "é": "e",
        "ë": "e",
        "ß": "ss",
        "Ñ": "N",
        "\u1ec7": "e",
        "\u00ad": "",
    }

    def __init__(self, table=None):
        self.table = dict(self.DEFAULT_TABLE if table is None else table)

    def transliterate(self, text: str) -> str:
        return self.table.get(text, text)


@pytest.fixture
def pinyin_engine():
    return FakePinyinEngine()


@pytest.fixture
def ascii_fold():
    return FakeAsciiFold()


@pytest.fixture
def adapter(pinyin_engine, ascii_fold):
    return TransliterationAdapter.from_engines(pinyin_engine, ascii_fold)


@pytest.fixture
def make_tokenizer(adapter):
    def _make(config=None, **kwargs):
        return HanziTokenizer(adapter=kwargs.pop("adapter", adapter), config=config or TokenizerConfig(), **kwargs)

    return _make


@pytest.fixture
def tokenizer(make_tokenizer):
    return make_tokenizer()
