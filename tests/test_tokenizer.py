"""
測試 HanziTokenizer 的斷詞規則

使用 conftest 中的替身引擎，驗證：
1. 空白分隔與拉丁字母合併
2. 漢字一字一 token 與首字姓氏覆寫
3. UNKNOWN 降級
4. 引擎不可用時的空輸出
"""

import pytest

from hanzitoken.config import TokenizerConfig
from hanzitoken.core.token import Token, TokenType
from hanzitoken.languages.chinese.tokenizer import HanziTokenizer
from hanzitoken.languages.chinese.transliterator import TransliterationAdapter

from conftest import FakeAsciiFold, FakePinyinEngine

LATIN = TokenType.LATIN
PINYIN = TokenType.PINYIN
UNKNOWN = TokenType.UNKNOWN


def _triples(tokens):
    return [(t.type, t.source, t.target) for t in tokens]


class TestLatinRuns:
    def test_space_splits_and_is_dropped(self, tokenizer):
        assert _triples(tokenizer.tokenize("A b")) == [(LATIN, "A", "A"), (LATIN, "b", "b")]

    @pytest.mark.parametrize("text", ["Tony", "a-b.c", "O'Neil", "x1y2", "a\tb"])
    def test_ascii_without_spaces_is_one_token(self, tokenizer, text):
        assert _triples(tokenizer.tokenize(text)) == [(LATIN, text, text)]

    def test_leading_trailing_and_repeated_spaces(self, tokenizer):
        assert _triples(tokenizer.tokenize("  ab   cd ")) == [(LATIN, "ab", "ab"), (LATIN, "cd", "cd")]

    def test_only_spaces(self, tokenizer):
        assert tokenizer.tokenize("   ") == []

    @pytest.mark.parametrize("separator", [" ", "\u00a0", "\u3000"])
    def test_unicode_space_separators(self, tokenizer, separator):
        assert _triples(tokenizer.tokenize(f"ab{separator}cd")) == [(LATIN, "ab", "ab"), (LATIN, "cd", "cd")]

    def test_extended_latin_is_folded_and_merged(self, tokenizer):
        assert _triples(tokenizer.tokenize("café")) == [(LATIN, "café", "cafe")]
        assert _triples(tokenizer.tokenize("Straße Ñu")) == [(LATIN, "Straße", "Strasse"), (LATIN, "Ñu", "Nu")]

    def test_latin_extended_additional_is_folded(self, tokenizer):
        assert _triples(tokenizer.tokenize("Vi\u1ec7t")) == [(LATIN, "Vi\u1ec7t", "Viet")]

    def test_empty_fold_keeps_source(self, tokenizer):
        tokens = tokenizer.tokenize("\u00ad")
        assert _triples(tokens) == [(LATIN, "\u00ad", "\u00ad")]

    def test_missing_ascii_fold_is_passthrough(self, pinyin_engine):
        tokenizer = HanziTokenizer(adapter=TransliterationAdapter.from_engines(pinyin_engine, None))
        assert _triples(tokenizer.tokenize("café")) == [(LATIN, "café", "café")]


class TestIdeographs:
    def test_each_ideograph_is_its_own_token(self, tokenizer):
        assert _triples(tokenizer.tokenize("张三")) == [(PINYIN, "张", "ZHANG"), (PINYIN, "三", "SAN")]

    def test_ideograph_breaks_latin_runs(self, tokenizer):
        assert _triples(tokenizer.tokenize("Tony张三")) == [
            (LATIN, "Tony", "Tony"),
            (PINYIN, "张", "ZHANG"),
            (PINYIN, "三", "SAN"),
        ]
        assert _triples(tokenizer.tokenize("ab中cd")) == [
            (LATIN, "ab", "ab"),
            (PINYIN, "中", "ZHONG"),
            (LATIN, "cd", "cd"),
        ]

    def test_engine_result_is_uppercased(self):
        engine = FakePinyinEngine({"中": "zhong"})
        tokenizer = HanziTokenizer(adapter=TransliterationAdapter.from_engines(engine, FakeAsciiFold()))
        assert _triples(tokenizer.tokenize("中")) == [(PINYIN, "中", "ZHONG")]

    def test_identity_result_is_unknown(self, tokenizer):
        assert _triples(tokenizer.tokenize("한")) == [(UNKNOWN, "한", "한")]

    def test_empty_result_is_unknown(self):
        engine = FakePinyinEngine({"中": ""})
        tokenizer = HanziTokenizer(adapter=TransliterationAdapter.from_engines(engine, FakeAsciiFold()))
        assert _triples(tokenizer.tokenize("中")) == [(UNKNOWN, "中", "中")]

    def test_unknown_ideographs_are_not_merged_by_default(self, tokenizer):
        assert _triples(tokenizer.tokenize("한국a")) == [
            (UNKNOWN, "한", "한"),
            (UNKNOWN, "국", "국"),
            (LATIN, "a", "a"),
        ]

    def test_merge_unclassified_runs(self, make_tokenizer):
        tokenizer = make_tokenizer(TokenizerConfig(merge_unclassified_runs=True))
        assert _triples(tokenizer.tokenize("한국a张")) == [
            (UNKNOWN, "한국", "한국"),
            (LATIN, "a", "a"),
            (PINYIN, "张", "ZHANG"),
        ]
        assert _triples(tokenizer.tokenize("a한 국")) == [
            (LATIN, "a", "a"),
            (UNKNOWN, "한", "한"),
            (UNKNOWN, "국", "국"),
        ]

    def test_supplementary_plane_character_is_one_token(self, tokenizer):
        tokens = tokenizer.tokenize("\U00020000")
        assert _triples(tokens) == [(UNKNOWN, "\U00020000", "\U00020000")]


class TestSurnameOverride:
    def test_override_wins_at_first_position(self, tokenizer, pinyin_engine):
        assert _triples(tokenizer.tokenize("单")) == [(PINYIN, "单", "SHAN")]
        assert "单" not in pinyin_engine.calls

    def test_override_only_applies_to_first_character(self, tokenizer):
        assert _triples(tokenizer.tokenize("单单")) == [(PINYIN, "单", "SHAN"), (PINYIN, "单", "DAN")]
        assert _triples(tokenizer.tokenize("张曾")) == [(PINYIN, "张", "ZHANG"), (PINYIN, "曾", "CENG")]

    def test_override_matches_compatibility_ideograph(self, tokenizer, pinyin_engine):
        """U+F9D1 與 六 標準等價，作為首字同樣採用姓氏讀音"""
        assert _triples(tokenizer.tokenize("\uF9D1")) == [(PINYIN, "\uF9D1", "LU")]
        assert "\uF9D1" not in pinyin_engine.calls

    def test_first_position_means_index_zero(self, tokenizer):
        """前導空白會讓姓氏不在第 0 個位置，因此不套用覆寫"""
        assert _triples(tokenizer.tokenize(" 曾")) == [(PINYIN, "曾", "CENG")]

    def test_override_falls_through_on_miss(self, tokenizer):
        assert _triples(tokenizer.tokenize("李")) == [(PINYIN, "李", "LI")]

    def test_override_can_be_disabled(self, make_tokenizer):
        tokenizer = make_tokenizer(TokenizerConfig(enable_surname_overrides=False))
        assert _triples(tokenizer.tokenize("曾")) == [(PINYIN, "曾", "CENG")]


class TestDegradePaths:
    def test_empty_input(self, tokenizer):
        assert tokenizer.tokenize("") == []

    @pytest.mark.parametrize("text", ["", "abc", "张三", "A b", "单"])
    def test_no_engine_returns_empty(self, text):
        tokenizer = HanziTokenizer(adapter=TransliterationAdapter.from_engines(None, FakeAsciiFold()))
        assert not tokenizer.has_engine()
        assert tokenizer.tokenize(text) == []


class TestProperties:
    SAMPLES = ["张三 Tony", "单田芳", "Ana María", "한국 中", "  ab\u3000cd  ", "a张b三c", "Zoë李"]

    @pytest.mark.parametrize("text", SAMPLES)
    def test_tokens_never_contain_spaces_or_empties(self, tokenizer, text):
        for token in tokenizer.tokenize(text):
            assert token.source and token.target
            assert " " not in token.source and " " not in token.target
            assert "\u3000" not in token.source

    @pytest.mark.parametrize("text", SAMPLES)
    def test_pinyin_sources_are_single_characters(self, tokenizer, text):
        for token in tokenizer.tokenize(text):
            if token.type is PINYIN:
                assert len(token.source) == 1

    @pytest.mark.parametrize("text", ["Ana María", "café au lait", "Straße"])
    def test_retokenizing_latin_targets_is_stable(self, tokenizer, text):
        first = tokenizer.tokenize(text)
        second = tokenizer.tokenize(" ".join(t.target for t in first))
        assert [t.target for t in second] == [t.target for t in first]
        assert all(t.source == t.target for t in second)

    def test_token_is_immutable(self, tokenizer):
        token = tokenizer.tokenize("ab")[0]
        with pytest.raises(AttributeError):
            token.target = "cd"

    def test_token_rejects_empty_fields(self):
        with pytest.raises(ValueError):
            Token(LATIN, "", "")
        assert Token.SEPARATOR == " "
