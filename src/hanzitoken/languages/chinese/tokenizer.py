"""
中文姓名斷詞器 (HanziTokenizer)

把一個字串 (通常是聯絡人顯示名稱) 切成 LATIN / PINYIN / UNKNOWN 三類 token，
供排序鍵與姓名索引使用。

規則:
- 空白字元只當分隔符，不會出現在任何 token 中
- 連續的拉丁字母合併成一個 token
- 每個漢字各自成為一個 PINYIN token；轉不出拼音時降為 UNKNOWN
- 首字若在多音字姓氏表中，採用表中的讀音

使用方式:
    from hanzitoken import get_tokenizer

    tokens = get_tokenizer().tokenize("单田芳 Tony")
    # [Token(PINYIN, '单', 'SHAN'), Token(PINYIN, '田', 'TIAN'),
    #  Token(PINYIN, '芳', 'FANG'), Token(LATIN, 'Tony', 'Tony')]
"""

import logging
import threading
from typing import Any, Dict, List, Optional

from hanzitoken.config import DEFAULT_CONFIG, TokenizerConfig
from hanzitoken.core.events import TokenizerEvent
from hanzitoken.core.token import Token, TokenType
from hanzitoken.utils.logger import TimingContext, get_logger

from .classifier import CharClass, classify
from .surnames import SurnameOverrideTable
from .transliterator import Degraded, TransliterationAdapter
from .utils import is_space_char


class _RunBuffer:
    """累積同類別的連續字元，類別改變或遇到分隔符時輸出成一個 token"""

    def __init__(self):
        self.token_type: Optional[TokenType] = None
        self._sources: List[str] = []
        self._targets: List[str] = []

    def __bool__(self) -> bool:
        return bool(self._sources)

    def append(self, token_type: TokenType, source: str, target: str, tokens: List[Token]) -> None:
        if self and token_type != self.token_type:
            self.flush_into(tokens)
        self._sources.append(source)
        self._targets.append(target)
        self.token_type = token_type

    def flush_into(self, tokens: List[Token]) -> None:
        if not self:
            return
        tokens.append(Token(self.token_type, "".join(self._sources), "".join(self._targets)))
        self._sources.clear()
        self._targets.clear()


class HanziTokenizer:
    _engine_name = "chinese"

    def __init__(
        self,
        adapter: Optional[TransliterationAdapter] = None,
        overrides: Optional[SurnameOverrideTable] = None,
        config: Optional[TokenizerConfig] = None,
    ):
        self._config = config or DEFAULT_CONFIG
        self._logger = get_logger(f"tokenizer.{self._engine_name}")

        with self._log_timing("HanziTokenizer.__init__"):
            self._adapter = adapter if adapter is not None else TransliterationAdapter()
            self._overrides = overrides if overrides is not None else SurnameOverrideTable()

        self._report_degraded()
        self._logger.info(f"HanziTokenizer initialized (has_engine={self.has_engine()})")

    @property
    def adapter(self) -> TransliterationAdapter:
        return self._adapter

    @property
    def overrides(self) -> SurnameOverrideTable:
        return self._overrides

    @property
    def config(self) -> TokenizerConfig:
        return self._config

    def has_engine(self) -> bool:
        return self._adapter.has_engine

    def get_backend_stats(self) -> Dict[str, Any]:
        return self._adapter.get_cache_stats()

    def tokenize(self, text: str) -> List[Token]:
        """
        將輸入字串切成 token 序列

        引擎不可用或輸入為空時回傳空列表；此方法不會拋出例外。

        Args:
            text: 輸入字串

        Returns:
            List[Token]: 依原文順序排列的 token
        """
        tokens: List[Token] = []
        if not self.has_engine() or not text:
            return tokens

        run = _RunBuffer()
        for index, char in enumerate(text):
            if is_space_char(char):
                run.flush_into(tokens)
                continue

            char_class = classify(char)
            if char_class is CharClass.LATIN_PASSTHROUGH:
                run.append(TokenType.LATIN, char, char, tokens)
            elif char_class is CharClass.LATIN_FOLD:
                run.append(TokenType.LATIN, char, self._adapter.transliterate_ascii_fold(char), tokens)
            else:
                token = self._resolve_ideograph(char, surname_position=index == 0)
                if token.type is TokenType.UNKNOWN and self._config.merge_unclassified_runs:
                    run.append(TokenType.UNKNOWN, char, char, tokens)
                    continue
                run.flush_into(tokens)
                tokens.append(token)

        run.flush_into(tokens)
        return tokens

    def _resolve_ideograph(self, char: str, surname_position: bool) -> Token:
        if surname_position and self._config.enable_surname_overrides:
            rendering = self._overrides.lookup(char)
            if rendering:
                return Token(TokenType.PINYIN, char, rendering)

        target = self._adapter.transliterate_phonetic(char)
        if not target or target == char:
            return Token(TokenType.UNKNOWN, char, char)
        return Token(TokenType.PINYIN, char, target.upper())

    def _log_timing(self, operation: str) -> TimingContext:
        return TimingContext(
            operation=operation,
            logger=self._logger,
            level=logging.DEBUG,
            callback=self._config.on_timing,
        )

    def _report_degraded(self) -> None:
        state = self._adapter.state
        if isinstance(state, Degraded):
            event: TokenizerEvent = {
                "type": "degraded",
                "engine": self._engine_name,
                "degrade_reason": "engine_missing",
                "fallback": "empty_output",
            }
            if state.error is not None:
                event["exception_type"] = type(state.error).__name__
                event["exception_message"] = str(state.error)
            self._logger.warning("Han-Latin transliterator is unavailable, HanziTokenizer is disabled")
            self._emit_event(event)

        if not self._adapter.has_ascii_fold:
            self._emit_event(
                {
                    "type": "degraded",
                    "engine": self._engine_name,
                    "degrade_reason": "ascii_fold_missing",
                    "fallback": "passthrough",
                }
            )

    def _emit_event(self, event: TokenizerEvent) -> None:
        try:
            if self._config.on_event is not None:
                self._config.on_event(event)
        except Exception:
            self._logger.exception("on_event 回呼執行失敗")


# =============================================================================
# 共享實例
# =============================================================================

_shared_lock = threading.Lock()
_shared_tokenizer: Optional[HanziTokenizer] = None


def create_tokenizer(config: Optional[TokenizerConfig] = None) -> HanziTokenizer:
    """建立獨立的 tokenizer；需要自訂配置或明確傳遞實例時使用"""
    return HanziTokenizer(config=config)


def get_tokenizer() -> HanziTokenizer:
    """
    取得全程序共享的 tokenizer

    第一次呼叫時在鎖內建立 (引擎初始化可能失敗而降級)，之後直接回傳同一實例。
    """
    global _shared_tokenizer
    if _shared_tokenizer is None:
        with _shared_lock:
            if _shared_tokenizer is None:
                _shared_tokenizer = HanziTokenizer()
    return _shared_tokenizer


def has_engine() -> bool:
    return get_tokenizer().has_engine()


def tokenize(text: str) -> List[Token]:
    return get_tokenizer().tokenize(text)
