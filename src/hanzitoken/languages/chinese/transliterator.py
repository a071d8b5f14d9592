"""
轉寫引擎轉接層 (Transliteration Adapter)

包裝兩個外部引擎：
- 漢字 -> 拼音 -> ASCII -> 大寫 (pypinyin + Unidecode)
- 拉丁字母 -> ASCII 折疊 (Unidecode)

引擎建立失敗 (缺少套件或拼音資料) 不會向外拋出，而是以 Degraded 狀態表示，
tokenizer 依此決定是否進入降級路徑。
"""

import unicodedata
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Dict, Optional, Union

from hanzitoken.core.protocols import TransliteratorProtocol
from hanzitoken.utils.logger import get_logger

from .utils import _get_pypinyin, _get_unidecode

logger = get_logger(__name__)

# 建立引擎時用來確認拼音資料可用的探測字
_PROBE_CHAR = "中"


class TransliteratorUnavailableError(RuntimeError):
    """轉寫引擎無法建立 (缺少套件或語言資料)"""


# =============================================================================
# 拼音快取 (Performance Critical)
# =============================================================================

@lru_cache(maxsize=50000)
def cached_han_to_latin(text: str, v_to_u: bool = True) -> str:
    """快取版漢字轉拼音 (無聲調，保留原大小寫)"""
    pypinyin = _get_pypinyin()
    return "".join(pypinyin.lazy_pinyin(text, style=pypinyin.Style.NORMAL, v_to_u=v_to_u))


class AsciiFoldTransliterator:
    """拉丁字母 -> ASCII 折疊 (例如 é -> e、ß -> ss)"""

    def __init__(self):
        try:
            self._unidecode = _get_unidecode()
        except ImportError as e:
            raise TransliteratorUnavailableError(str(e)) from e

    def transliterate(self, text: str) -> str:
        return self._unidecode.unidecode(text)


class PinyinTransliterator:
    """
    漢字 -> 拼音 (人名用) -> ASCII -> 大寫

    沒有 ASCII 折疊引擎時改用 pypinyin 的 v 拼寫 (lü -> lv)，輸出仍為純 ASCII。
    無法轉寫的字元會原樣回傳，由呼叫端判斷。
    """

    def __init__(self, ascii_fold: Optional[TransliteratorProtocol] = None):
        try:
            _get_pypinyin()
        except ImportError as e:
            raise TransliteratorUnavailableError(str(e)) from e

        self._ascii_fold = ascii_fold

        if self.transliterate(_PROBE_CHAR) == _PROBE_CHAR:
            raise TransliteratorUnavailableError("Han-Latin dictionary data is missing")

    def transliterate(self, text: str) -> str:
        latin = cached_han_to_latin(text, v_to_u=self._ascii_fold is not None)
        # pypinyin 不認得的字原樣返回：全形英數 (Ｔ、１) 相容分解後是 ASCII，照常折疊；
        # 韓文、假名、符號則不能交給 Unidecode 羅馬化
        if latin == text:
            latin = unicodedata.normalize("NFKC", text)
            if not latin.isascii():
                return text
        if self._ascii_fold is not None:
            latin = self._ascii_fold.transliterate(latin)
        return latin.upper()


# =============================================================================
# 引擎狀態 (tagged result)
# =============================================================================

@dataclass(frozen=True)
class Ready:
    phonetic: TransliteratorProtocol
    ascii_fold: Optional[TransliteratorProtocol] = None


@dataclass(frozen=True)
class Degraded:
    reason: str
    ascii_fold: Optional[TransliteratorProtocol] = None
    error: Optional[BaseException] = None


EngineState = Union[Ready, Degraded]


def open_engines() -> EngineState:
    """
    建立兩個轉寫引擎

    Returns:
        EngineState: 拼音引擎可用時為 Ready，否則為 Degraded
    """
    ascii_fold: Optional[TransliteratorProtocol]
    try:
        ascii_fold = AsciiFoldTransliterator()
    except TransliteratorUnavailableError as exc:
        logger.warning(f"Latin-ASCII transliterator is missing, extended Latin is kept as-is: {exc}")
        ascii_fold = None

    try:
        phonetic = PinyinTransliterator(ascii_fold=ascii_fold)
    except TransliteratorUnavailableError as exc:
        logger.warning(f"Han-Latin transliterator data is missing, phonetic tokenization is disabled: {exc}")
        return Degraded(reason="engine_missing", ascii_fold=ascii_fold, error=exc)

    return Ready(phonetic=phonetic, ascii_fold=ascii_fold)


class TransliterationAdapter:
    """
    轉寫引擎轉接器

    建立後狀態不再改變；轉寫呼叫無共享可變狀態，可在多執行緒下同時使用。
    """

    def __init__(self, state: Optional[EngineState] = None):
        self._state: EngineState = state if state is not None else open_engines()

    @classmethod
    def from_engines(
        cls,
        phonetic: Optional[TransliteratorProtocol],
        ascii_fold: Optional[TransliteratorProtocol] = None,
    ) -> "TransliterationAdapter":
        """以現成的引擎 (或測試替身) 建立轉接器；phonetic 為 None 表示降級"""
        if phonetic is None:
            return cls(Degraded(reason="engine_missing", ascii_fold=ascii_fold))
        return cls(Ready(phonetic=phonetic, ascii_fold=ascii_fold))

    @property
    def state(self) -> EngineState:
        return self._state

    @property
    def has_engine(self) -> bool:
        return isinstance(self._state, Ready)

    @property
    def has_ascii_fold(self) -> bool:
        return self._state.ascii_fold is not None

    def transliterate_phonetic(self, text: str) -> str:
        """漢字轉大寫 ASCII 拼音；引擎不可用時回傳空字串"""
        if not isinstance(self._state, Ready):
            return ""
        return self._state.phonetic.transliterate(text)

    def transliterate_ascii_fold(self, text: str) -> str:
        """
        拉丁字母折疊成 ASCII

        引擎不可用、或折疊結果為空字串 (例如軟連字號) 時回傳原文。
        """
        ascii_fold = self._state.ascii_fold
        if ascii_fold is None:
            return text
        return ascii_fold.transliterate(text) or text

    def get_cache_stats(self) -> Dict[str, Any]:
        info = cached_han_to_latin.cache_info()
        return {
            "pinyin": {
                "hits": info.hits,
                "misses": info.misses,
                "currsize": info.currsize,
                "maxsize": info.maxsize,
            }
        }
