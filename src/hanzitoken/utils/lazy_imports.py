"""
依賴檢查工具

中文轉拼音依賴 pypinyin，ASCII 折疊依賴 Unidecode。
缺少時 tokenizer 不會失敗，而是進入降級模式；這裡提供明確的檢查入口。
"""

import importlib.util

CHINESE_INSTALL_HINT = (
    "缺少中文拼音依賴。請執行:\n"
    "  pip install pypinyin Unidecode\n"
    "或重新安裝:\n"
    "  pip install hanzitoken"
)

_CHINESE_MODULES = ("pypinyin", "unidecode")


def _missing_modules() -> list:
    return [name for name in _CHINESE_MODULES if importlib.util.find_spec(name) is None]


def is_chinese_available() -> bool:
    return not _missing_modules()


def check_chinese_dependencies() -> None:
    """
    檢查中文依賴是否已安裝

    Raises:
        ImportError: 缺少任何一個依賴時，訊息包含安裝提示
    """
    missing = _missing_modules()
    if missing:
        raise ImportError(f"Missing modules: {', '.join(missing)}\n{CHINESE_INSTALL_HINT}")
