"""
核心抽象層

定義語言無關的資料型別、事件與協定。
"""

from .events import TokenizerEvent, TokenizerEventHandler
from .protocols import TransliteratorProtocol
from .token import Token, TokenType

__all__ = [
    "Token",
    "TokenType",
    "TokenizerEvent",
    "TokenizerEventHandler",
    "TransliteratorProtocol",
]
