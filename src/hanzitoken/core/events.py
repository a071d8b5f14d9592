"""
事件模型（Event Model）

tokenizer 不會對呼叫端拋出錯誤；所有降級都以事件回呼 (event handler) 告知，
讓上層可以察覺「目前拼音功能不可用」而不是默默得到空結果。
"""

from __future__ import annotations

from typing import Callable, Literal, TypedDict


class TokenizerEvent(TypedDict, total=False):
    type: Literal["degraded"]
    engine: str

    # degraded
    degrade_reason: Literal["engine_missing", "ascii_fold_missing"]
    fallback: Literal["empty_output", "passthrough"]
    exception_type: str
    exception_message: str


TokenizerEventHandler = Callable[[TokenizerEvent], None]
