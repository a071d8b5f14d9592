"""
斷詞範例

展示 tokenize、姓名索引鍵，以及 verbose / on_timing / on_event 的用法。
"""

import hanzitoken
from hanzitoken import TokenizerConfig, create_tokenizer


def demo_tokenize():
    print("=" * 60)
    print("範例 1: 基本斷詞")
    print("=" * 60)

    for name in ["张三", "单田芳", "Tony 李", "Zoë Chen", "曾国藩"]:
        tokens = hanzitoken.tokenize(name)
        print(f"{name!r}:")
        for token in tokens:
            print(f"  {token.type.name:<8} {token.source!r} -> {token.target!r}")
    print()


def demo_name_keys():
    print("=" * 60)
    print("範例 2: 排序鍵與查詢鍵")
    print("=" * 60)

    tokens = hanzitoken.tokenize("张三")
    print(f"sort key:    {hanzitoken.build_sort_key(tokens)!r}")
    print(f"lookup keys: {sorted(hanzitoken.build_name_lookup_keys(tokens))}")
    print()


def demo_config():
    print("=" * 60)
    print("範例 3: 計時與事件回呼")
    print("=" * 60)

    def on_timing(operation: str, elapsed: float):
        print(f"  [timing] {operation}: {elapsed * 1000:.2f}ms")

    def on_event(event):
        print(f"  [event] {event}")

    tokenizer = create_tokenizer(TokenizerConfig(verbose=True, on_timing=on_timing, on_event=on_event))
    print(f"has_engine: {tokenizer.has_engine()}")
    print(f"stats: {tokenizer.get_backend_stats()}")
    print()


if __name__ == "__main__":
    demo_tokenize()
    demo_name_keys()
    demo_config()
