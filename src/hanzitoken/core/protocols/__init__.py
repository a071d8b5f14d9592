from .transliterator import TransliteratorProtocol

__all__ = ["TransliteratorProtocol"]
