from __future__ import annotations

from typing import Iterable, List, Optional

from loguru import logger

from .engine import PhraseMatcher
from .trie import PhraseTrie


class PhraseMatcherBuilder:
    """
    PhraseMatcher 构建器：先配置大小写与短语，再 build() 得到只读匹配器。

    用法：
        matcher = PhraseMatcher.builder().ignore_case().add_phrase("golden hammer").build()
    """

    def __init__(self) -> None:
        self._case_insensitive = False
        self._phrases: List[Optional[str]] = []

    def ignore_case(self, enabled: bool = True) -> "PhraseMatcherBuilder":
        self._case_insensitive = enabled
        return self

    def add_phrase(self, phrase: Optional[str]) -> "PhraseMatcherBuilder":
        self._phrases.append(phrase)
        return self

    def add_phrases(self, phrases: Optional[Iterable[Optional[str]]]) -> "PhraseMatcherBuilder":
        self._phrases.extend(phrases or ())
        return self

    def build(self) -> PhraseMatcher:
        trie = PhraseTrie(case_insensitive=self._case_insensitive)
        trie.insert_all(self._phrases)
        logger.debug(
            "短语树构建完成: phrases={}, nodes={}, case_insensitive={}",
            trie.size(),
            trie.node_count(),
            self._case_insensitive,
        )
        return PhraseMatcher(trie)
