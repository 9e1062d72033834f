from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import TYPE_CHECKING, Deque, Iterator, List, Optional

from .tokenizer import MarkupTokenizer, Token
from .trie import ROOT, PhraseNode, PhraseTrie

if TYPE_CHECKING:
    from .builder import PhraseMatcherBuilder


@dataclass(frozen=True)
class MatchResult:
    start: int
    end: int
    phrase: str

    def matched_text(self, text: str) -> str:
        """原文中被命中的片段（包含中间跳过的标记与空白）。"""
        return text[self.start : self.end]


class PhraseMatcher:
    """
    短语匹配器：逐词扫描文本，在短语树上做贪心最长匹配。

    - 单次从左到右扫描，不回溯，结果互不重叠
    - 起点处未命中任何完整短语时，只前进一个词
    - 构造时冻结短语树，之后只读，可在多线程间共享
    """

    def __init__(self, trie: PhraseTrie, tokenizer: Optional[MarkupTokenizer] = None) -> None:
        self._trie = trie.freeze()
        self._tokenizer = tokenizer or MarkupTokenizer()

    @staticmethod
    def builder() -> "PhraseMatcherBuilder":
        from .builder import PhraseMatcherBuilder

        return PhraseMatcherBuilder()

    @property
    def case_insensitive(self) -> bool:
        return self._trie.case_insensitive

    @property
    def trie(self) -> PhraseTrie:
        return self._trie

    def size(self) -> int:
        return self._trie.size()

    def get_node(self, word: str) -> Optional[PhraseNode]:
        return self._trie.lookup_root(word)

    def parse_text(self, raw_text: Optional[str]) -> List[MatchResult]:
        return list(self.iter_matches(raw_text))

    def iter_matches(self, raw_text: Optional[str]) -> Iterator[MatchResult]:
        tokens = self._tokenizer.tokenize(raw_text)
        # 前瞻窗口：window[0] 为当前起点词
        window: Deque[Token] = deque()
        while True:
            if not window:
                token = next(tokens, None)
                if token is None:
                    return
                window.append(token)

            matched = self._longest_match(window, tokens)
            if matched is None:
                window.popleft()
                continue

            last, phrase = matched
            yield MatchResult(window[0].start, window[last].end, phrase)
            for _ in range(last + 1):
                window.popleft()

    def _longest_match(
        self, window: Deque[Token], tokens: Iterator[Token]
    ) -> Optional[tuple[int, str]]:
        """
        从 window[0] 开始沿短语树下行，返回 (最后命中词在窗口中的下标, 短语)；
        未到达任何终止节点返回 None。
        """
        trie = self._trie
        handle = trie.descend(ROOT, window[0].word)
        if handle is None:
            return None

        longest: Optional[tuple[int, str]] = None
        pos = 0
        while True:
            phrase = trie.terminal(handle)
            if phrase is not None:
                longest = (pos, phrase)
            pos += 1
            if pos == len(window):
                token = next(tokens, None)
                if token is None:
                    break
                window.append(token)
            child = trie.descend(handle, window[pos].word)
            if child is None:
                break
            handle = child
        return longest
