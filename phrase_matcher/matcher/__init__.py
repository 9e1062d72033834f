"""
多词短语匹配模块：
- 以词为边的短语树（构建后冻结、只读共享）
- 跳过 HTML 标签/注释的分词器，保留原文偏移
- 贪心最长匹配、互不重叠的扫描器
"""

from .builder import PhraseMatcherBuilder
from .engine import MatchResult, PhraseMatcher
from .manager import BatchResult, PhraseMatcherManager, get_phrase_manager
from .tokenizer import MarkupTokenizer, Token
from .trie import PhraseNode, PhraseTrie, PhraseTrieFrozenError

__all__ = [
    "BatchResult",
    "MarkupTokenizer",
    "MatchResult",
    "PhraseMatcher",
    "PhraseMatcherBuilder",
    "PhraseMatcherManager",
    "PhraseNode",
    "PhraseTrie",
    "PhraseTrieFrozenError",
    "Token",
    "get_phrase_manager",
]
