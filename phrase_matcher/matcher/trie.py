from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional


ROOT = 0


class PhraseTrieFrozenError(RuntimeError):
    """短语树冻结后仍尝试写入。"""


def split_words(phrase: Optional[str]) -> List[str]:
    """按空白切分短语；None/空串/全空白返回空列表。"""
    if not phrase:
        return []
    return phrase.split()


@dataclass(frozen=True)
class PhraseNode:
    """
    短语树节点（只读视图）。

    节点数据存放在 PhraseTrie 的数组里，这里只持有整数句柄。
    """

    trie: "PhraseTrie" = field(repr=False, compare=False)
    handle: int

    @property
    def key(self) -> str:
        return self.trie.key(self.handle)

    @property
    def terminal_phrase(self) -> Optional[str]:
        return self.trie.terminal(self.handle)

    @property
    def children(self) -> Dict[str, "PhraseNode"]:
        return {
            word: PhraseNode(self.trie, child)
            for word, child in self.trie.child_handles(self.handle).items()
        }

    def child(self, word: str) -> Optional["PhraseNode"]:
        handle = self.trie.descend(self.handle, word)
        if handle is None:
            return None
        return PhraseNode(self.trie, handle)

    def size(self) -> int:
        return len(self.trie.child_handles(self.handle))


class PhraseTrie:
    """
    以“词”为边的前缀树，用于多词短语匹配。

    设计目标：
    - 节点按句柄存放在连续数组中（keys / children / terminals 三列并行）
    - 构建完成后 freeze()，之后只读，可被多个扫描并发共享
    - 查找统一返回 Optional，未命中即 None
    """

    def __init__(self, case_insensitive: bool = False) -> None:
        self._case_insensitive = case_insensitive
        self._keys: List[str] = [""]
        self._children: List[Mapping[str, int]] = [{}]
        self._terminals: List[Optional[str]] = [None]
        self._phrase_count = 0
        self._frozen = False

    @property
    def case_insensitive(self) -> bool:
        return self._case_insensitive

    @property
    def frozen(self) -> bool:
        return self._frozen

    def normalize(self, word: str) -> str:
        return word.casefold() if self._case_insensitive else word

    def insert(self, phrase: Optional[str]) -> None:
        if self._frozen:
            raise PhraseTrieFrozenError("短语树已冻结，不能再插入短语")
        words = split_words(phrase)
        if not words:
            return
        handle = ROOT
        for word in words:
            key = self.normalize(word)
            children = self._children[handle]
            child = children.get(key)
            if child is None:
                child = self._new_node(key)
                children[key] = child  # type: ignore[index]
            handle = child
        # 同一路径只记第一次注册的原文
        if self._terminals[handle] is None:
            self._terminals[handle] = phrase
            self._phrase_count += 1

    def insert_all(self, phrases: Optional[Iterable[Optional[str]]]) -> None:
        for phrase in phrases or ():
            self.insert(phrase)

    def freeze(self) -> "PhraseTrie":
        if not self._frozen:
            self._children = [MappingProxyType(dict(c)) for c in self._children]
            self._frozen = True
        return self

    def descend(self, handle: int, word: str) -> Optional[int]:
        return self._children[handle].get(self.normalize(word))

    def lookup_root(self, word: str) -> Optional[PhraseNode]:
        handle = self.descend(ROOT, word)
        if handle is None:
            return None
        return PhraseNode(self, handle)

    def key(self, handle: int) -> str:
        return self._keys[handle]

    def terminal(self, handle: int) -> Optional[str]:
        return self._terminals[handle]

    def child_handles(self, handle: int) -> Mapping[str, int]:
        return self._children[handle]

    def size(self) -> int:
        return self._phrase_count

    def node_count(self) -> int:
        """不含根节点的节点总数。"""
        return len(self._keys) - 1

    def _new_node(self, key: str) -> int:
        self._keys.append(key)
        self._children.append({})
        self._terminals.append(None)
        return len(self._keys) - 1
