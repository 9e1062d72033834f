from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, Optional


_WORD_RE = re.compile(r"[^\s<>]+")
_COMMENT_OPEN = "<!--"
_COMMENT_CLOSE = "-->"


@dataclass(frozen=True)
class Token:
    word: str
    start: int
    end: int


class MarkupTokenizer:
    """
    带标记感知的分词器：按空白与 < > 切词，跳过标签、属性与注释。

    规则：
    - 标记区间从 `<` 开始，到其后第一个 `>` 结束；`<!--` 开头的注释到 `-->` 结束
      （找不到 `-->` 时退化为第一个 `>`）
    - 未闭合的 `<` 吞掉剩余全部文本，不报错
    - 词的 start/end 是原始文本中的位置（左闭右开）

    扫描代价与文本长度成线性关系。
    """

    def tokenize(self, text: Optional[str]) -> Iterator[Token]:
        if not text:
            return
        length = len(text)
        # 此位置及之后不存在 `-->`
        no_close_from = length + 1
        pos = 0
        while pos < length:
            lt = text.find("<", pos)
            segment_end = length if lt == -1 else lt
            for m in _WORD_RE.finditer(text, pos, segment_end):
                yield Token(m.group(), m.start(), m.end())
            if lt == -1:
                return

            end = -1
            if text.startswith(_COMMENT_OPEN, lt):
                body = lt + len(_COMMENT_OPEN)
                if body < no_close_from:
                    close = text.find(_COMMENT_CLOSE, body)
                    if close == -1:
                        no_close_from = body
                    else:
                        end = close + len(_COMMENT_CLOSE)
            if end == -1:
                gt = text.find(">", lt + 1)
                end = length if gt == -1 else gt + 1
            pos = end

    def words(self, text: Optional[str]) -> list[str]:
        return [token.word for token in self.tokenize(text)]
