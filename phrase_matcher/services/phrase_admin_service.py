from __future__ import annotations

from fastapi import UploadFile

from phrase_matcher.matcher.manager import Operation, PhraseMatcherManager
from phrase_matcher.schemas.phrase_schema import MatchItem, PhraseNodeResponse


class PhraseAdminService:
    """
    短语“管理端”服务：
    - 管理注册短语（单条/批量）
    - 扫描文本并组装接口返回结构
    """

    def __init__(self, manager: PhraseMatcherManager) -> None:
        self._manager = manager

    def upsert_phrase(self, phrase: str, operation: Operation) -> bool:
        return self._manager.upsert_phrase(phrase, operation)

    async def batch_upsert_phrases(
        self,
        upload_file: UploadFile,
        operation: Operation,
    ) -> tuple[int, int]:
        content = await upload_file.read()
        try:
            text = content.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ValueError("文件编码必须为 UTF-8") from exc

        # 保留空行，计入失败条数
        lines = text.splitlines()
        result = self._manager.batch_upsert(lines, operation)
        return result.success_count, result.fail_count

    def parse(self, text: str) -> list[MatchItem]:
        return [
            MatchItem(
                start=match.start,
                end=match.end,
                phrase=match.phrase,
                matchedText=match.matched_text(text),
            )
            for match in self._manager.parse_text(text)
        ]

    def describe_root(self, word: str) -> PhraseNodeResponse | None:
        node = self._manager.current_matcher().get_node(word)
        if node is None:
            return None
        return PhraseNodeResponse(
            key=node.key,
            terminalPhrase=node.terminal_phrase,
            children=list(node.children),
        )

