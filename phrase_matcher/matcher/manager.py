from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from threading import RLock
from typing import Dict, Iterable, List, Literal, Optional

from loguru import logger

from phrase_matcher.core.config import settings

from .builder import PhraseMatcherBuilder
from .engine import MatchResult, PhraseMatcher
from .loader import load_phrases


Operation = Literal["ADD", "DELETE"]


@dataclass(frozen=True)
class BatchResult:
    success_count: int
    fail_count: int


class PhraseMatcherManager:
    """
    短语匹配运行时管理器（进程内单例）：
    - 管理短语集合（增删/批量）
    - 短语变更时重建只读匹配器并整体替换引用
    - 对外提供 parse_text 能力

    写操作在锁内串行执行；读操作只取当前匹配器引用，无需加锁。
    """

    def __init__(
        self,
        phrases: Iterable[str] = (),
        case_insensitive: Optional[bool] = None,
    ) -> None:
        if case_insensitive is None:
            case_insensitive = settings.PHRASE_CASE_INSENSITIVE
        self._case_insensitive = case_insensitive
        self._lock = RLock()
        # dict 保留注册顺序
        self._phrases: Dict[str, None] = {}
        for raw in phrases:
            phrase = (raw or "").strip()
            if phrase:
                self._phrases.setdefault(phrase)
        self._matcher = self._build()

    @property
    def case_insensitive(self) -> bool:
        return self._case_insensitive

    def _build(self) -> PhraseMatcher:
        return (
            PhraseMatcherBuilder()
            .ignore_case(self._case_insensitive)
            .add_phrases(self._phrases)
            .build()
        )

    def _rebuild(self) -> None:
        self._matcher = self._build()
        logger.debug("短语匹配器已重建: phrases={}", self._matcher.size())

    def current_matcher(self) -> PhraseMatcher:
        return self._matcher

    def phrase_count(self) -> int:
        return self._matcher.size()

    def list_phrases(self) -> List[str]:
        with self._lock:
            return list(self._phrases)

    def _apply(self, phrase: str, operation: str) -> bool:
        if operation == "ADD":
            if phrase in self._phrases:
                return False
            self._phrases[phrase] = None
            return True
        if operation == "DELETE":
            if phrase not in self._phrases:
                return False
            del self._phrases[phrase]
            return True
        raise ValueError("operation 仅支持 ADD/DELETE")

    def upsert_phrase(self, phrase: str, operation: Operation) -> bool:
        phrase = (phrase or "").strip()
        if not phrase:
            raise ValueError("phrase 不能为空")
        with self._lock:
            changed = self._apply(phrase, operation)
            if changed:
                self._rebuild()
        return changed

    def batch_upsert(self, phrases: List[str], operation: Operation) -> BatchResult:
        """
        批量增删：
        - 非空行计为成功（与幂等语义一致）
        - 空行/全空白行计为失败
        """
        op = (operation or "").strip().upper()
        if op not in {"ADD", "DELETE"}:
            raise ValueError("operation 仅支持 ADD/DELETE")

        success = 0
        fail = 0
        with self._lock:
            changed = False
            for raw in phrases:
                phrase = (raw or "").strip()
                if not phrase:
                    fail += 1
                    continue
                success += 1
                if self._apply(phrase, op):
                    changed = True
            if changed:
                self._rebuild()
        return BatchResult(success_count=success, fail_count=fail)

    def parse_text(self, text: Optional[str]) -> List[MatchResult]:
        return self._matcher.parse_text(text)


@lru_cache(maxsize=1)
def get_phrase_manager() -> PhraseMatcherManager:
    phrases: List[str] = []
    if settings.PHRASE_FILE:
        phrases = load_phrases(settings.PHRASE_FILE)
    manager = PhraseMatcherManager(phrases)
    logger.info(
        "短语匹配管理器初始化完成: phrases={}, case_insensitive={}",
        manager.phrase_count(),
        manager.case_insensitive,
    )
    return manager
