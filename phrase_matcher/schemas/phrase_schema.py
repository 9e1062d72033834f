from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from phrase_matcher.core.config import settings


Operation = Literal["ADD", "DELETE"]


class PhraseUpsertRequest(BaseModel):
    phrase: str = Field(..., description="目标短语（空白分隔的一个或多个词）")
    operation: Operation = Field(..., description="操作类型：ADD(新增), DELETE(删除)")

    model_config = ConfigDict(populate_by_name=True)


class BatchResultResponse(BaseModel):
    success_count: int = Field(..., alias="successCount", description="成功处理条数")
    fail_count: int = Field(..., alias="failCount", description="失败条数")

    model_config = ConfigDict(populate_by_name=True)


class ParseRequest(BaseModel):
    text: str = Field(..., max_length=settings.MAX_TEXT_LENGTH, description="待扫描文本（可含 HTML 标记）")


class MatchItem(BaseModel):
    start: int = Field(..., description="起始偏移（含）")
    end: int = Field(..., description="结束偏移（不含）")
    phrase: str = Field(..., description="注册时的短语原文")
    matched_text: str = Field(..., alias="matchedText", description="原文中被命中的片段")

    model_config = ConfigDict(populate_by_name=True)


class ParseResponse(BaseModel):
    case_insensitive: bool = Field(..., alias="caseInsensitive", description="是否忽略大小写")
    matches: list[MatchItem] = Field(default_factory=list, description="命中结果（按出现顺序）")

    model_config = ConfigDict(populate_by_name=True)


class PhraseListResponse(BaseModel):
    count: int = Field(..., description="短语条数（即 phrases 长度）")
    registered_count: int = Field(
        ...,
        alias="registeredCount",
        description="短语树中的短语数；忽略大小写时仅大小写不同的短语合并计数",
    )
    phrases: list[str] = Field(default_factory=list, description="已注册短语（按注册顺序）")

    model_config = ConfigDict(populate_by_name=True)


class PhraseNodeResponse(BaseModel):
    key: str
    terminal_phrase: Optional[str] = Field(default=None, alias="terminalPhrase")
    children: list[str] = Field(default_factory=list, description="子节点词（按插入顺序）")

    model_config = ConfigDict(populate_by_name=True)
