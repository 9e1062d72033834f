from __future__ import annotations

from typing import cast

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from loguru import logger

from phrase_matcher.api import deps
from phrase_matcher.matcher.manager import Operation, PhraseMatcherManager
from phrase_matcher.schemas.common_schema import ApiResponse, SuccessResponse
from phrase_matcher.schemas.phrase_schema import (
    BatchResultResponse,
    ParseRequest,
    ParseResponse,
    PhraseListResponse,
    PhraseNodeResponse,
    PhraseUpsertRequest,
)
from phrase_matcher.services.phrase_admin_service import PhraseAdminService

router = APIRouter()


@router.post("/parse", response_model=ApiResponse[ParseResponse])
def parse_text(
    payload: ParseRequest,
    manager: PhraseMatcherManager = Depends(deps.get_manager),
) -> ApiResponse[ParseResponse]:
    """
    文本扫描：返回已注册短语在原文中的命中位置（跳过 HTML 标记）。
    """
    service = PhraseAdminService(manager)
    matches = service.parse(payload.text or "")
    logger.debug(f"扫描文本完成: length={len(payload.text or '')}, matches={len(matches)}")
    return ApiResponse(
        data=ParseResponse(caseInsensitive=manager.case_insensitive, matches=matches)
    )


@router.post("/phrase", response_model=ApiResponse[SuccessResponse])
def upsert_phrase(
    payload: PhraseUpsertRequest,
    manager: PhraseMatcherManager = Depends(deps.get_manager),
) -> ApiResponse[SuccessResponse]:
    """
    短语增删：对单个短语执行 ADD/DELETE。
    """
    service = PhraseAdminService(manager)
    try:
        service.upsert_phrase(payload.phrase, payload.operation)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return ApiResponse(data=SuccessResponse(success=True))


@router.post("/batch", response_model=ApiResponse[BatchResultResponse])
async def batch_upsert_phrases(
    file: UploadFile = File(..., description="包含短语列表的文本文件（UTF-8，每行一个）"),
    operation: str = Form(..., description="批量操作类型：ADD(新增), DELETE(删除)"),
    manager: PhraseMatcherManager = Depends(deps.get_manager),
) -> ApiResponse[BatchResultResponse]:
    """
    短语批量增删：上传文件批量处理短语。
    """
    service = PhraseAdminService(manager)
    op = operation.strip().upper()
    if op not in {"ADD", "DELETE"}:
        raise HTTPException(status_code=400, detail="operation 仅支持 ADD/DELETE")
    try:
        success_count, fail_count = await service.batch_upsert_phrases(
            upload_file=file,
            operation=cast(Operation, op),
        )
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return ApiResponse(
        data=BatchResultResponse(successCount=success_count, failCount=fail_count)
    )


@router.get("/list", response_model=ApiResponse[PhraseListResponse])
def list_phrases(
    manager: PhraseMatcherManager = Depends(deps.get_manager),
) -> ApiResponse[PhraseListResponse]:
    phrases = manager.list_phrases()
    return ApiResponse(
        data=PhraseListResponse(
            count=len(phrases),
            registeredCount=manager.phrase_count(),
            phrases=phrases,
        )
    )


@router.get("/node/{word}", response_model=ApiResponse[PhraseNodeResponse])
def get_root_node(
    word: str,
    manager: PhraseMatcherManager = Depends(deps.get_manager),
) -> ApiResponse[PhraseNodeResponse]:
    """
    节点查看（调试接口）：返回以 word 为首词的短语树节点。
    """
    node = PhraseAdminService(manager).describe_root(word)
    if node is None:
        raise HTTPException(status_code=404, detail=f"不存在以 {word} 开头的短语")
    return ApiResponse(data=node)
