# 路由汇总
from fastapi import APIRouter
from phrase_matcher.api.v1.endpoints import phrases

api_router = APIRouter()

# 挂载短语匹配模块 (访问地址: /api/v1/phrases/...)
api_router.include_router(phrases.router, prefix="/phrases", tags=["短语匹配模块"])
