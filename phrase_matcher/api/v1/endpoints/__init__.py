"""
API 端点模块

包含所有 v1 版本的 API 端点定义
"""

from phrase_matcher.api.v1.endpoints import phrases

__all__ = ["phrases"]
