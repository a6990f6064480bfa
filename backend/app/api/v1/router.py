"""
API路由聚合模块
将所有v1版本的路由统一注册

路由管理规范：
1. 所有路由文件内部使用相对路径（不以/开头）
2. 所有前缀统一在router.py中管理
3. 固定路径的检索路由先于 /items/{item_id} 注册
"""

from fastapi import APIRouter

from app.api.v1.endpoints import (
    captured_items,
    item_search,
    tags,
)

api_router = APIRouter()

# ==================== 内容条目相关路由 ====================
api_router.include_router(item_search.router, prefix="/items", tags=["内容检索"])
api_router.include_router(captured_items.router, prefix="/items", tags=["内容条目"])

# ==================== 标签管理路由 ====================
api_router.include_router(tags.router, prefix="/tags", tags=["标签管理"])
