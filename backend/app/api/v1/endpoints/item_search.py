"""
内容检索API端点
提供按类型、按标签、多条件组合和关键词检索
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.database import get_db
from app.services.capture.search.handler import ItemSearchHandler
from app.schemas.captured_item import ContentType, ItemSearchParams, SemanticSearchParams
from app.schemas.common import StandardResponse

router = APIRouter(tags=["内容检索"])


@router.post(
    "/search",
    response_model=StandardResponse,
    summary="多条件检索",
    description="关键词、内容类型、标签（需全部包含）组合检索，支持分页"
)
async def search_items(
    search_params: ItemSearchParams,
    db: AsyncSession = Depends(get_db)
) -> StandardResponse:
    """多条件检索"""
    handler = ItemSearchHandler(db)
    search_result = await handler.handle_search_items(search_params)

    return StandardResponse(
        status="success",
        message=f"检索到 {search_result['total']} 个内容条目",
        data=search_result
    )


@router.post(
    "/semantic-search",
    response_model=StandardResponse,
    summary="关键词检索",
    description="按空白拆分关键词，全部命中标题、描述或正文之一的条目按时间倒序返回"
)
async def semantic_search(
    search_params: SemanticSearchParams,
    db: AsyncSession = Depends(get_db)
) -> StandardResponse:
    """关键词（语义）检索"""
    handler = ItemSearchHandler(db)
    search_result = await handler.handle_semantic_search(search_params)

    return StandardResponse(
        status="success",
        message=f"检索到 {search_result['total']} 个内容条目",
        data=search_result
    )


@router.get(
    "/by-type/{content_type}",
    response_model=StandardResponse,
    summary="按内容类型获取条目"
)
async def get_items_by_content_type(
    content_type: ContentType,
    db: AsyncSession = Depends(get_db)
) -> StandardResponse:
    """按内容类型获取条目"""
    handler = ItemSearchHandler(db)
    list_result = await handler.handle_get_items_by_content_type(content_type)

    return StandardResponse(
        status="success",
        message=f"成功获取 {list_result['total']} 个内容条目",
        data=list_result
    )


@router.get(
    "/by-tags",
    response_model=StandardResponse,
    summary="按标签获取条目",
    description="返回包含任一指定标签的条目；未指定标签时返回空列表"
)
async def get_items_by_tags(
    tags: Optional[List[str]] = Query(None, description="标签名称，可重复传递"),
    db: AsyncSession = Depends(get_db)
) -> StandardResponse:
    """按标签获取条目（任一命中）"""
    handler = ItemSearchHandler(db)
    list_result = await handler.handle_get_items_by_tags(tags or [])

    return StandardResponse(
        status="success",
        message=f"成功获取 {list_result['total']} 个内容条目",
        data=list_result
    )
