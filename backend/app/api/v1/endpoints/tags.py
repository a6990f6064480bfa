"""
标签API端点
提供标签列表和标签建议
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.database import get_db
from app.services.tag.library.handler import TagLibraryHandler
from app.services.tag.suggestion.handler import TagSuggestionHandler
from app.schemas.tag import TagSuggestionRequest
from app.schemas.common import StandardResponse

router = APIRouter(tags=["标签管理"])


@router.get(
    "",
    response_model=StandardResponse,
    summary="获取标签列表",
    description="获取所有标签，按使用次数降序排列"
)
async def list_tags(db: AsyncSession = Depends(get_db)) -> StandardResponse:
    """获取标签列表"""
    handler = TagLibraryHandler(db)
    tags_result = await handler.handle_list_tags()

    return StandardResponse(
        status="success",
        message=f"成功获取 {tags_result['total']} 个标签",
        data=tags_result
    )


@router.post(
    "/generate",
    response_model=StandardResponse,
    summary="生成标签建议",
    description="基于关键词规则为内容生成最多5个建议标签"
)
async def generate_tags(request: TagSuggestionRequest) -> StandardResponse:
    """
    生成标签建议

    Args:
        request: 内容及其类型、标题、描述

    Returns:
        StandardResponse: 建议的标签
    """
    handler = TagSuggestionHandler()
    suggestion_result = handler.handle_generate_tags(request)

    return StandardResponse(
        status="success",
        message=f"生成 {len(suggestion_result['tags'])} 个建议标签",
        data=suggestion_result
    )
