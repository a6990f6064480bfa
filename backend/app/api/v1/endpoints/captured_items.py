"""
内容条目API端点
处理内容条目的创建、查询、更新和删除
采用薄路由、重服务的架构设计
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.database import get_db
from app.services.capture.items.handler import CapturedItemHandler
from app.schemas.captured_item import CapturedItemCreate, CapturedItemUpdate
from app.schemas.common import StandardResponse

router = APIRouter(tags=["内容条目"])


@router.post(
    "",
    response_model=StandardResponse,
    summary="创建内容条目",
    description="创建新的内容条目，新条目不带标签，标签需通过更新接口设置"
)
async def create_item(
    create_data: CapturedItemCreate,
    db: AsyncSession = Depends(get_db)
) -> StandardResponse:
    """
    创建内容条目

    Args:
        create_data: 条目数据
        db: 数据库会话

    Returns:
        StandardResponse: 创建的条目
    """
    handler = CapturedItemHandler(db)
    item = await handler.handle_create_item(create_data)

    return StandardResponse(
        status="success",
        message="内容条目创建成功",
        data=item
    )


@router.get(
    "",
    response_model=StandardResponse,
    summary="获取内容条目列表",
    description="获取全部内容条目"
)
async def list_items(db: AsyncSession = Depends(get_db)) -> StandardResponse:
    """获取全部内容条目"""
    handler = CapturedItemHandler(db)
    list_result = await handler.handle_list_items()

    return StandardResponse(
        status="success",
        message=f"成功获取 {list_result['total']} 个内容条目",
        data=list_result
    )


@router.get(
    "/{item_id}",
    response_model=StandardResponse,
    summary="获取内容条目详情",
    description="根据ID获取内容条目，不存在时返回404"
)
async def get_item(
    item_id: str,
    db: AsyncSession = Depends(get_db)
) -> StandardResponse:
    """获取内容条目详情"""
    handler = CapturedItemHandler(db)
    item = await handler.handle_get_item(item_id)

    return StandardResponse(
        status="success",
        message="成功获取内容条目详情",
        data=item
    )


@router.patch(
    "/{item_id}",
    response_model=StandardResponse,
    summary="更新内容条目",
    description="只更新请求体中出现的字段；提供tags时会同步调整标签使用计数"
)
async def update_item(
    item_id: str,
    update_data: CapturedItemUpdate,
    db: AsyncSession = Depends(get_db)
) -> StandardResponse:
    """
    更新内容条目

    Args:
        item_id: 条目ID
        update_data: 更新数据
        db: 数据库会话

    Returns:
        StandardResponse: 更新后的条目
    """
    handler = CapturedItemHandler(db)
    item = await handler.handle_update_item(item_id, update_data)

    return StandardResponse(
        status="success",
        message="内容条目更新成功",
        data=item
    )


@router.delete(
    "/{item_id}",
    response_model=StandardResponse,
    summary="删除内容条目",
    description="删除内容条目并释放其标签使用计数"
)
async def delete_item(
    item_id: str,
    db: AsyncSession = Depends(get_db)
) -> StandardResponse:
    """删除内容条目"""
    handler = CapturedItemHandler(db)
    delete_result = await handler.handle_delete_item(item_id)

    return StandardResponse(
        status="success",
        message="内容条目删除成功",
        data=delete_result
    )
