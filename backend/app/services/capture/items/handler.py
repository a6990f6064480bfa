"""
内容条目业务处理器
处理内容条目CRUD的网络请求、日志记录和异常处理
"""

from typing import Any, Dict
from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ItemNotFoundError
from app.core.log_utils import get_logger
from app.core.log_messages import log_messages
from app.schemas.captured_item import CapturedItemCreate, CapturedItemUpdate
from app.services.capture.items.service import CapturedItemService
from app.services.handler_utils import storage_unavailable, internal_error

logger = get_logger(__name__)


class CapturedItemHandler:
    """内容条目处理器 - 处理网络请求、日志记录和异常处理"""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.item_service = CapturedItemService(db)

    async def handle_create_item(self, create_data: CapturedItemCreate) -> Dict[str, Any]:
        """处理创建内容条目请求"""
        try:
            logger.info(
                log_messages.ITEM_CREATE_START,
                extra={
                    "content_type": create_data.content_type.value,
                    "content_length": len(create_data.content)
                }
            )

            return await self.item_service.create_item(create_data)

        except SQLAlchemyError as e:
            logger.error(log_messages.ITEM_CREATE_FAILED, exception=e)
            raise storage_unavailable("创建内容条目", e) from e
        except Exception as e:
            logger.error(log_messages.ITEM_CREATE_FAILED, exception=e)
            raise internal_error("创建内容条目", e) from e

    async def handle_list_items(self) -> Dict[str, Any]:
        """处理获取全部内容条目请求"""
        try:
            items = await self.item_service.list_items()

            logger.info(
                log_messages.ITEM_LIST_SUCCESS,
                extra={"total": len(items)}
            )

            return {"items": items, "total": len(items)}

        except SQLAlchemyError as e:
            logger.error(log_messages.ITEM_LIST_FAILED, exception=e)
            raise storage_unavailable("获取内容条目列表", e) from e
        except Exception as e:
            logger.error(log_messages.ITEM_LIST_FAILED, exception=e)
            raise internal_error("获取内容条目列表", e) from e

    async def handle_get_item(self, item_id: str) -> Dict[str, Any]:
        """处理获取内容条目详情请求"""
        try:
            item = await self.item_service.get_item(item_id)

            if not item:
                raise HTTPException(
                    status_code=status.HTTP_404_NOT_FOUND,
                    detail=f"Captured item with id {item_id} not found"
                )

            return item

        except HTTPException:
            raise
        except SQLAlchemyError as e:
            logger.error(log_messages.ITEM_DETAIL_FAILED, exception=e, item_id=item_id)
            raise storage_unavailable("获取内容条目详情", e) from e
        except Exception as e:
            logger.error(log_messages.ITEM_DETAIL_FAILED, exception=e, item_id=item_id)
            raise internal_error("获取内容条目详情", e) from e

    async def handle_update_item(
        self,
        item_id: str,
        update_data: CapturedItemUpdate
    ) -> Dict[str, Any]:
        """处理更新内容条目请求"""
        try:
            logger.info(
                log_messages.ITEM_UPDATE_START,
                extra={
                    "item_id": item_id,
                    "update_fields": sorted(update_data.model_fields_set)
                }
            )

            return await self.item_service.update_item(item_id, update_data)

        except ItemNotFoundError as e:
            logger.warning(log_messages.ITEM_NOT_FOUND, item_id=item_id)
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=e.message
            ) from e
        except ValueError as e:
            logger.warning(log_messages.VALIDATION_FAILED, item_id=item_id, error=str(e))
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=str(e)
            ) from e
        except SQLAlchemyError as e:
            logger.error(log_messages.ITEM_UPDATE_FAILED, exception=e, item_id=item_id)
            raise storage_unavailable("更新内容条目", e) from e
        except Exception as e:
            logger.error(log_messages.ITEM_UPDATE_FAILED, exception=e, item_id=item_id)
            raise internal_error("更新内容条目", e) from e

    async def handle_delete_item(self, item_id: str) -> Dict[str, Any]:
        """处理删除内容条目请求"""
        try:
            logger.info(log_messages.ITEM_DELETE_START, item_id=item_id)

            await self.item_service.delete_item(item_id)

            return {"deleted_id": item_id}

        except ItemNotFoundError as e:
            logger.warning(log_messages.ITEM_NOT_FOUND, item_id=item_id)
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=e.message
            ) from e
        except SQLAlchemyError as e:
            logger.error(log_messages.ITEM_DELETE_FAILED, exception=e, item_id=item_id)
            raise storage_unavailable("删除内容条目", e) from e
        except Exception as e:
            logger.error(log_messages.ITEM_DELETE_FAILED, exception=e, item_id=item_id)
            raise internal_error("删除内容条目", e) from e
