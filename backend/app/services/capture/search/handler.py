"""
内容检索业务处理器
处理检索请求的日志记录和异常处理
"""

from typing import Any, Dict, List
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.log_utils import get_logger
from app.core.log_messages import log_messages
from app.schemas.captured_item import ContentType, ItemSearchParams, SemanticSearchParams
from app.services.capture.search.service import ItemSearchService
from app.services.handler_utils import storage_unavailable, internal_error

logger = get_logger(__name__)


class ItemSearchHandler:
    """内容检索处理器"""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.search_service = ItemSearchService(db)

    async def handle_get_items_by_content_type(self, content_type: ContentType) -> Dict[str, Any]:
        """处理按内容类型检索请求"""
        try:
            items = await self.search_service.get_items_by_content_type(content_type)

            logger.info(
                log_messages.SEARCH_SUCCESS,
                search_kind="content_type",
                content_type=content_type.value,
                total=len(items)
            )

            return {"items": items, "total": len(items)}

        except SQLAlchemyError as e:
            logger.error(log_messages.SEARCH_FAILED, exception=e, search_kind="content_type")
            raise storage_unavailable("按类型检索", e) from e
        except Exception as e:
            logger.error(log_messages.SEARCH_FAILED, exception=e, search_kind="content_type")
            raise internal_error("按类型检索", e) from e

    async def handle_get_items_by_tags(self, tags: List[str]) -> Dict[str, Any]:
        """处理按标签检索请求"""
        try:
            items = await self.search_service.get_items_by_tags(tags)

            logger.info(
                log_messages.SEARCH_SUCCESS,
                search_kind="tags",
                tags=tags,
                total=len(items)
            )

            return {"items": items, "total": len(items)}

        except SQLAlchemyError as e:
            logger.error(log_messages.SEARCH_FAILED, exception=e, search_kind="tags")
            raise storage_unavailable("按标签检索", e) from e
        except Exception as e:
            logger.error(log_messages.SEARCH_FAILED, exception=e, search_kind="tags")
            raise internal_error("按标签检索", e) from e

    async def handle_search_items(self, search_params: ItemSearchParams) -> Dict[str, Any]:
        """处理多条件检索请求"""
        try:
            logger.info(
                log_messages.SEARCH_START,
                search_kind="filters",
                extra=search_params.model_dump(mode="json")
            )

            items = await self.search_service.search_items(search_params)

            return {
                "items": items,
                "total": len(items),
                "limit": search_params.limit,
                "offset": search_params.offset
            }

        except SQLAlchemyError as e:
            logger.error(log_messages.SEARCH_FAILED, exception=e, search_kind="filters")
            raise storage_unavailable("条件检索", e) from e
        except Exception as e:
            logger.error(log_messages.SEARCH_FAILED, exception=e, search_kind="filters")
            raise internal_error("条件检索", e) from e

    async def handle_semantic_search(self, search_params: SemanticSearchParams) -> Dict[str, Any]:
        """处理关键词（语义）检索请求"""
        try:
            items = await self.search_service.semantic_search(search_params)

            logger.info(
                log_messages.SEARCH_SUCCESS,
                search_kind="semantic",
                query=search_params.query,
                total=len(items)
            )

            return {
                "items": items,
                "total": len(items),
                "query": search_params.query
            }

        except SQLAlchemyError as e:
            logger.error(log_messages.SEARCH_FAILED, exception=e, search_kind="semantic")
            raise storage_unavailable("关键词检索", e) from e
        except Exception as e:
            logger.error(log_messages.SEARCH_FAILED, exception=e, search_kind="semantic")
            raise internal_error("关键词检索", e) from e
