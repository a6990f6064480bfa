"""
标签库管理业务处理器
处理标签库管理的网络请求、日志记录和异常处理
"""

from typing import Dict, Any
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.log_utils import get_logger
from app.services.handler_utils import storage_unavailable, internal_error
from app.services.tag.library.service import TagLibraryService

logger = get_logger(__name__)


class TagLibraryHandler:
    """标签库处理器 - 处理网络请求、日志记录和异常处理"""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.tag_library_service = TagLibraryService(db)

    async def handle_list_tags(self) -> Dict[str, Any]:
        """处理获取所有标签请求"""
        try:
            result = await self.tag_library_service.list_tags()

            logger.info(
                "获取所有标签完成",
                extra={"total": result["total"]}
            )

            return result

        except SQLAlchemyError as e:
            logger.error("获取所有标签失败", exception=e)
            raise storage_unavailable("获取所有标签", e) from e
        except Exception as e:
            logger.error("获取所有标签失败", exception=e)
            raise internal_error("获取所有标签", e) from e
