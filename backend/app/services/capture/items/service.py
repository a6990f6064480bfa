"""
内容条目服务
处理内容条目的增删改查，以及条目标签变化时的标签使用计数维护
"""

from typing import Any, Dict, List, Optional, Sequence, Tuple
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ItemNotFoundError
from app.core.log_utils import get_logger
from app.core.log_messages import log_messages
from app.repositories.captured_item import CapturedItemRepository
from app.repositories.tag import TagRepository
from app.schemas.captured_item import CapturedItemCreate, CapturedItemUpdate
from app.utils.datetime_utils import utc_now

logger = get_logger(__name__)


def diff_tags(old_tags: Sequence[str], new_tags: Sequence[str]) -> Tuple[List[str], List[str]]:
    """
    计算标签变化

    Args:
        old_tags: 更新前的标签
        new_tags: 更新后的标签

    Returns:
        Tuple[List[str], List[str]]: (新增标签, 移除标签)，各自保持原列表顺序
    """
    old_set, new_set = set(old_tags), set(new_tags)
    added = [tag for tag in dict.fromkeys(new_tags) if tag not in old_set]
    removed = [tag for tag in dict.fromkeys(old_tags) if tag not in new_set]
    return added, removed


class CapturedItemService:
    """
    内容条目服务 - 处理条目生命周期的核心业务逻辑

    每个写操作是一个完整事务：条目行与相关标签行的变更一起提交，
    任一步骤失败则全部回滚。
    """

    def __init__(self, db: AsyncSession):
        self.db = db
        self.item_repo = CapturedItemRepository(db)
        self.tag_repo = TagRepository(db)

    async def create_item(self, create_data: CapturedItemCreate) -> Dict[str, Any]:
        """
        创建内容条目

        Args:
            create_data: 条目创建数据

        Returns:
            Dict[str, Any]: 创建的条目，标签为空
        """
        try:
            item = await self.item_repo.create_item(create_data.model_dump(mode="json"))
            await self.db.commit()
        except Exception:
            await self._rollback("create_item")
            raise

        logger.info(log_messages.ITEM_CREATE_SUCCESS,
                    item_id=item.id,
                    content_type=item.content_type)
        return item.to_dict()

    async def list_items(self) -> List[Dict[str, Any]]:
        """获取全部内容条目"""
        items = await self.item_repo.get_all_items()
        return [item.to_dict() for item in items]

    async def get_item(self, item_id: str) -> Optional[Dict[str, Any]]:
        """
        获取单个内容条目

        Returns:
            Optional[Dict[str, Any]]: 条目不存在时返回None
        """
        item = await self.item_repo.get_item_by_id(item_id)
        return item.to_dict() if item else None

    async def update_item(self, item_id: str, update_data: CapturedItemUpdate) -> Dict[str, Any]:
        """
        更新内容条目

        只修改调用方显式提供的字段。提供tags时按新旧标签差集调整计数：
        移除的标签计数减1，新增的标签计数加1（不存在则创建）。

        Args:
            item_id: 条目ID
            update_data: 更新数据

        Returns:
            Dict[str, Any]: 更新后的条目

        Raises:
            ItemNotFoundError: 条目不存在
        """
        changes = update_data.get_changes()

        try:
            item = await self.item_repo.get_item_by_id(item_id)
            if not item:
                raise ItemNotFoundError(item_id)

            if "tags" in changes:
                added_tags, removed_tags = diff_tags(item.tags or [], changes["tags"])
                await self.tag_repo.decrement_tag_usage(removed_tags)
                await self.tag_repo.increment_tag_usage(added_tags)

                if added_tags or removed_tags:
                    logger.info(log_messages.TAG_USAGE_CHANGED,
                                item_id=item_id,
                                added_tags=added_tags,
                                removed_tags=removed_tags)

            if "metadata" in changes:
                changes["item_metadata"] = changes.pop("metadata")
            changes["updated_at"] = utc_now()

            item = await self.item_repo.apply_changes(item, changes)
            await self.db.commit()
        except Exception:
            await self._rollback("update_item")
            raise

        logger.info(log_messages.ITEM_UPDATE_SUCCESS,
                    item_id=item_id,
                    update_fields=sorted(changes.keys()))
        return item.to_dict()

    async def delete_item(self, item_id: str) -> None:
        """
        删除内容条目，并撤销其对各标签使用计数的贡献

        Raises:
            ItemNotFoundError: 条目不存在
        """
        try:
            item = await self.item_repo.get_item_by_id(item_id)
            if not item:
                raise ItemNotFoundError(item_id)

            # 删除前先读取标签，用于递减计数
            item_tags = list(item.tags or [])
            await self.tag_repo.decrement_tag_usage(item_tags)
            await self.item_repo.remove(item)
            await self.db.commit()
        except Exception:
            await self._rollback("delete_item")
            raise

        logger.info(log_messages.ITEM_DELETE_SUCCESS,
                    item_id=item_id,
                    released_tags=item_tags)

    async def _rollback(self, operation_name: str) -> None:
        """回滚当前事务"""
        await self.db.rollback()
        logger.warning(log_messages.DB_TRANSACTION_ROLLBACK, operation_name=operation_name)
