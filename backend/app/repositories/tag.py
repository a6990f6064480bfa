"""
标签数据访问层
"""

from typing import Iterable, List, Optional
from sqlalchemy import select, desc, insert, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert

from app.core.log_utils import get_logger
from app.core.log_messages import log_messages
from app.models.tag import Tag
from app.utils.datetime_utils import utc_now
from app.utils.id_utils import generate_uuid
from .base import BaseRepository

logger = get_logger(__name__)


class TagRepository(BaseRepository):
    """标签Repository"""

    @property
    def model(self):
        return Tag

    async def get_tag_by_name(self, name: str) -> Optional[Tag]:
        """根据名称获取标签"""
        stmt = (
            select(Tag)
            .where(Tag.name == name)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def get_all_tags(self) -> List[Tag]:
        """获取所有标签，按使用次数降序，次数相同时按名称升序"""
        stmt = (
            select(Tag)
            .order_by(desc(Tag.usage_count), Tag.name)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def increment_tag_usage(self, tag_names: Iterable[str]) -> None:
        """
        增加标签使用次数，标签不存在时以计数1创建

        每个标签使用单条原子语句递增，不做读-改-写。
        """
        for tag_name in tag_names:
            stmt = (
                update(Tag)
                .where(Tag.name == tag_name)
                .values(usage_count=Tag.usage_count + 1)
            )
            result = await self.db.execute(stmt)

            if result.rowcount == 0:
                await self._insert_or_increment(tag_name)
                logger.info(log_messages.TAG_CREATED, tag_name=tag_name)

    async def decrement_tag_usage(self, tag_names: Iterable[str]) -> None:
        """
        减少标签使用次数

        计数不会低于0；标签不存在时忽略。计数已为0的标签说明条目标签与
        计数不一致，记录警告后跳过。
        """
        for tag_name in tag_names:
            stmt = (
                update(Tag)
                .where(Tag.name == tag_name, Tag.usage_count > 0)
                .values(usage_count=Tag.usage_count - 1)
            )
            result = await self.db.execute(stmt)

            if result.rowcount == 0:
                existing_tag = await self.get_tag_by_name(tag_name)
                if existing_tag is not None:
                    logger.warning(log_messages.TAG_USAGE_ALREADY_ZERO, tag_name=tag_name)

    async def _insert_or_increment(self, tag_name: str) -> None:
        """以计数1插入新标签；并发插入同名标签时转为递增"""
        values = {
            "id": generate_uuid(),
            "name": tag_name,
            "usage_count": 1,
            "created_at": utc_now(),
        }

        table = Tag.__table__
        dialect_name = self.db.get_bind().dialect.name
        if dialect_name == "postgresql":
            stmt = pg_insert(table).values(**values)
        elif dialect_name == "sqlite":
            stmt = sqlite_insert(table).values(**values)
        else:
            await self.db.execute(insert(table).values(**values))
            return

        stmt = stmt.on_conflict_do_update(
            index_elements=[table.c.name],
            set_={"usage_count": table.c.usage_count + 1}
        )
        await self.db.execute(stmt)
