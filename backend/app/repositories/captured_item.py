"""
内容条目数据访问层
"""

from typing import Any, Dict, List, Optional, Sequence
from sqlalchemy import select, desc, and_, or_, type_coerce
from sqlalchemy.dialects.postgresql import JSONB

from app.models.captured_item import CapturedItem
from .base import BaseRepository


def _tag_contains(tag: str):
    """条目标签数组包含指定标签（JSONB @>）"""
    return type_coerce(CapturedItem.tags, JSONB).contains([tag])


def tags_overlap(tags: Sequence[str]):
    """包含任一标签"""
    return or_(*[_tag_contains(tag) for tag in tags])


def tags_contain_all(tags: Sequence[str]):
    """包含全部标签"""
    return and_(*[_tag_contains(tag) for tag in tags])


class CapturedItemRepository(BaseRepository):
    """内容条目Repository"""

    @property
    def model(self):
        return CapturedItem

    async def create_item(self, create_data: Dict[str, Any]) -> CapturedItem:
        """创建内容条目，新条目的标签始终为空"""
        return await self.create(
            content_type=create_data["content_type"],
            content=create_data["content"],
            title=create_data.get("title"),
            description=create_data.get("description"),
            item_metadata=create_data.get("metadata"),
            tags=[]
        )

    async def get_item_by_id(self, item_id: str) -> Optional[CapturedItem]:
        """根据ID获取内容条目"""
        return await self.get_by_id(item_id)

    async def get_all_items(self) -> List[CapturedItem]:
        """获取所有内容条目"""
        return await self.list_all()

    async def get_items_by_content_type(self, content_type: str) -> List[CapturedItem]:
        """根据内容类型获取条目"""
        stmt = select(CapturedItem).where(CapturedItem.content_type == content_type)
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    def _supports_tag_containment(self) -> bool:
        """当前数据库是否支持JSONB包含查询"""
        return self.db.get_bind().dialect.name == "postgresql"

    async def get_items_with_any_tag(self, tags: Sequence[str]) -> List[CapturedItem]:
        """获取包含任一指定标签的条目（重叠匹配）"""
        wanted = list(dict.fromkeys(tags))
        if not wanted:
            return []

        if self._supports_tag_containment():
            stmt = select(CapturedItem).where(tags_overlap(wanted))
            result = await self.db.execute(stmt)
            return list(result.scalars().all())

        # SQLite的JSON列没有包含运算符，取回后过滤
        items = await self.get_all_items()
        return [item for item in items if item.tag_set & set(wanted)]

    async def search_items(
        self,
        query: Optional[str] = None,
        content_type: Optional[str] = None,
        tags: Optional[Sequence[str]] = None,
        limit: int = 50,
        offset: int = 0
    ) -> List[CapturedItem]:
        """
        多条件组合检索（各条件之间为AND）

        Args:
            query: 在content中做不区分大小写的子串匹配
            content_type: 内容类型精确匹配
            tags: 条目必须包含全部指定标签
            limit: 返回数量
            offset: 偏移量

        Returns:
            List[CapturedItem]: 按创建时间倒序排列的结果页
        """
        conditions = []
        if query:
            conditions.append(CapturedItem.content.icontains(query, autoescape=True))
        if content_type:
            conditions.append(CapturedItem.content_type == content_type)

        required = list(dict.fromkeys(tags or []))
        filter_in_sql = not required or self._supports_tag_containment()
        if required and filter_in_sql:
            conditions.append(tags_contain_all(required))

        stmt = select(CapturedItem)
        if conditions:
            stmt = stmt.where(and_(*conditions))
        stmt = stmt.order_by(desc(CapturedItem.created_at), CapturedItem.id)

        if filter_in_sql:
            stmt = stmt.offset(offset).limit(limit)
            result = await self.db.execute(stmt)
            return list(result.scalars().all())

        # SQLite回退：包含关系在取回后过滤，分页在过滤之后进行
        result = await self.db.execute(stmt)
        matched = [item for item in result.scalars().all() if set(required) <= item.tag_set]
        return matched[offset:offset + limit]

    async def keyword_search(
        self,
        terms: Sequence[str],
        content_type: Optional[str] = None,
        limit: int = 10
    ) -> List[CapturedItem]:
        """
        关键词检索

        每个关键词需出现在content、title、description任一字段中，
        所有关键词都需命中。没有关键词时返回最近的条目。
        """
        conditions = [
            or_(
                CapturedItem.content.icontains(term, autoescape=True),
                CapturedItem.title.icontains(term, autoescape=True),
                CapturedItem.description.icontains(term, autoescape=True)
            )
            for term in terms
        ]
        if content_type:
            conditions.append(CapturedItem.content_type == content_type)

        stmt = select(CapturedItem)
        if conditions:
            stmt = stmt.where(and_(*conditions))
        stmt = stmt.order_by(desc(CapturedItem.created_at)).limit(limit)

        result = await self.db.execute(stmt)
        return list(result.scalars().all())
