"""
内容检索服务
提供按类型、按标签、多条件组合以及关键词（语义）检索
"""

from typing import Any, Dict, List, Sequence
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.log_utils import get_logger
from app.core.log_messages import log_messages
from app.repositories.captured_item import CapturedItemRepository
from app.schemas.captured_item import ContentType, ItemSearchParams, SemanticSearchParams
from app.utils.string_utils import split_search_terms

logger = get_logger(__name__)


class ItemSearchService:
    """内容检索服务 - 只读查询"""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.item_repo = CapturedItemRepository(db)

    async def get_items_by_content_type(self, content_type: ContentType) -> List[Dict[str, Any]]:
        """按内容类型精确匹配"""
        items = await self.item_repo.get_items_by_content_type(ContentType(content_type).value)
        return [item.to_dict() for item in items]

    async def get_items_by_tags(self, tags: Sequence[str]) -> List[Dict[str, Any]]:
        """
        按标签检索（重叠匹配）

        条目只要包含任一指定标签即命中；未指定标签时返回空列表。
        """
        if not tags:
            return []

        items = await self.item_repo.get_items_with_any_tag(tags)
        return [item.to_dict() for item in items]

    async def search_items(self, search_params: ItemSearchParams) -> List[Dict[str, Any]]:
        """
        多条件组合检索

        query、content_type、tags 之间为AND关系，tags 要求条目包含全部指定标签。

        Args:
            search_params: 检索参数

        Returns:
            List[Dict[str, Any]]: 当前页的条目
        """
        items = await self.item_repo.search_items(
            query=search_params.query,
            content_type=search_params.content_type.value if search_params.content_type else None,
            tags=search_params.tags,
            limit=search_params.limit,
            offset=search_params.offset
        )
        return [item.to_dict() for item in items]

    async def semantic_search(self, search_params: SemanticSearchParams) -> List[Dict[str, Any]]:
        """
        关键词检索

        查询按空白拆分为多个关键词，每个关键词需在content、title、description
        任一字段中出现（不区分大小写），全部关键词命中才返回；结果按创建时间倒序。
        查询为空时直接返回最近的条目。
        """
        terms = split_search_terms(search_params.query)
        content_type = search_params.content_type.value if search_params.content_type else None

        logger.debug(log_messages.SEARCH_START,
                     search_kind="semantic",
                     terms=terms,
                     content_type=content_type)

        items = await self.item_repo.keyword_search(
            terms=terms,
            content_type=content_type,
            limit=search_params.limit
        )
        return [item.to_dict() for item in items]
