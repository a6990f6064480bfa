"""
标签库服务
处理标签库相关的核心业务逻辑
"""

from typing import Dict, Any
from sqlalchemy.ext.asyncio import AsyncSession

from app.repositories.tag import TagRepository


class TagLibraryService:
    """标签库服务 - 处理标签库相关的核心业务逻辑"""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.tag_repo = TagRepository(db)

    async def list_tags(self) -> Dict[str, Any]:
        """
        获取所有标签

        Returns:
            Dict[str, Any]: 按使用次数降序排列的标签列表
        """
        tags = await self.tag_repo.get_all_tags()

        return {
            "tags": [tag.to_dict() for tag in tags],
            "total": len(tags)
        }
