"""
数据库测试工具
提供数据库测试相关的工具函数
"""

from datetime import datetime
from typing import Any, Dict, List, Optional
from unittest.mock import MagicMock, AsyncMock

from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

from app.db.database import Base
from app.models.captured_item import CapturedItem
from app.models.tag import Tag  # noqa: F401
from app.repositories.captured_item import CapturedItemRepository
from app.repositories.tag import TagRepository


class DatabaseTestUtils:
    """数据库测试工具类"""

    @staticmethod
    def get_test_database_url() -> str:
        """获取测试数据库URL"""
        # 使用内存数据库进行测试
        return "sqlite+aiosqlite:///:memory:"

    @staticmethod
    def create_test_engine():
        """
        创建测试引擎

        内存数据库只存在于单个连接中，使用StaticPool让所有会话共享同一连接
        """
        return create_async_engine(
            DatabaseTestUtils.get_test_database_url(),
            echo=False,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False}
        )

    @staticmethod
    def create_session_factory(engine) -> async_sessionmaker:
        """创建与应用配置一致的会话工厂"""
        return async_sessionmaker(
            engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False
        )

    @staticmethod
    async def create_test_tables(engine):
        """创建测试表"""
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    @staticmethod
    async def drop_test_tables(engine):
        """删除测试表"""
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

    @staticmethod
    def create_mock_session() -> MagicMock:
        """
        创建mock数据库会话

        Returns:
            MagicMock: mock数据库会话对象
        """
        mock_session = MagicMock()

        # 配置mock方法
        mock_session.commit = AsyncMock(return_value=None)
        mock_session.rollback = AsyncMock(return_value=None)
        mock_session.close = AsyncMock(return_value=None)
        mock_session.execute = AsyncMock()
        mock_session.flush = AsyncMock(return_value=None)
        mock_session.refresh = AsyncMock(return_value=None)
        mock_session.delete = AsyncMock(return_value=None)
        mock_session.add = MagicMock(return_value=None)

        return mock_session


async def seed_item(
    session: AsyncSession,
    content: str,
    content_type: str = "text",
    title: Optional[str] = None,
    description: Optional[str] = None,
    tags: Optional[List[str]] = None,
    created_at: Optional[datetime] = None,
    metadata: Optional[Dict[str, Any]] = None
) -> CapturedItem:
    """
    直接写入一个内容条目并提交

    用于准备检索数据：可以指定创建时间和标签，不经过标签计数逻辑
    """
    fields: Dict[str, Any] = {
        "content_type": content_type,
        "content": content,
        "title": title,
        "description": description,
        "tags": list(tags or []),
        "item_metadata": metadata,
    }
    if created_at is not None:
        fields["created_at"] = created_at
        fields["updated_at"] = created_at

    item = await CapturedItemRepository(session).create(**fields)
    await session.commit()
    return item


async def get_usage_counts(session: AsyncSession) -> Dict[str, int]:
    """读取当前所有标签的使用计数"""
    tags = await TagRepository(session).get_all_tags()
    return {tag.name: tag.usage_count for tag in tags}
