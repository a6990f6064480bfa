"""
测试配置和fixtures
为所有测试提供共享的配置和fixtures

测试使用sqlite+aiosqlite内存数据库，环境变量必须在导入应用模块之前设置
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("APP_DEBUG", "true")
os.environ.setdefault("LOG_LEVEL", "ERROR")

from typing import AsyncGenerator  # noqa: E402

import pytest  # noqa: E402
from httpx import AsyncClient, ASGITransport  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: E402

from app.db.database import get_db  # noqa: E402
from tests.utils.database_utils import DatabaseTestUtils  # noqa: E402


@pytest.fixture(scope="function")
async def test_engine():
    """测试数据库引擎fixture，每个测试函数一个独立的内存数据库"""
    engine = DatabaseTestUtils.create_test_engine()
    await DatabaseTestUtils.create_test_tables(engine)

    yield engine

    await DatabaseTestUtils.drop_test_tables(engine)
    await engine.dispose()


@pytest.fixture(scope="function")
async def test_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """测试数据库会话fixture"""
    session_factory = DatabaseTestUtils.create_session_factory(test_engine)

    async with session_factory() as session:
        try:
            yield session
        finally:
            await session.rollback()
            await session.close()


@pytest.fixture(scope="function")
def mock_db_session():
    """mock数据库会话fixture"""
    return DatabaseTestUtils.create_mock_session()


@pytest.fixture(scope="function")
async def client(test_session) -> AsyncGenerator[AsyncClient, None]:
    """
    HTTP测试客户端fixture

    直接在进程内调用ASGI应用，数据库依赖替换为测试会话
    """
    from main import app

    async def override_get_db():
        yield test_session

    app.dependency_overrides[get_db] = override_get_db
    transport = ASGITransport(app=app)

    async with AsyncClient(transport=transport, base_url="http://test/api/v1") as http_client:
        yield http_client

    app.dependency_overrides.clear()


# 测试标记配置
def pytest_configure(config):
    """配置pytest标记"""
    config.addinivalue_line("markers", "unit: 单元测试")
    config.addinivalue_line("markers", "integration: 集成测试（真实数据库）")
    config.addinivalue_line("markers", "interface: 接口测试")
    config.addinivalue_line("markers", "items: 内容条目相关测试")
    config.addinivalue_line("markers", "search: 检索相关测试")
    config.addinivalue_line("markers", "tags: 标签相关测试")
    config.addinivalue_line("markers", "logging: 日志相关测试")
