"""
内容检索集成测试
使用内存SQLite数据库，验证类型、标签、多条件和关键词检索
"""

from datetime import datetime, timedelta

import pytest

from app.schemas.captured_item import (
    CapturedItemCreate,
    ContentType,
    ItemSearchParams,
    SemanticSearchParams,
)
from app.services.capture.items.service import CapturedItemService
from app.services.capture.search.service import ItemSearchService
from tests.utils import TestDataValidator, seed_item

BASE_TIME = datetime(2024, 1, 1, 12, 0, 0)


def at(minutes: int) -> datetime:
    """基准时间之后的第N分钟"""
    return BASE_TIME + timedelta(minutes=minutes)


def contents(items):
    return [item["content"] for item in items]


@pytest.mark.integration
@pytest.mark.search
class TestItemQueries:
    """内容检索测试类"""

    @pytest.fixture
    def search_service(self, test_session):
        """真实数据库会话上的检索服务"""
        return ItemSearchService(test_session)

    async def test_by_content_type(self, search_service, test_session):
        """测试按内容类型精确匹配"""
        await seed_item(test_session, "print(1)", content_type="code")
        await seed_item(test_session, "note", content_type="text")

        items = await search_service.get_items_by_content_type(ContentType.CODE)

        assert contents(items) == ["print(1)"]

    async def test_by_tags_matches_any(self, search_service, test_session):
        """测试按标签检索为重叠匹配"""
        await seed_item(test_session, "only-x", tags=["x"])
        await seed_item(test_session, "x-and-y", tags=["x", "y"])
        await seed_item(test_session, "only-z", tags=["z"])
        await seed_item(test_session, "untagged")

        only_x = await search_service.get_items_by_tags(["x"])
        x_or_z = await search_service.get_items_by_tags(["x", "z"])

        assert sorted(contents(only_x)) == ["only-x", "x-and-y"]
        assert sorted(contents(x_or_z)) == ["only-x", "only-z", "x-and-y"]

    async def test_by_tags_empty_input(self, search_service, test_session):
        """测试未指定标签时返回空列表"""
        await seed_item(test_session, "tagged", tags=["x"])

        assert await search_service.get_items_by_tags([]) == []

    async def test_search_tags_require_all(self, search_service, test_session):
        """测试多条件检索中标签需全部包含"""
        await seed_item(test_session, "only-x", tags=["x"])
        await seed_item(test_session, "x-and-y", tags=["y", "x"])
        await seed_item(test_session, "x-y-z", tags=["x", "y", "z"])

        items = await search_service.search_items(ItemSearchParams(tags=["x", "y"]))

        assert sorted(contents(items)) == ["x-and-y", "x-y-z"]

    async def test_search_query_is_case_insensitive_on_content(self, search_service, test_session):
        """测试关键词只匹配正文且不区分大小写"""
        await seed_item(test_session, "Deploy with Docker", title="ops")
        await seed_item(test_session, "unrelated", title="docker notes")

        items = await search_service.search_items(ItemSearchParams(query="docker"))

        assert contents(items) == ["Deploy with Docker"]

    async def test_search_query_escapes_wildcards(self, search_service, test_session):
        """测试关键词中的通配符按字面匹配"""
        await seed_item(test_session, "progress 100% done")
        await seed_item(test_session, "loaded 1000 rows")

        items = await search_service.search_items(ItemSearchParams(query="0%"))

        assert contents(items) == ["progress 100% done"]

    async def test_search_combines_filters(self, search_service, test_session):
        """测试多个条件之间为AND关系"""
        await seed_item(test_session, "SELECT 1", content_type="code", tags=["sql"])
        await seed_item(test_session, "SELECT 2", content_type="text", tags=["sql"])
        await seed_item(test_session, "SELECT 3", content_type="code", tags=["misc"])

        items = await search_service.search_items(
            ItemSearchParams(query="select", content_type="code", tags=["sql"])
        )

        assert contents(items) == ["SELECT 1"]

    async def test_search_pagination_newest_first(self, search_service, test_session):
        """测试分页按创建时间倒序"""
        for minute in range(5):
            await seed_item(test_session, f"item-{minute}", created_at=at(minute))

        page = await search_service.search_items(ItemSearchParams(limit=2, offset=1))

        assert contents(page) == ["item-3", "item-2"]

    async def test_search_paginates_after_tag_filter(self, search_service, test_session):
        """测试标签过滤之后再分页"""
        for minute in range(6):
            tags = ["even"] if minute % 2 == 0 else ["odd"]
            await seed_item(test_session, f"item-{minute}", tags=tags, created_at=at(minute))

        page = await search_service.search_items(ItemSearchParams(tags=["even"], limit=2, offset=1))

        assert contents(page) == ["item-2", "item-0"]

    async def test_semantic_empty_query_returns_newest(self, search_service, test_session):
        """测试空查询返回最近的条目"""
        for minute in range(4):
            await seed_item(test_session, f"item-{minute}", created_at=at(minute))

        items = await search_service.semantic_search(SemanticSearchParams(query="", limit=3))

        assert contents(items) == ["item-3", "item-2", "item-1"]

    async def test_semantic_terms_must_all_match_any_field(self, search_service, test_session):
        """测试每个关键词命中任一字段，全部关键词都需命中"""
        await seed_item(test_session, "docker compose file", created_at=at(1))
        await seed_item(test_session, "notes about compose", title="Docker", created_at=at(2))
        await seed_item(test_session, "docker only", created_at=at(3))
        await seed_item(test_session, "plain", description="compose with DOCKER", created_at=at(0))

        items = await search_service.semantic_search(SemanticSearchParams(query="Docker  COMPOSE"))

        assert contents(items) == ["notes about compose", "docker compose file", "plain"]

    async def test_semantic_content_type_filter(self, search_service, test_session):
        """测试关键词检索的内容类型过滤"""
        await seed_item(test_session, "api client", content_type="code")
        await seed_item(test_session, "api docs", content_type="link")

        items = await search_service.semantic_search(
            SemanticSearchParams(query="api", content_type="link")
        )

        assert contents(items) == ["api docs"]


@pytest.mark.integration
@pytest.mark.items
class TestItemRoundTrip:
    """条目读写测试"""

    async def test_create_then_get(self, test_session):
        """测试创建后按ID读取得到相同字段"""
        service = CapturedItemService(test_session)

        created = await service.create_item(CapturedItemCreate(
            content_type="link",
            content="https://github.com/org/repo",
            title="repo",
            metadata={"source": "browser"}
        ))
        fetched = await service.get_item(created["id"])

        assert TestDataValidator.validate_item_data(fetched)
        assert fetched == created
        assert fetched["metadata"] == {"source": "browser"}
        assert fetched["created_at"] is not None
        assert fetched["updated_at"] is not None

    async def test_list_items(self, test_session):
        """测试获取全部条目"""
        await seed_item(test_session, "a")
        await seed_item(test_session, "b")

        items = await CapturedItemService(test_session).list_items()

        assert sorted(contents(items)) == ["a", "b"]
