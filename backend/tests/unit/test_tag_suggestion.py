"""
标签建议单元测试
规则完全确定，不依赖数据库
"""

import pytest

from app.schemas.captured_item import ContentType
from app.schemas.tag import TagSuggestionRequest
from app.services.tag.suggestion.service import (
    FALLBACK_TAG,
    TagSuggestionService,
    suggest_tags,
)


@pytest.mark.unit
@pytest.mark.tags
class TestSuggestTags:
    """suggest_tags 规则测试"""

    def test_sql_code(self):
        """测试SQL代码识别语言与主题"""
        tags = suggest_tags("SELECT * FROM users;", ContentType.CODE)

        assert {"programming", "sql", "database"} <= set(tags)
        assert tags[0] == "programming"

    def test_javascript_code(self):
        """测试JavaScript代码"""
        tags = suggest_tags("const fs = require('fs')", ContentType.CODE)

        assert tags == ["programming", "javascript"]

    def test_python_code(self):
        """测试Python代码"""
        tags = suggest_tags("import os\nprint(os.getcwd())", ContentType.CODE)

        assert tags[:2] == ["programming", "python"]

    def test_only_first_language_matches(self):
        """测试只取第一个命中的语言"""
        tags = suggest_tags("function f() {}\ndef g(): pass", ContentType.CODE)

        assert "javascript" in tags
        assert "python" not in tags

    def test_language_markers_are_case_sensitive(self):
        """测试语言关键字区分大小写"""
        tags = suggest_tags("select name from people", ContentType.CODE)

        assert "sql" not in tags
        assert "database" in tags

    def test_github_link(self):
        """测试GitHub链接"""
        tags = suggest_tags("https://github.com/org/repo", ContentType.LINK)

        assert tags == ["reference", "github"]

    def test_stackoverflow_link(self):
        """测试StackOverflow链接"""
        tags = suggest_tags("https://stackoverflow.com/questions/1", ContentType.LINK)

        assert tags[:2] == ["reference", "stackoverflow"]

    def test_image(self):
        """测试图片类型"""
        assert suggest_tags("screenshot.png", ContentType.IMAGE) == ["visual", "media"]

    def test_plain_text(self):
        """测试普通文本"""
        assert suggest_tags("buy milk", ContentType.TEXT) == ["notes"]

    def test_title_and_description_are_scanned(self):
        """测试标题和描述参与主题匹配"""
        tags = suggest_tags(
            "see attached",
            ContentType.TEXT,
            title="Docker setup",
            description="Login flow"
        )

        assert "docker" in tags
        assert "authentication" in tags

    def test_at_most_five_tags(self):
        """测试最多返回5个标签"""
        content = "api database auth test docker react"
        tags = suggest_tags(content, ContentType.TEXT)

        assert len(tags) == 5
        assert tags == ["notes", "api", "database", "authentication", "testing"]

    def test_explicit_limit(self):
        """测试显式限制数量"""
        tags = suggest_tags("api database", ContentType.TEXT, max_tags=2)

        assert tags == ["notes", "api"]

    def test_deterministic(self):
        """测试同样输入得到同样结果"""
        first = suggest_tags("SELECT * FROM users;", ContentType.CODE, title="Query")
        second = suggest_tags("SELECT * FROM users;", ContentType.CODE, title="Query")

        assert first == second

    def test_tags_are_lowercase_and_unique(self):
        """测试标签均为小写且不重复"""
        tags = suggest_tags("SQL database db query", ContentType.CODE)

        assert tags == [tag.lower() for tag in tags]
        assert len(tags) == len(set(tags))
        assert FALLBACK_TAG not in tags


@pytest.mark.unit
@pytest.mark.tags
class TestTagSuggestionService:
    """标签建议服务测试"""

    def test_generate_tags(self):
        """测试通过请求模型生成标签"""
        request = TagSuggestionRequest(content="SELECT * FROM users;", content_type="code")

        tags = TagSuggestionService().generate_tags(request)

        assert "sql" in tags
        assert len(tags) <= 5
