"""
标签建议服务
基于固定关键词规则为内容生成候选标签，结果完全确定，不调用任何模型
"""

from typing import List, Optional, Tuple

from app.core.config import settings
from app.core.log_utils import get_logger
from app.core.log_messages import log_messages
from app.schemas.captured_item import ContentType
from app.schemas.tag import TagSuggestionRequest

logger = get_logger(__name__)

# 代码语言识别规则，按顺序取第一个命中的语言；匹配区分大小写
LANGUAGE_RULES: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("javascript", ("function", "const", "require")),
    ("python", ("def ", "import ")),
    ("sql", ("SELECT", "FROM", "WHERE")),
)

# 链接站点识别规则
LINK_SITE_RULES: Tuple[Tuple[str, str], ...] = (
    ("github", "github.com"),
    ("stackoverflow", "stackoverflow.com"),
)

# 主题识别规则，在小写后的标题、描述、正文中做子串匹配
TOPIC_RULES: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("api", ("api", "endpoint")),
    ("database", ("database", "db", "sql", "select", "users", "query")),
    ("authentication", ("auth", "login")),
    ("testing", ("test", "testing")),
    ("docker", ("docker", "container")),
    ("react", ("react", "component")),
)

FALLBACK_TAG = "misc"


def _content_type_tags(content: str, content_type: ContentType) -> List[str]:
    """根据内容类型生成标签"""
    if content_type == ContentType.CODE:
        tags = ["programming"]
        for language, markers in LANGUAGE_RULES:
            if any(marker in content for marker in markers):
                tags.append(language)
                break
        return tags

    if content_type == ContentType.LINK:
        tags = ["reference"]
        for site, domain in LINK_SITE_RULES:
            if domain in content:
                tags.append(site)
                break
        return tags

    if content_type == ContentType.IMAGE:
        return ["visual", "media"]

    return ["notes"]


def suggest_tags(
    content: str,
    content_type: ContentType,
    title: Optional[str] = None,
    description: Optional[str] = None,
    max_tags: Optional[int] = None
) -> List[str]:
    """
    为内容生成候选标签

    Args:
        content: 内容正文
        content_type: 内容类型
        title: 标题
        description: 描述
        max_tags: 最多返回的标签数，默认取配置

    Returns:
        List[str]: 去重后的小写标签，至少包含一个
    """
    limit = max_tags or settings.max_suggested_tags
    content_type = ContentType(content_type)
    text = " ".join(part for part in (title, description, content) if part).lower()

    tags = _content_type_tags(content, content_type)
    tags.extend(
        topic for topic, keywords in TOPIC_RULES
        if any(keyword in text for keyword in keywords)
    )

    cleaned = [
        tag.strip().lower() for tag in tags
        if 0 < len(tag.strip()) <= settings.max_tag_length
    ]
    if not cleaned:
        cleaned = [FALLBACK_TAG]

    return list(dict.fromkeys(cleaned))[:limit]


class TagSuggestionService:
    """标签建议服务"""

    def generate_tags(self, request: TagSuggestionRequest) -> List[str]:
        """
        生成标签建议

        Args:
            request: 标签建议请求

        Returns:
            List[str]: 最多5个建议标签
        """
        tags = suggest_tags(
            content=request.content,
            content_type=request.content_type,
            title=request.title,
            description=request.description
        )

        logger.info(log_messages.TAG_SUGGEST_SUCCESS,
                    content_type=request.content_type.value,
                    suggested_tags=tags)
        return tags
