"""
标签建议业务处理器
"""

from typing import Dict, Any

from app.core.log_utils import get_logger
from app.schemas.tag import TagSuggestionRequest
from app.services.handler_utils import internal_error
from app.services.tag.suggestion.service import TagSuggestionService

logger = get_logger(__name__)


class TagSuggestionHandler:
    """标签建议处理器"""

    def __init__(self):
        self.suggestion_service = TagSuggestionService()

    def handle_generate_tags(self, request: TagSuggestionRequest) -> Dict[str, Any]:
        """处理生成标签建议请求"""
        try:
            return {"tags": self.suggestion_service.generate_tags(request)}

        except Exception as e:
            logger.error("生成标签建议失败", exception=e)
            raise internal_error("生成标签建议", e) from e
