"""
标签相关的Pydantic模型
用于数据验证和序列化
"""

from typing import Optional
from pydantic import BaseModel, Field

from app.schemas.captured_item import ContentType


class TagSuggestionRequest(BaseModel):
    """标签建议请求模型"""
    content: str = Field(..., min_length=1, description="内容正文")
    content_type: ContentType = Field(..., description="内容类型")
    title: Optional[str] = Field(None, description="标题")
    description: Optional[str] = Field(None, description="描述")
