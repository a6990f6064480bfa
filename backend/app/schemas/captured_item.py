"""
内容条目相关的Pydantic模型
用于数据验证和序列化
"""

from enum import Enum
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field, field_validator

from app.core.config import settings
from app.utils.string_utils import normalize_tag_names


class ContentType(str, Enum):
    """内容类型"""
    TEXT = "text"
    CODE = "code"
    IMAGE = "image"
    LINK = "link"


class CapturedItemCreate(BaseModel):
    """
    内容条目创建模型

    创建时不接受标签，标签只能通过更新接口设置。
    """
    content_type: ContentType = Field(..., description="内容类型")
    content: str = Field(..., min_length=1, description="内容正文")
    title: Optional[str] = Field(None, description="标题")
    description: Optional[str] = Field(None, description="描述")
    metadata: Optional[Dict[str, Any]] = Field(None, description="扩展元数据，任意JSON对象")

    @field_validator("title", "description")
    @classmethod
    def empty_to_none(cls, value: Optional[str]) -> Optional[str]:
        """空字符串视为未提供"""
        return value or None


class CapturedItemUpdate(BaseModel):
    """
    内容条目更新模型

    未出现的字段保持不变；title、description、metadata 显式传 null 表示清空。
    """
    content_type: Optional[ContentType] = Field(None, description="内容类型")
    content: Optional[str] = Field(None, min_length=1, description="内容正文")
    title: Optional[str] = Field(None, description="标题")
    description: Optional[str] = Field(None, description="描述")
    tags: Optional[List[str]] = Field(None, description="完整的标签列表，替换原有标签")
    metadata: Optional[Dict[str, Any]] = Field(None, description="扩展元数据")

    @field_validator("content_type", "content", "tags")
    @classmethod
    def reject_null(cls, value):
        """不可为空的字段不允许显式传 null"""
        if value is None:
            raise ValueError("该字段不能为null")
        return value

    @field_validator("tags")
    @classmethod
    def normalize_tags(cls, value: List[str]) -> List[str]:
        """去除空白、丢弃空标签并去重"""
        return normalize_tag_names(value)

    def get_changes(self) -> Dict[str, Any]:
        """返回调用方显式提供的字段"""
        return self.model_dump(exclude_unset=True, mode="json")


class ItemSearchParams(BaseModel):
    """多条件检索参数模型"""
    query: Optional[str] = Field(None, description="content子串匹配关键词")
    content_type: Optional[ContentType] = Field(None, description="内容类型")
    tags: Optional[List[str]] = Field(None, description="必须同时包含的标签")
    limit: int = Field(
        default=settings.default_search_limit,
        ge=1,
        le=settings.max_search_limit,
        description="返回数量"
    )
    offset: int = Field(default=0, ge=0, description="偏移量")


class SemanticSearchParams(BaseModel):
    """关键词（语义）检索参数模型"""
    query: str = Field(default="", description="以空白分隔的关键词，全部需命中")
    limit: int = Field(
        default=settings.default_semantic_search_limit,
        ge=1,
        le=settings.max_search_limit,
        description="返回数量"
    )
    content_type: Optional[ContentType] = Field(None, description="内容类型")
