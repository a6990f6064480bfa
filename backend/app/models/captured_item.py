"""
内容条目数据模型
统一存储文本、代码、图片和链接类型的采集内容
"""

from typing import Dict, Any
from sqlalchemy import Column, String, Text, DateTime, JSON
from sqlalchemy.dialects.postgresql import JSONB

from app.db.database import Base
from app.utils.datetime_utils import utc_now, to_isoformat
from app.utils.id_utils import generate_uuid


class CapturedItem(Base):
    """内容条目模型"""

    __tablename__ = "captured_items"

    # 基本字段
    id = Column(String(36), primary_key=True, index=True, default=generate_uuid)
    content_type = Column(String(20), nullable=False, index=True)  # text, code, image, link
    content = Column(Text, nullable=False)
    title = Column(Text, nullable=True)
    description = Column(Text, nullable=True)

    # 扩展字段
    # 标签名称数组，按添加顺序去重；PostgreSQL下使用JSONB以支持包含查询
    tags = Column(JSON().with_variant(JSONB(), "postgresql"), nullable=False, default=list)
    # metadata 是声明式基类的保留属性，ORM 属性名使用 item_metadata
    item_metadata = Column("metadata", JSON, nullable=True)

    # 时间戳
    created_at = Column(DateTime, default=utc_now, nullable=False, index=True)
    updated_at = Column(DateTime, default=utc_now, onupdate=utc_now, nullable=False)

    def __repr__(self) -> str:
        return f"<CapturedItem(id={self.id}, content_type={self.content_type})>"

    @property
    def tag_set(self) -> set:
        """标签集合，便于做重叠/包含判断"""
        return set(self.tags or [])

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典格式"""
        return {
            'id': self.id,
            'content_type': self.content_type,
            'content': self.content,
            'title': self.title,
            'description': self.description,
            'tags': list(self.tags or []),
            'metadata': self.item_metadata,
            'created_at': to_isoformat(self.created_at),
            'updated_at': to_isoformat(self.updated_at),
        }
