"""
标签数据模型
记录每个标签名称及其被内容条目引用的次数
"""

from sqlalchemy import Column, String, Integer, DateTime

from app.db.database import Base
from app.utils.datetime_utils import utc_now, to_isoformat
from app.utils.id_utils import generate_uuid


class Tag(Base):
    """标签模型"""

    __tablename__ = "tags"

    # 基本字段
    id = Column(String(36), primary_key=True, index=True, default=generate_uuid)
    name = Column(String(100), nullable=False, unique=True, index=True)

    # 统计字段：当前引用该标签的内容条目数量（反规范化计数）
    usage_count = Column(Integer, default=0, nullable=False)

    # 时间戳
    created_at = Column(DateTime, default=utc_now, nullable=False)

    def __repr__(self) -> str:
        return f"<Tag(id={self.id}, name={self.name}, usage_count={self.usage_count})>"

    def to_dict(self) -> dict:
        """转换为字典格式"""
        return {
            'id': self.id,
            'name': self.name,
            'usage_count': self.usage_count,
            'created_at': to_isoformat(self.created_at),
        }
