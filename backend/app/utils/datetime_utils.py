"""
日期时间工具模块
提供统一的日期时间处理函数
"""

from datetime import datetime, timezone
from typing import Optional


def utc_now() -> datetime:
    """获取当前UTC时间（去除时区信息，与数据库列保持一致）"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_isoformat(dt: Optional[datetime]) -> Optional[str]:
    """
    将日期时间转换为ISO-8601字符串

    Args:
        dt: 日期时间对象，可以为None

    Returns:
        Optional[str]: ISO格式字符串，dt为None时返回None
    """
    return dt.isoformat() if dt else None
