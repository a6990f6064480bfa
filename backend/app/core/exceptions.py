"""
业务异常定义
定义内容采集模块中使用的异常类型
"""

from typing import Any, Dict, Optional


class CaptureError(Exception):
    """
    内容采集业务基础异常

    Attributes:
        message: 错误消息
        code: 错误码
        details: 错误详情
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message


class ItemNotFoundError(CaptureError):
    """内容条目不存在"""

    def __init__(self, item_id: str) -> None:
        super().__init__(
            f"Captured item with id {item_id} not found",
            code="NOT_FOUND",
            details={"item_id": item_id}
        )
        self.item_id = item_id


__all__ = [
    'CaptureError',
    'ItemNotFoundError',
]
