"""
处理器公共工具
统一各业务处理器的HTTP异常构造
"""

from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError


def storage_unavailable(operation: str, error: SQLAlchemyError) -> HTTPException:
    """构造存储不可用的HTTP异常（不做重试）"""
    return HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail=f"{operation}失败，存储不可用: {str(error)}"
    )


def internal_error(operation: str, error: Exception) -> HTTPException:
    """构造服务内部错误的HTTP异常"""
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"{operation}失败: {str(error)}"
    )
