"""
ID生成工具模块
提供统一的ID生成方法
"""

import uuid


def generate_uuid() -> str:
    """生成标准UUID字符串"""
    return str(uuid.uuid4())
