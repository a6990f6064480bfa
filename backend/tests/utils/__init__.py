"""
测试工具包
提供统一的测试工具和辅助函数
"""

from .mock_utils import MockBuilder
from .data_utils import TestDataGenerator, TestDataValidator
from .database_utils import DatabaseTestUtils, seed_item, get_usage_counts

__all__ = [
    'MockBuilder',
    'TestDataGenerator',
    'TestDataValidator',
    'DatabaseTestUtils',
    'seed_item',
    'get_usage_counts'
]
