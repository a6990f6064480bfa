"""
Repository模块
包含所有数据访问层的Repository类
"""

from .base import BaseRepository
from .captured_item import CapturedItemRepository
from .tag import TagRepository

__all__ = [
    'BaseRepository',
    'CapturedItemRepository',
    'TagRepository'
]
