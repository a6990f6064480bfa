"""
字符串工具模块
提供统一的字符串处理函数
"""

from typing import Iterable, List


def normalize_tag_names(tags: Iterable[str]) -> List[str]:
    """
    规范化标签名称列表

    去除首尾空白、丢弃空标签，并按首次出现的顺序去重。

    Args:
        tags: 原始标签名称

    Returns:
        List[str]: 规范化后的标签列表
    """
    normalized = (tag.strip() for tag in tags)
    return list(dict.fromkeys(tag for tag in normalized if tag))


def split_search_terms(query: str) -> List[str]:
    """
    按空白字符拆分搜索词，并转换为小写

    Args:
        query: 原始查询字符串

    Returns:
        List[str]: 搜索词列表，空查询返回空列表
    """
    return [term for term in query.lower().split() if term]
