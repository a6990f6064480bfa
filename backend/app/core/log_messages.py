"""
日志消息模板模块
统一管理所有业务日志消息模板，便于维护和国际化
"""

from typing import Dict, Any


class LogMessages:
    """日志消息模板类"""

    # ==================== 通用日志消息 ====================
    OPERATION_SUCCESS = "操作成功完成: {operation_name}"

    # ==================== 内容条目相关 ====================
    ITEM_CREATE_START = "开始创建内容条目"
    ITEM_CREATE_SUCCESS = "内容条目创建成功"
    ITEM_CREATE_FAILED = "创建内容条目失败"

    ITEM_LIST_SUCCESS = "成功获取内容条目列表"
    ITEM_LIST_FAILED = "获取内容条目列表失败"

    ITEM_DETAIL_FAILED = "获取内容条目详情失败"
    ITEM_NOT_FOUND = "内容条目不存在"

    ITEM_UPDATE_START = "开始更新内容条目"
    ITEM_UPDATE_SUCCESS = "内容条目更新成功"
    ITEM_UPDATE_FAILED = "更新内容条目失败"

    ITEM_DELETE_START = "开始删除内容条目"
    ITEM_DELETE_SUCCESS = "内容条目删除成功"
    ITEM_DELETE_FAILED = "删除内容条目失败"

    # ==================== 检索相关 ====================
    SEARCH_START = "开始检索内容条目: {search_kind}"
    SEARCH_SUCCESS = "检索完成: {search_kind}"
    SEARCH_FAILED = "检索失败: {search_kind}"

    # ==================== 标签相关 ====================
    TAG_USAGE_CHANGED = "标签使用计数已调整"
    TAG_USAGE_ALREADY_ZERO = "标签使用计数已为0，跳过递减: {tag_name}"
    TAG_CREATED = "首次使用标签，已创建: {tag_name}"
    TAG_SUGGEST_SUCCESS = "标签建议生成完成"

    # ==================== 数据库操作相关 ====================
    DB_QUERY_START = "开始数据库查询"
    DB_QUERY_FAILED = "数据库查询失败"
    DB_UPDATE_START = "开始数据库更新"
    DB_UPDATE_SUCCESS = "数据库更新成功"
    DB_UPDATE_FAILED = "数据库更新失败"
    DB_TRANSACTION_ROLLBACK = "事务已回滚: {operation_name}"

    # ==================== 业务验证相关 ====================
    VALIDATION_FAILED = "验证失败"

    @classmethod
    def format_message(cls, message_template: str, **kwargs: Any) -> str:
        """格式化日志消息模板"""
        return message_template.format(**kwargs)

    @classmethod
    def get_structured_data(cls, **kwargs: Any) -> Dict[str, Any]:
        """获取结构化日志数据"""
        return kwargs


# 全局实例
log_messages = LogMessages()
