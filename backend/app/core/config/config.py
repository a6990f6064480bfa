"""
应用配置管理模块
统一管理所有配置信息，包括环境变量和文件配置
"""

from typing import List, Optional
from pydantic_settings import BaseSettings
from pydantic import field_validator, ConfigDict

from app.utils.config_utils import get_workspace_path, get_config_path, parse_json_config


class Settings(BaseSettings):
    """应用配置类 - 统一管理所有配置信息"""

    # ==================== 基础配置 ====================
    app_name: str = "Capture Box"
    app_version: str = "1.0.0"
    app_debug: bool = True
    app_env: str = "development"

    # ==================== API配置 ====================
    api_v1_str: str = "/api/v1"
    project_name: str = "Capture Box API"

    # ==================== 数据库配置 ====================
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: int = 5432
    POSTGRES_USER: str = "capture_box_dev"
    POSTGRES_PASSWORD: str = "dev_password"
    POSTGRES_DB: str = "capture_box_dev"
    # 完整的异步连接串，设置后覆盖POSTGRES_*（测试使用sqlite+aiosqlite）
    DATABASE_URL: Optional[str] = None
    db_echo: bool = False

    # ==================== 日志配置 ====================
    log_dir: str = "log"
    log_level: str = "INFO"
    log_file: str = "backend.log"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # ==================== 应用服务配置 ====================
    app_port: int = 2022
    app_host: str = "0.0.0.0"

    # ==================== 检索配置 ====================
    default_search_limit: int = 50
    default_semantic_search_limit: int = 10
    max_search_limit: int = 200

    # ==================== 标签配置 ====================
    max_suggested_tags: int = 5
    max_tag_length: int = 50

    # ==================== CORS配置 ====================
    cors_origins: str = '["http://localhost:3000", "http://127.0.0.1:3000"]'

    # ==================== 验证器 ====================
    @field_validator("cors_origins")
    @classmethod
    def parse_cors_origins(cls, value: str) -> List[str]:
        """解析CORS origins配置"""
        return parse_json_config(value)

    # ==================== 计算属性 ====================
    @property
    def async_database_url(self) -> str:
        """构建异步数据库连接URL"""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@"
            f"{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
        )

    @property
    def absolute_log_dir(self) -> str:
        """获取绝对日志目录路径"""
        return str(get_workspace_path(self.log_dir))

    model_config = ConfigDict(
        env_file=get_config_path(".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="allow",
        validate_default=True
    )


def get_settings() -> Settings:
    """获取应用配置实例"""
    # 环境变量文件加载由外部环境控制（Docker Compose、launch.json等）
    return Settings()


# 全局配置实例
settings = get_settings()
