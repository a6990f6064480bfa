"""
Repository基础类
定义通用的数据访问接口和方法

Repository 只负责执行语句并 flush，事务的提交与回滚由 Service 层统一控制，
保证一次业务操作涉及的多行变更作为一个整体生效。
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import DeclarativeBase

from app.core.log_utils import get_logger
from app.core.log_messages import log_messages
from app.utils.id_utils import generate_uuid

ModelType = TypeVar("ModelType", bound=DeclarativeBase)

logger = get_logger(__name__)


class BaseRepository(ABC):
    """Repository基础类"""

    def __init__(self, db: AsyncSession):
        self.db = db

    @property
    @abstractmethod
    def model(self) -> Type[ModelType]:
        """返回Repository对应的模型类"""

    async def get_by_id(self, record_id: str) -> Optional[ModelType]:
        """根据ID获取单个记录"""
        try:
            logger.debug(log_messages.DB_QUERY_START,
                         operation_name="get_by_id",
                         record_id=record_id,
                         model_name=self.model.__name__)

            query = select(self.model).filter(self.model.id == record_id)
            result = await self.db.execute(query)
            record = result.scalars().first()

            if not record:
                logger.warning("记录不存在",
                               operation_name="get_by_id",
                               record_id=record_id,
                               model_name=self.model.__name__)

            return record

        except Exception as e:
            logger.error(log_messages.DB_QUERY_FAILED,
                         operation_name="get_by_id",
                         record_id=record_id,
                         model_name=self.model.__name__,
                         exception=e)
            raise

    async def list_all(self) -> List[ModelType]:
        """获取全部记录（存储自然顺序）"""
        result = await self.db.execute(select(self.model))
        return list(result.scalars().all())

    async def create(self, **kwargs) -> ModelType:
        """创建新记录（仅flush，不提交）"""
        try:
            logger.debug(log_messages.DB_UPDATE_START,
                         operation_name="create",
                         model_name=self.model.__name__)

            # 如果模型有id字段但kwargs中没有提供id，自动生成UUID
            if hasattr(self.model, 'id') and 'id' not in kwargs:
                kwargs['id'] = generate_uuid()

            instance = self.model(**kwargs)
            self.db.add(instance)
            await self.db.flush()
            await self.db.refresh(instance)

            logger.debug(log_messages.DB_UPDATE_SUCCESS,
                         operation_name="create",
                         model_name=self.model.__name__,
                         record_id=instance.id)

            return instance

        except Exception as e:
            logger.error(log_messages.DB_UPDATE_FAILED,
                         operation_name="create",
                         model_name=self.model.__name__,
                         exception=e)
            raise

    async def apply_changes(self, instance: ModelType, changes: Dict[str, Any]) -> ModelType:
        """将字段变更写入已加载的实例（仅flush，不提交）"""
        try:
            changed_fields = []
            for key, value in changes.items():
                if hasattr(instance, key):
                    if getattr(instance, key) != value:
                        changed_fields.append(key)
                    setattr(instance, key, value)

            await self.db.flush()

            logger.debug(log_messages.DB_UPDATE_SUCCESS,
                         operation_name="apply_changes",
                         record_id=instance.id,
                         model_name=self.model.__name__,
                         changed_fields=changed_fields)

            return instance

        except Exception as e:
            logger.error(log_messages.DB_UPDATE_FAILED,
                         operation_name="apply_changes",
                         record_id=instance.id,
                         model_name=self.model.__name__,
                         exception=e)
            raise

    async def remove(self, instance: ModelType) -> None:
        """删除已加载的实例（仅flush，不提交）"""
        try:
            await self.db.delete(instance)
            await self.db.flush()

            logger.debug(log_messages.DB_UPDATE_SUCCESS,
                         operation_name="remove",
                         record_id=instance.id,
                         model_name=self.model.__name__)

        except Exception as e:
            logger.error(log_messages.DB_UPDATE_FAILED,
                         operation_name="remove",
                         record_id=instance.id,
                         model_name=self.model.__name__,
                         exception=e)
            raise
