# services/base.py
from typing import Callable, Generic, TypeVar
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from oms.models.errors import PersistenceError
from oms.utils.logging import get_logger

T = TypeVar("T")
R = TypeVar("R")

logger = get_logger(__name__)


class BaseService(Generic[T]):
    def __init__(self, db: Session):
        self.db = db

    async def _handle_db_operation(
        self,
        operation: Callable[[], R],
        error_message: str = "Something went wrong.",
        commit: bool = True,
    ) -> R:
        try:
            result = operation()
            if commit:
                self.db.commit()
            return result
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("Database operation error: {}", str(e))
            raise PersistenceError(error_message) from e
