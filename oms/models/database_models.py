from decimal import Decimal

from sqlalchemy import (
    JSON,
    NUMERIC,
    Boolean,
    Column,
    DateTime,
    Integer,
    String,
    func,
)
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import declarative_base
from sqlalchemy.types import TypeDecorator
import cuid2


Base = declarative_base()


class ExactNumeric(TypeDecorator):
    """NUMERIC that returns whole values as int and the rest as float"""

    impl = NUMERIC
    cache_ok = True

    def load_dialect_impl(self, dialect):
        # sqlite pushes NUMERIC through float, so keep the digits as text there
        if dialect.name == "sqlite":
            return dialect.type_descriptor(String())
        return dialect.type_descriptor(NUMERIC())

    def process_bind_param(self, value, dialect):
        if value is not None and dialect.name == "sqlite":
            return str(value)
        return value

    def process_result_value(self, value, dialect):
        if value is None:
            return value
        if isinstance(value, str):
            try:
                return int(value)
            except ValueError:
                return float(value)
        if isinstance(value, Decimal):
            return int(value) if value == value.to_integral_value() else float(value)
        return value


class TimestampMixin:
    """Mixin for adding timestamp fields to models"""

    created_at = Column(
        DateTime(timezone=True), server_default=func.now(), nullable=False, index=True
    )
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )


class Order(TimestampMixin, Base):
    """Order document: a user's set of priced services and their total fee"""

    __tablename__ = "Order"

    id = Column(String, primary_key=True, default=cuid2.cuid_wrapper())
    user_id = Column(String, nullable=False, index=True)

    # line items, stored as a single document
    services = Column(JSON().with_variant(JSONB(), "postgresql"), nullable=False)
    total_fee = Column(ExactNumeric(), nullable=False, default=0)

    is_deleted = Column(Boolean, nullable=False, default=False, index=True)

    # bumped by every write, guards conditional updates
    version = Column(Integer, nullable=False, default=1)
