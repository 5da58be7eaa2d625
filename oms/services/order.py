# services/order.py
from typing import List, Optional, Union
from sqlalchemy import case, literal
from sqlalchemy.orm import Session

from oms.models.database_models import Order
from oms.models.errors import (
    EmptyOrderError,
    OrderNotFoundError,
    OrderUpdateTooSoonError,
)
from oms.models.schemas.order import OrderCreate, OrderUpdate, ServiceItem
from oms.models.schemas.pagination import Pagination
from oms.utils.common import as_utc, utcnow
from oms.utils.logging import get_logger
from oms.utils.types import Clock, Requester

from .base import BaseService

logger = get_logger(__name__)


def _require_services(services: Optional[List[ServiceItem]]) -> List[ServiceItem]:
    if not services:
        raise EmptyOrderError()
    return services


def _total_fee(services: List[ServiceItem]) -> Union[int, float]:
    return sum(item.amount for item in services)


def _documents(services: List[ServiceItem]) -> List[dict]:
    return [item.model_dump() for item in services]


class OrderService(BaseService[Order]):
    """Business rules for orders on top of the document store.

    cooldown_seconds is the minimum time between two updates of the same
    order. clock returns the current timezone-aware time and exists so the
    cooldown can be driven deterministically.
    """

    def __init__(self, db: Session, cooldown_seconds: int, clock: Optional[Clock] = None):
        super().__init__(db)
        self.cooldown_seconds = cooldown_seconds
        self.clock = clock or utcnow

    async def create_order(self, requester: Requester, draft: OrderCreate) -> Order:
        services = _require_services(draft.services)
        now = self.clock()

        order = Order(
            user_id=draft.user_id,
            services=_documents(services),
            total_fee=_total_fee(services),
            is_deleted=False,
            created_at=now,
            updated_at=now,
        )
        logger.info(f"Creating order for user {draft.user_id} with {len(services)} services")

        return await self._handle_db_operation(
            lambda: self.db.add(order) or order,
            "Unable to create order. Please try after some time.",
        )

    async def update_order(self, requester: Requester, patch: OrderUpdate) -> Order:
        """Replace the services of a live order once its cooldown has elapsed."""
        services = _require_services(patch.services)
        total_fee = _total_fee(services)
        request_time = self.clock()

        past_order = await self._get_live(
            patch.id, "Unable to update order. Something went wrong."
        )
        if past_order is None:
            raise OrderNotFoundError()

        elapsed = abs((request_time - as_utc(past_order.updated_at)).total_seconds())
        if elapsed < self.cooldown_seconds:
            logger.info(
                f"Update of order {patch.id} rejected, {elapsed:.0f}s since last update"
            )
            raise OrderUpdateTooSoonError()

        # a clock that stepped back must not move updated_at backwards
        updated_at = max(request_time, as_utc(past_order.updated_at))

        observed_version = past_order.version
        matched = await self._handle_db_operation(
            lambda: self.db.query(Order)
            .filter(
                Order.id == patch.id,
                Order.is_deleted.is_(False),
                Order.version == observed_version,
            )
            .update(
                {
                    Order.services: _documents(services),
                    Order.total_fee: total_fee,
                    Order.updated_at: updated_at,
                    Order.version: Order.version + 1,
                },
                synchronize_session=False,
            ),
            "Unable to update order. Something went wrong.",
        )

        if matched == 0:
            # another writer got there between the read and the write
            if await self._get_live(patch.id, "Unable to update order. Something went wrong.") is None:
                raise OrderNotFoundError()
            raise OrderUpdateTooSoonError()

        logger.info(f"Updated order {patch.id}, total fee {total_fee}")
        return await self._handle_db_operation(
            lambda: self.db.refresh(past_order) or past_order,
            "Unable to update order. Something went wrong.",
            commit=False,
        )

    async def get_order_by_id(self, requester: Requester, order_id: str) -> Order:
        order = await self._get_live(order_id, "Unable to get order. Something went wrong.")
        if order is None:
            raise OrderNotFoundError()
        return order

    async def get_all_orders(self, requester: Requester, pagination: Pagination) -> List[Order]:
        """Live orders, newest first, one page at a time."""
        return await self._handle_db_operation(
            lambda: self.db.query(Order)
            .filter(Order.is_deleted.is_(False))
            .order_by(Order.created_at.desc(), Order.id.desc())
            .offset(pagination.offset)
            .limit(pagination.page_size)
            .all(),
            "Something went wrong while getting orders.",
            commit=False,
        )

    async def delete_order(self, requester: Requester, order_id: str) -> None:
        # a missing or already deleted order matches nothing and is not an error
        now = self.clock()
        matched = await self._handle_db_operation(
            lambda: self.db.query(Order)
            .filter(Order.id == order_id, Order.is_deleted.is_(False))
            .update(
                {
                    Order.is_deleted: True,
                    Order.updated_at: case(
                        (Order.updated_at > now, Order.updated_at),
                        else_=literal(now, Order.updated_at.type),
                    ),
                    Order.version: Order.version + 1,
                },
                synchronize_session=False,
            ),
            "Unable to delete order. Something went wrong.",
        )
        logger.info(f"Soft-deleted order {order_id} ({matched} rows)")

    async def _get_live(self, order_id: str, error_message: str) -> Optional[Order]:
        return await self._handle_db_operation(
            lambda: self.db.query(Order)
            .filter(Order.id == order_id, Order.is_deleted.is_(False))
            .first(),
            error_message,
            commit=False,
        )
