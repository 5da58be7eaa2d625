# routes/order.py
from typing import List, Optional
from fastapi import APIRouter, Depends, Query, Response, status
from pydantic import ValidationError

from oms.database.dependencies import get_order_service, require_platform_user
from oms.models.errors import InvalidPaginationError, InvalidRequestError
from oms.models.schemas.order import OrderCreate, OrderResponse, OrderUpdate
from oms.models.schemas.pagination import Pagination
from oms.services.order import OrderService
from oms.utils.logging import get_logger
from oms.utils.types import Requester


logger = get_logger(__name__)

router = APIRouter(prefix="/v1/operation", tags=["Order"])

_FORBIDDEN = {status.HTTP_403_FORBIDDEN: {"description": "Forbidden."}}
_BAD_REQUEST = {status.HTTP_400_BAD_REQUEST: {"description": "Invalid request object."}}
_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"description": "Order not found."}}
_INTERNAL = {status.HTTP_500_INTERNAL_SERVER_ERROR: {"description": "Internal server error."}}


def _require_id(order_id: Optional[str], operation: str) -> str:
    if not order_id or not order_id.strip():
        logger.error(f"Inside {operation}: query params is invalid")
        raise InvalidRequestError("Invalid query params")
    return order_id


@router.post(
    "",
    response_model=OrderResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create Order",
    description="Create Order API: Will create an order.",
    responses={**_FORBIDDEN, **_BAD_REQUEST, **_INTERNAL},
)
async def create_order(
    data: OrderCreate,
    requester: Requester = Depends(require_platform_user),
    service: OrderService = Depends(get_order_service),
):
    order = await service.create_order(requester, data)
    return OrderResponse.model_validate(order)


@router.put(
    "",
    response_model=OrderResponse,
    summary="Update Order",
    description="Update Order API: Responsible for Updating order items and order details.",
    responses={**_FORBIDDEN, **_BAD_REQUEST, **_NOT_FOUND, **_INTERNAL},
)
async def update_order(
    data: OrderUpdate,
    requester: Requester = Depends(require_platform_user),
    service: OrderService = Depends(get_order_service),
):
    order = await service.update_order(requester, data)
    return OrderResponse.model_validate(order)


@router.get(
    "",
    response_model=OrderResponse,
    summary="Get Order with order id.",
    description="Get order details with the order id.",
    responses={**_FORBIDDEN, **_BAD_REQUEST, **_NOT_FOUND, **_INTERNAL},
)
async def get_order(
    order_id: Optional[str] = Query(
        None, alias="id", description="id is required for getting the details of order."
    ),
    requester: Requester = Depends(require_platform_user),
    service: OrderService = Depends(get_order_service),
):
    order_id = _require_id(order_id, "get_order")
    order = await service.get_order_by_id(requester, order_id)
    return OrderResponse.model_validate(order)


@router.get(
    "/orders",
    response_model=List[OrderResponse],
    summary="Get All Orders with pagination.",
    description="Orders API: Will give the list of orders with pagination.",
    responses={**_FORBIDDEN, **_BAD_REQUEST, **_INTERNAL},
)
async def get_orders(
    page: Optional[str] = Query(
        None, description="An integer value representing the page number."
    ),
    page_size: Optional[str] = Query(
        None, description="An integer value representing the page size."
    ),
    requester: Requester = Depends(require_platform_user),
    service: OrderService = Depends(get_order_service),
):
    logger.info("inside get Orders.")
    try:
        pagination = Pagination(page=page, page_size=page_size)
    except ValidationError as e:
        logger.error(f"Inside get_orders: {e}")
        raise InvalidPaginationError() from e

    orders = await service.get_all_orders(requester, pagination)
    return [OrderResponse.model_validate(order) for order in orders]


@router.delete(
    "",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete Order with order id.",
    description="Delete order with the order id.",
    responses={**_FORBIDDEN, **_BAD_REQUEST, **_INTERNAL},
)
async def delete_order(
    order_id: Optional[str] = Query(
        None, alias="id", description="id is required for deleting order."
    ),
    requester: Requester = Depends(require_platform_user),
    service: OrderService = Depends(get_order_service),
):
    order_id = _require_id(order_id, "delete_order")
    await service.delete_order(requester, order_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
