from typing import FrozenSet, Optional
from fastapi import Depends

from fastapi.security import APIKeyHeader
from sqlalchemy.orm import Session
from oms.config import settings
from oms.database.database import get_db
from oms.models.enums import Role
from oms.models.errors import ForbiddenError
from oms.services.order import OrderService
from oms.utils.logging import get_logger
from oms.utils.types import Requester


logger = get_logger(__name__)

authorization_header = APIKeyHeader(name="Authorization", auto_error=False)


def _bearer_token(auth_header: str) -> str:
    scheme, _, token = auth_header.partition(" ")
    if scheme.lower() == "bearer" and token:
        return token.strip()
    return auth_header.strip()


def resolve_roles(auth_header: str) -> FrozenSet[Role]:
    # no configured tokens means every caller is a platform user
    if not settings.platform_user_tokens:
        return frozenset({Role.PLATFORM_USER})
    if _bearer_token(auth_header) in settings.platform_user_tokens:
        return frozenset({Role.PLATFORM_USER})
    return frozenset()


def require_platform_user(
    auth_header: Optional[str] = Depends(authorization_header),
) -> Requester:
    if auth_header is None or not auth_header.strip():
        logger.error("Rejected request without Authorization header")
        raise ForbiddenError()

    roles = resolve_roles(auth_header)
    if Role.PLATFORM_USER not in roles:
        logger.error("Rejected request lacking the platform user role")
        raise ForbiddenError()

    return Requester(authorization=auth_header, roles=roles)


def get_order_service(db: Session = Depends(get_db)) -> OrderService:
    return OrderService(db, cooldown_seconds=settings.order_update_cooldown_seconds)
