from enum import Enum


class Role(str, Enum):
    PLATFORM_USER = "platform_user"


class OrderErrorKind(str, Enum):
    INVALID_REQUEST = "INVALID_REQUEST"
    INVALID_PAGINATION = "INVALID_PAGINATION"
    EMPTY_ORDER = "EMPTY_ORDER"
    NOT_FOUND = "NOT_FOUND"
    TOO_SOON = "TOO_SOON"
    PERSISTENCE_ERROR = "PERSISTENCE_ERROR"
    FORBIDDEN = "FORBIDDEN"
