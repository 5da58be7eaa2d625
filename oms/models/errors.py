from .enums import OrderErrorKind


class OrderError(Exception):
    """Base class for every failure the order API can report.

    Each subclass is tagged with an OrderErrorKind; the route layer maps the
    kind to a status code and never inspects anything else.
    """

    kind: OrderErrorKind
    default_message: str = "Something went wrong."

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidRequestError(OrderError):
    kind = OrderErrorKind.INVALID_REQUEST
    default_message = "Invalid request object."


class InvalidPaginationError(OrderError):
    kind = OrderErrorKind.INVALID_PAGINATION
    default_message = "Invalid Pagination values"


class EmptyOrderError(OrderError):
    kind = OrderErrorKind.EMPTY_ORDER
    default_message = "Unable to create empty order."


class OrderNotFoundError(OrderError):
    kind = OrderErrorKind.NOT_FOUND
    default_message = "Order not found."


class OrderUpdateTooSoonError(OrderError):
    kind = OrderErrorKind.TOO_SOON
    default_message = "Can not update your order. Please try again after some time."


class PersistenceError(OrderError):
    kind = OrderErrorKind.PERSISTENCE_ERROR


class ForbiddenError(OrderError):
    kind = OrderErrorKind.FORBIDDEN
    default_message = "Forbidden."
