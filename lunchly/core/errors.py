"""
Errors raised by the Lunchly data-access layer.

Only lookups by identifier have a structured failure. Storage failures
(connectivity, constraint violations) propagate as raw SQLAlchemy errors.
"""

from http import HTTPStatus


class LunchlyError(Exception):
    """Base class for Lunchly domain errors."""

    pass


class NotFoundError(LunchlyError):
    """Raised when a record looked up by identifier does not exist."""

    status_code: HTTPStatus = HTTPStatus.NOT_FOUND


class CustomerNotFoundError(NotFoundError):
    """Raised when no customer row matches the requested id."""

    def __init__(self, customer_id: int):
        self.customer_id = customer_id
        super().__init__(f"No such customer: {customer_id}")
