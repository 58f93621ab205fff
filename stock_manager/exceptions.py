"""Error taxonomy shared by services and the HTTP layer.

Each error maps to one HTTP status in ``stock_manager.main``:
``ValidationError`` -> 400, ``AuthenticationError`` -> 401,
``NotFoundError`` -> 404, ``PersistenceError`` -> 500.
"""

from typing import Any


class StockManagerError(Exception):
    """Base class for every error raised by the service layer"""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(StockManagerError):
    """Malformed or contradictory input; the caller must fix the request"""

    status_code = 400


class InvalidOrderPartyError(ValidationError):
    """An order must belong to exactly one of a customer or a client"""

    def __init__(self, message: str = (
        "An order must be linked either to a customer (customerId) "
        "or to a client (clientId), but not both."
    )):
        super().__init__(message)


class NotFoundError(StockManagerError):
    status_code = 404

    def __init__(self, entity: str, entity_id: Any):
        super().__init__(f"{entity} with id {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id


class AuthenticationError(StockManagerError):
    status_code = 401


class PersistenceError(StockManagerError):
    """The storage layer failed for a reason other than a missing row"""

    status_code = 500
