from .base import (
    Repository,
    ProductRepository,
    ProductHistoryRepository,
    OrderItemRepository,
    UserRepository
)
from .unit_of_work import UnitOfWork, SqlAlchemyUnitOfWork

__all__ = [
    "Repository",
    "ProductRepository",
    "ProductHistoryRepository",
    "OrderItemRepository",
    "UserRepository",
    "UnitOfWork",
    "SqlAlchemyUnitOfWork"
]
