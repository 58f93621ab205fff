import logging
from abc import ABC, abstractmethod

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import PersistenceError
from .base import (
    Repository,
    ProductRepository,
    ProductHistoryRepository,
    OrderItemRepository,
    UserRepository,
)
from .sql import (
    SqlCategoryRepository,
    SqlSubcategoryRepository,
    SqlProducerRepository,
    SqlProductRepository,
    SqlProductHistoryRepository,
    SqlCustomerRepository,
    SqlClientRepository,
    SqlOrderRepository,
    SqlOrderItemRepository,
    SqlUserRepository,
)

logger = logging.getLogger(__name__)


class UnitOfWork(ABC):
    """All repositories of one request, committed or rolled back together"""

    categories: Repository
    subcategories: Repository
    producers: Repository
    products: ProductRepository
    product_history: ProductHistoryRepository
    customers: Repository
    clients: Repository
    orders: Repository
    order_items: OrderItemRepository
    users: UserRepository

    @abstractmethod
    async def commit(self) -> None:
        ...

    @abstractmethod
    async def rollback(self) -> None:
        ...


class SqlAlchemyUnitOfWork(UnitOfWork):

    def __init__(self, session: AsyncSession):
        self.session = session
        self.categories = SqlCategoryRepository(session)
        self.subcategories = SqlSubcategoryRepository(session)
        self.producers = SqlProducerRepository(session)
        self.products = SqlProductRepository(session)
        self.product_history = SqlProductHistoryRepository(session)
        self.customers = SqlCustomerRepository(session)
        self.clients = SqlClientRepository(session)
        self.orders = SqlOrderRepository(session)
        self.order_items = SqlOrderItemRepository(session)
        self.users = SqlUserRepository(session)

    async def commit(self) -> None:
        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            logger.error(f"❌ Commit failed: {e}")
            raise PersistenceError("Could not commit the transaction") from e

    async def rollback(self) -> None:
        await self.session.rollback()
