import logging
from contextlib import contextmanager
from datetime import date
from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy import select, delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ..exceptions import PersistenceError
from ..models import (
    Category,
    Subcategory,
    Producer,
    Product,
    ProductHistory,
    Customer,
    Client,
    Order,
    OrderItem,
    User,
)
from .base import (
    Repository,
    ProductRepository,
    ProductHistoryRepository,
    OrderItemRepository,
    UserRepository,
)

logger = logging.getLogger(__name__)


class SqlAlchemyRepository(Repository):
    """Generic CRUD over one mapped class.

    Writes only flush; committing is left to the unit of work. Every read
    eager-loads the relationships listed in ``load_options`` because the
    async session cannot lazy-load them later.
    """

    model: Any = None
    load_options: Sequence[Any] = ()

    def __init__(self, session: AsyncSession):
        self.session = session

    @contextmanager
    def _errors(self, action: str):
        try:
            yield
        except SQLAlchemyError as e:
            logger.error(f"❌ Error while trying to {action} {self.model.__name__}: {e}")
            raise PersistenceError(f"Could not {action} {self.model.__name__}") from e

    def _select(self):
        return (
            select(self.model)
            .options(*self.load_options)
            .execution_options(populate_existing=True)
        )

    async def _all(self, query) -> List[Any]:
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def get(self, entity_id: int) -> Optional[Any]:
        with self._errors("get"):
            result = await self.session.execute(
                self._select().where(self.model.id == entity_id)
            )
            return result.scalar_one_or_none()

    async def list(self) -> List[Any]:
        with self._errors("list"):
            return await self._all(self._select().order_by(self.model.id))

    async def add(self, values: Dict[str, Any]) -> Any:
        with self._errors("create"):
            entity = self.model(**values)
            self.session.add(entity)
            await self.session.flush()
        return await self.get(entity.id)

    async def update(self, entity: Any, values: Dict[str, Any]) -> Any:
        with self._errors("update"):
            for field, value in values.items():
                setattr(entity, field, value)
            await self.session.flush()
        return await self.get(entity.id)

    async def delete(self, entity: Any) -> None:
        # Core delete so the ORM does not touch already-removed children
        with self._errors("delete"):
            await self.session.execute(
                delete(self.model).where(self.model.id == entity.id)
            )


class SqlCategoryRepository(SqlAlchemyRepository):
    model = Category


class SqlSubcategoryRepository(SqlAlchemyRepository):
    model = Subcategory


class SqlProducerRepository(SqlAlchemyRepository):
    model = Producer


class SqlCustomerRepository(SqlAlchemyRepository):
    model = Customer


class SqlClientRepository(SqlAlchemyRepository):
    model = Client


class SqlProductRepository(SqlAlchemyRepository, ProductRepository):
    model = Product
    load_options = (
        selectinload(Product.category),
        selectinload(Product.subcategory),
        selectinload(Product.producer),
    )

    async def list_active(self) -> List[Product]:
        with self._errors("list"):
            return await self._all(
                self._select().where(Product.is_active.is_(True)).order_by(Product.id)
            )


class SqlProductHistoryRepository(SqlAlchemyRepository, ProductHistoryRepository):
    model = ProductHistory
    load_options = (
        selectinload(ProductHistory.product).selectinload(Product.producer),
    )

    async def list_for_product(self, product_id: int) -> List[ProductHistory]:
        with self._errors("list"):
            return await self._all(
                self._select()
                .where(ProductHistory.product_id == product_id)
                .order_by(ProductHistory.week_start_date)
            )

    async def delete_for_product(self, product_id: int) -> int:
        with self._errors("delete"):
            result = await self.session.execute(
                delete(ProductHistory).where(ProductHistory.product_id == product_id)
            )
            return result.rowcount or 0

    async def list_between(self, start: date, end: date) -> List[ProductHistory]:
        with self._errors("list"):
            return await self._all(
                self._select()
                .where(ProductHistory.week_start_date >= start)
                .where(ProductHistory.week_start_date <= end)
                .order_by(ProductHistory.id)
            )


class SqlOrderRepository(SqlAlchemyRepository):
    model = Order
    load_options = (
        selectinload(Order.customer),
        selectinload(Order.client),
        selectinload(Order.order_items)
        .selectinload(OrderItem.product)
        .selectinload(Product.producer),
    )


class SqlOrderItemRepository(SqlAlchemyRepository, OrderItemRepository):
    model = OrderItem
    load_options = (
        selectinload(OrderItem.product).selectinload(Product.producer),
    )

    async def list_for_order(self, order_id: int) -> List[OrderItem]:
        with self._errors("list"):
            return await self._all(
                self._select().where(OrderItem.order_id == order_id).order_by(OrderItem.id)
            )

    async def delete_for_order(self, order_id: int) -> int:
        with self._errors("delete"):
            result = await self.session.execute(
                delete(OrderItem).where(OrderItem.order_id == order_id)
            )
            return result.rowcount or 0


class SqlUserRepository(SqlAlchemyRepository, UserRepository):
    model = User

    async def get_by_email(self, email: str) -> Optional[User]:
        with self._errors("get"):
            result = await self.session.execute(
                self._select().where(User.email == email)
            )
            return result.scalar_one_or_none()
