import copy
from types import SimpleNamespace
from typing import Any, Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from stock_manager.api.dependencies import get_settings, get_uow
from stock_manager.config import Settings
from stock_manager.main import app
from stock_manager.models.product import Unit
from stock_manager.repositories import (
    OrderItemRepository,
    ProductHistoryRepository,
    ProductRepository,
    Repository,
    UnitOfWork,
    UserRepository,
)


class InMemoryRepository(Repository):
    """Rows kept as plain attribute bags, ids handed out in insertion order"""

    def __init__(self, uow: "InMemoryUnitOfWork"):
        self.uow = uow
        self.rows: Dict[int, SimpleNamespace] = {}
        self.next_id = 1

    def _link(self, row: SimpleNamespace) -> SimpleNamespace:
        return row

    async def get(self, entity_id: int) -> Optional[SimpleNamespace]:
        row = self.rows.get(entity_id)
        return self._link(row) if row is not None else None

    async def list(self) -> List[SimpleNamespace]:
        return [self._link(self.rows[key]) for key in sorted(self.rows)]

    async def add(self, values: Dict[str, Any]) -> SimpleNamespace:
        row = SimpleNamespace(id=self.next_id, **values)
        self.rows[row.id] = row
        self.next_id += 1
        return self._link(row)

    async def update(self, entity: SimpleNamespace, values: Dict[str, Any]) -> SimpleNamespace:
        row = self.rows[entity.id]
        for field, value in values.items():
            setattr(row, field, value)
        return self._link(row)

    async def delete(self, entity: SimpleNamespace) -> None:
        self.rows.pop(entity.id, None)


class InMemoryProductRepository(InMemoryRepository, ProductRepository):

    def _link(self, row):
        row.category = self.uow.categories.rows.get(row.category_id)
        row.subcategory = self.uow.subcategories.rows.get(row.subcategory_id)
        row.producer = self.uow.producers.rows.get(row.producer_id)
        return row

    async def list_active(self):
        return [p for p in await self.list() if p.is_active]


class InMemoryProductHistoryRepository(InMemoryRepository, ProductHistoryRepository):

    def _link(self, row):
        product = self.uow.products.rows.get(row.product_id)
        row.product = self.uow.products._link(product) if product is not None else None
        return row

    async def list_for_product(self, product_id):
        return [h for h in await self.list() if h.product_id == product_id]

    async def delete_for_product(self, product_id):
        ids = [key for key, row in self.rows.items() if row.product_id == product_id]
        for key in ids:
            del self.rows[key]
        return len(ids)

    async def list_between(self, start, end):
        return [h for h in await self.list() if start <= h.week_start_date <= end]


class InMemoryOrderRepository(InMemoryRepository):

    def _link(self, row):
        row.customer = self.uow.customers.rows.get(row.customer_id)
        row.client = self.uow.clients.rows.get(row.client_id)
        row.order_items = self.uow.order_items.items_of(row.id)
        return row


class InMemoryOrderItemRepository(InMemoryRepository, OrderItemRepository):

    def _link(self, row):
        product = self.uow.products.rows.get(row.product_id)
        row.product = self.uow.products._link(product) if product is not None else None
        return row

    def items_of(self, order_id):
        return [
            self._link(self.rows[key]) for key in sorted(self.rows)
            if self.rows[key].order_id == order_id
        ]

    async def list_for_order(self, order_id):
        return self.items_of(order_id)

    async def delete_for_order(self, order_id):
        items = self.items_of(order_id)
        for item in items:
            del self.rows[item.id]
        return len(items)


class InMemoryUserRepository(InMemoryRepository, UserRepository):

    async def get_by_email(self, email):
        for row in self.rows.values():
            if row.email == email:
                return row
        return None


class InMemoryUnitOfWork(UnitOfWork):
    """Unit of work whose rollback restores the state of the last commit"""

    def __init__(self):
        self.categories = InMemoryRepository(self)
        self.subcategories = InMemoryRepository(self)
        self.producers = InMemoryRepository(self)
        self.products = InMemoryProductRepository(self)
        self.product_history = InMemoryProductHistoryRepository(self)
        self.customers = InMemoryRepository(self)
        self.clients = InMemoryRepository(self)
        self.orders = InMemoryOrderRepository(self)
        self.order_items = InMemoryOrderItemRepository(self)
        self.users = InMemoryUserRepository(self)
        self.commits = 0
        self.rollbacks = 0
        self._snapshot = self._capture()

    def _repositories(self) -> Dict[str, InMemoryRepository]:
        return {
            name: value for name, value in vars(self).items()
            if isinstance(value, InMemoryRepository)
        }

    def _capture(self):
        return copy.deepcopy({
            name: (repo.rows, repo.next_id) for name, repo in self._repositories().items()
        })

    async def commit(self) -> None:
        self.commits += 1
        self._snapshot = self._capture()

    async def rollback(self) -> None:
        self.rollbacks += 1
        restored = copy.deepcopy(self._snapshot)
        for name, repo in self._repositories().items():
            repo.rows, repo.next_id = restored[name]


@pytest.fixture
def uow():
    return InMemoryUnitOfWork()


@pytest.fixture
def test_settings():
    return Settings(bcrypt_rounds=4, secret_key="test-secret", low_stock_threshold=5)


@pytest.fixture
async def catalog(uow):
    """A category, a producer, two products, a customer and a client"""
    category = await uow.categories.add({"name": "Dairy"})
    producer = await uow.producers.add({
        "name": "Quinta do Vale",
        "address": None,
        "email": None,
        "phone_number": None,
        "contact_info": None,
    })
    milk = await uow.products.add({
        "name": "Milk",
        "unit": Unit.L,
        "description": None,
        "is_active": True,
        "category_id": category.id,
        "subcategory_id": None,
        "producer_id": producer.id,
    })
    cheese = await uow.products.add({
        "name": "Cheese",
        "unit": Unit.KG,
        "description": None,
        "is_active": True,
        "category_id": category.id,
        "subcategory_id": None,
        "producer_id": producer.id,
    })
    party = {"address": None, "email": None, "phone_number": None}
    customer = await uow.customers.add({"name": "Ana", **party})
    client = await uow.clients.add({"name": "Mercearia Central", **party})
    await uow.commit()
    return SimpleNamespace(
        category=category,
        producer=producer,
        milk=milk,
        cheese=cheese,
        customer=customer,
        client=client,
    )


@pytest.fixture
def client(uow, test_settings):
    app.dependency_overrides[get_uow] = lambda: uow
    app.dependency_overrides[get_settings] = lambda: test_settings
    yield TestClient(app)
    app.dependency_overrides.clear()
