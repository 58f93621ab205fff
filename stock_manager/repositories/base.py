"""Repository interfaces used by the services.

Services only talk to these interfaces; ``sql.py`` implements them on top
of an async SQLAlchemy session and the test suite implements them in memory.
"""

from abc import ABC, abstractmethod
from datetime import date
from typing import Any, Dict, Generic, List, Optional, TypeVar

ModelT = TypeVar("ModelT")


class Repository(ABC, Generic[ModelT]):
    """CRUD access to one entity"""

    @abstractmethod
    async def get(self, entity_id: int) -> Optional[ModelT]:
        ...

    @abstractmethod
    async def list(self) -> List[ModelT]:
        ...

    @abstractmethod
    async def add(self, values: Dict[str, Any]) -> ModelT:
        """Insert a new row and return it with its generated id"""
        ...

    @abstractmethod
    async def update(self, entity: ModelT, values: Dict[str, Any]) -> ModelT:
        """Apply ``values`` onto an existing row and return the fresh state"""
        ...

    @abstractmethod
    async def delete(self, entity: ModelT) -> None:
        ...


class ProductRepository(Repository[ModelT]):

    @abstractmethod
    async def list_active(self) -> List[ModelT]:
        ...


class ProductHistoryRepository(Repository[ModelT]):

    @abstractmethod
    async def list_for_product(self, product_id: int) -> List[ModelT]:
        ...

    @abstractmethod
    async def delete_for_product(self, product_id: int) -> int:
        """Delete every record of a product, return how many were removed"""
        ...

    @abstractmethod
    async def list_between(self, start: date, end: date) -> List[ModelT]:
        """Records whose week starts within [start, end]"""
        ...


class OrderItemRepository(Repository[ModelT]):

    @abstractmethod
    async def list_for_order(self, order_id: int) -> List[ModelT]:
        ...

    @abstractmethod
    async def delete_for_order(self, order_id: int) -> int:
        """Delete every item of an order, return how many were removed"""
        ...


class UserRepository(Repository[ModelT]):

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[ModelT]:
        ...
