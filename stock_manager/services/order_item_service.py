import logging
from typing import List

from ..exceptions import NotFoundError, ValidationError
from ..models.order_item import OrderItem
from ..schemas.order_item import OrderItemCreate, OrderItemUpdate
from .base import BaseService
from .order_rules import recompute_order_total

logger = logging.getLogger(__name__)


class OrderItemService(BaseService):
    """Order items edited on their own; every change refreshes the order total"""

    async def list(self) -> List[OrderItem]:
        return await self.uow.order_items.list()

    async def get(self, item_id: int) -> OrderItem:
        item = await self.uow.order_items.get(item_id)
        if item is None:
            raise NotFoundError("OrderItem", item_id)
        return item

    async def create(self, data: OrderItemCreate) -> OrderItem:
        async with self.transaction("create order item"):
            await self._check_order(data.order_id)
            await self._check_product(data.product_id)

            item = await self.uow.order_items.add(data.model_dump())
            await recompute_order_total(self.uow, item.order_id)

        logger.info(f"✅ Order item {item.id} added to order {item.order_id}")
        return item

    async def update(self, item_id: int, data: OrderItemUpdate) -> OrderItem:
        changes = data.model_dump(exclude_unset=True)

        async with self.transaction(f"update order item {item_id}"):
            for field, value in changes.items():
                if value is None:
                    raise ValidationError(f"{field} cannot be null")

            item = await self.get(item_id)
            previous_order_id = item.order_id
            if "order_id" in changes:
                await self._check_order(changes["order_id"])
            if "product_id" in changes:
                await self._check_product(changes["product_id"])

            item = await self.uow.order_items.update(item, changes)
            await recompute_order_total(self.uow, item.order_id)
            # An item moved to another order leaves the old total stale
            if previous_order_id != item.order_id:
                await recompute_order_total(self.uow, previous_order_id)

        logger.info(f"✅ Order item {item_id} updated")
        return item

    async def delete(self, item_id: int) -> None:
        async with self.transaction(f"delete order item {item_id}"):
            item = await self.get(item_id)
            order_id = item.order_id
            await self.uow.order_items.delete(item)
            await recompute_order_total(self.uow, order_id)

        logger.info(f"🗑️ Order item {item_id} removed from order {order_id}")

    async def _check_order(self, order_id: int) -> None:
        if await self.uow.orders.get(order_id) is None:
            raise NotFoundError("Order", order_id)

    async def _check_product(self, product_id: int) -> None:
        if await self.uow.products.get(product_id) is None:
            raise NotFoundError("Product", product_id)
