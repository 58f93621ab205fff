import logging
from datetime import datetime, timezone
from decimal import Decimal
from typing import List, Optional

from ..exceptions import NotFoundError, ValidationError
from ..models.order import Order, OrderStatus
from ..schemas.order import OrderCreate, OrderUpdate
from .base import BaseService
from .order_rules import (
    UNSET,
    merge_order_party,
    recompute_order_total,
    validate_order_party,
)

logger = logging.getLogger(__name__)


class OrderService(BaseService):
    """Orders and their embedded items"""

    async def list(self) -> List[Order]:
        return await self.uow.orders.list()

    async def get(self, order_id: int) -> Order:
        order = await self.uow.orders.get(order_id)
        if order is None:
            raise NotFoundError("Order", order_id)
        return order

    async def create(self, data: OrderCreate) -> Order:
        """Create an order with its items, then derive its total from them"""
        async with self.transaction("create order"):
            validate_order_party(data.customer_id, data.client_id, is_update=False)
            await self._check_party(data.customer_id, data.client_id)
            for item in data.order_items:
                await self._check_product(item.product_id)

            order = await self.uow.orders.add({
                "customer_id": data.customer_id,
                "client_id": data.client_id,
                "order_date": data.order_date or datetime.now(timezone.utc),
                "status": data.status or OrderStatus.PENDING,
                "total_amount": Decimal("0"),
            })
            for item in data.order_items:
                await self.uow.order_items.add({"order_id": order.id, **item.model_dump()})

            await recompute_order_total(self.uow, order.id)
            order = await self.get(order.id)

        logger.info(f"✅ Order {order.id} created with {len(data.order_items)} items")
        return order

    async def update(self, order_id: int, data: OrderUpdate) -> Order:
        # The total is owned by the items, a client-sent value is ignored
        changes = data.model_dump(exclude_unset=True, exclude={"total_amount"})

        async with self.transaction(f"update order {order_id}"):
            validate_order_party(
                changes.get("customer_id", UNSET),
                changes.get("client_id", UNSET),
                is_update=True,
            )
            for field in ("order_date", "status"):
                if field in changes and changes[field] is None:
                    raise ValidationError(f"{field} cannot be null")

            order = await self.get(order_id)
            if "customer_id" in changes or "client_id" in changes:
                customer_id, client_id = merge_order_party(order.customer_id, order.client_id, changes)
                await self._check_party(customer_id, client_id)
                changes["customer_id"] = customer_id
                changes["client_id"] = client_id

            order = await self.uow.orders.update(order, changes)

        logger.info(f"✅ Order {order_id} updated")
        return order

    async def delete(self, order_id: int) -> None:
        """Delete the items of the order, then the order itself"""
        async with self.transaction(f"delete order {order_id}"):
            order = await self.get(order_id)
            removed = await self.uow.order_items.delete_for_order(order_id)
            await recompute_order_total(self.uow, order_id)
            await self.uow.orders.delete(order)

        logger.info(f"🗑️ Order {order_id} deleted with {removed} items")

    async def _check_party(self, customer_id: Optional[int], client_id: Optional[int]) -> None:
        if customer_id is not None and await self.uow.customers.get(customer_id) is None:
            raise NotFoundError("Customer", customer_id)
        if client_id is not None and await self.uow.clients.get(client_id) is None:
            raise NotFoundError("Client", client_id)

    async def _check_product(self, product_id: int) -> None:
        if await self.uow.products.get(product_id) is None:
            raise NotFoundError("Product", product_id)
