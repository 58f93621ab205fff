from datetime import datetime, timezone
from decimal import Decimal

import pytest

from stock_manager.exceptions import InvalidOrderPartyError, NotFoundError, ValidationError
from stock_manager.models.order import OrderStatus
from stock_manager.schemas.order import OrderCreate, OrderUpdate
from stock_manager.services import OrderItemService, OrderService


def order_payload(catalog, **overrides):
    payload = {
        "customerId": catalog.customer.id,
        "orderItems": [
            {"productId": catalog.milk.id, "quantity": 2, "unitPrice": "10.00"},
            {"productId": catalog.cheese.id, "quantity": 1, "unitPrice": "5.50"},
        ],
    }
    payload.update(overrides)
    return OrderCreate.model_validate(payload)


async def test_create_order_derives_total_from_items(uow, catalog):
    order = await OrderService(uow).create(order_payload(catalog))

    assert order.total_amount == Decimal("25.50")
    assert order.customer_id == catalog.customer.id
    assert order.client_id is None
    assert len(order.order_items) == 2
    assert order.status == OrderStatus.PENDING


async def test_create_order_ignores_client_sent_total(uow, catalog):
    order = await OrderService(uow).create(order_payload(catalog, totalAmount="1.00"))

    assert order.total_amount == Decimal("25.50")


async def test_create_order_without_items_has_zero_total(uow, catalog):
    order = await OrderService(uow).create(order_payload(catalog, orderItems=[]))

    assert order.total_amount == Decimal("0")
    assert order.order_items == []


async def test_create_order_keeps_given_date_and_status(uow, catalog):
    when = datetime(2025, 3, 14, 9, 30, tzinfo=timezone.utc)
    order = await OrderService(uow).create(
        order_payload(catalog, orderDate=when.isoformat(), status="PREPARED")
    )

    assert order.order_date == when
    assert order.status == OrderStatus.PREPARED


async def test_create_order_with_both_parties_writes_nothing(uow, catalog):
    commits = uow.commits

    with pytest.raises(InvalidOrderPartyError):
        await OrderService(uow).create(order_payload(catalog, clientId=catalog.client.id))

    assert uow.orders.rows == {}
    assert uow.order_items.rows == {}
    assert uow.commits == commits
    assert uow.rollbacks == 1


async def test_create_order_without_party_is_rejected(uow, catalog):
    with pytest.raises(InvalidOrderPartyError):
        await OrderService(uow).create(order_payload(catalog, customerId=None))


async def test_create_order_for_unknown_customer_is_not_found(uow, catalog):
    with pytest.raises(NotFoundError):
        await OrderService(uow).create(order_payload(catalog, customerId=999))

    assert uow.orders.rows == {}


async def test_create_order_with_unknown_product_writes_nothing(uow, catalog):
    payload = order_payload(catalog, orderItems=[
        {"productId": catalog.milk.id, "quantity": 1, "unitPrice": "1.00"},
        {"productId": 999, "quantity": 1, "unitPrice": "1.00"},
    ])

    with pytest.raises(NotFoundError):
        await OrderService(uow).create(payload)

    assert uow.orders.rows == {}
    assert uow.order_items.rows == {}


async def test_deleting_an_item_recomputes_the_total(uow, catalog):
    order = await OrderService(uow).create(order_payload(catalog))
    first_id, second_id = [item.id for item in order.order_items]

    await OrderItemService(uow).delete(first_id)

    refreshed = await OrderService(uow).get(order.id)
    assert refreshed.total_amount == Decimal("5.50")
    assert [item.id for item in refreshed.order_items] == [second_id]


async def test_update_moves_order_from_customer_to_client(uow, catalog):
    service = OrderService(uow)
    order = await service.create(order_payload(catalog))

    updated = await service.update(order.id, OrderUpdate(client_id=catalog.client.id))

    assert updated.client_id == catalog.client.id
    assert updated.customer_id is None


async def test_update_with_both_parties_is_rejected(uow, catalog):
    service = OrderService(uow)
    order = await service.create(order_payload(catalog))

    with pytest.raises(InvalidOrderPartyError):
        await service.update(
            order.id,
            OrderUpdate(customer_id=catalog.customer.id, client_id=catalog.client.id),
        )


async def test_update_nulling_the_only_party_is_rejected(uow, catalog):
    service = OrderService(uow)
    order = await service.create(order_payload(catalog))

    with pytest.raises(InvalidOrderPartyError):
        await service.update(order.id, OrderUpdate(customer_id=None))

    assert (await service.get(order.id)).customer_id == catalog.customer.id


async def test_update_status_keeps_party_and_total(uow, catalog):
    service = OrderService(uow)
    order = await service.create(order_payload(catalog))

    updated = await service.update(
        order.id,
        OrderUpdate(status=OrderStatus.COMPLETED, total_amount=Decimal("1.00")),
    )

    assert updated.status == OrderStatus.COMPLETED
    assert updated.customer_id == catalog.customer.id
    assert updated.total_amount == Decimal("25.50")


async def test_update_rejects_null_status(uow, catalog):
    service = OrderService(uow)
    order = await service.create(order_payload(catalog))

    with pytest.raises(ValidationError):
        await service.update(order.id, OrderUpdate(status=None))


async def test_update_missing_order_is_not_found(uow, catalog):
    with pytest.raises(NotFoundError):
        await OrderService(uow).update(404, OrderUpdate(status=OrderStatus.CANCELLED))


async def test_delete_order_removes_its_items(uow, catalog):
    service = OrderService(uow)
    order = await service.create(order_payload(catalog))
    other = await service.create(order_payload(catalog))

    await service.delete(order.id)

    assert order.id not in uow.orders.rows
    assert all(item.order_id == other.id for item in uow.order_items.rows.values())
    assert len(uow.order_items.rows) == 2


async def test_delete_missing_order_is_not_found(uow):
    with pytest.raises(NotFoundError):
        await OrderService(uow).delete(1)


async def test_each_operation_commits_once(uow, catalog):
    service = OrderService(uow)
    commits = uow.commits

    order = await service.create(order_payload(catalog))
    await service.update(order.id, OrderUpdate(status=OrderStatus.PREPARED))
    await service.delete(order.id)

    assert uow.commits == commits + 3
