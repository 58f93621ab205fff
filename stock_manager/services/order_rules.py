"""Rules that keep an order consistent.

* An order belongs to exactly one party: a customer or a client.
* ``Order.total_amount`` is the sum of ``quantity * unit_price`` over the
  items of the order. It is never maintained incrementally: every call to
  :func:`recompute_order_total` re-reads all items, so repeated calls are
  idempotent and any drift is repaired by the next item mutation.
"""

import logging
from decimal import Decimal
from typing import Any, Dict, Iterable, Optional, Tuple

from ..exceptions import InvalidOrderPartyError, NotFoundError
from ..repositories import UnitOfWork

logger = logging.getLogger(__name__)


class _Unset:
    """Marks a field absent from an update payload, as opposed to null"""

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()


def validate_order_party(customer_id: Any = UNSET, client_id: Any = UNSET, is_update: bool = False) -> None:
    """Check the customer / client pair of a create or update payload.

    On create both missing and both present are rejected. On update only
    the payload is checked here: both present, or both explicitly null.
    """
    has_customer = customer_id is not UNSET and customer_id is not None
    has_client = client_id is not UNSET and client_id is not None

    if has_customer and has_client:
        raise InvalidOrderPartyError()

    if is_update:
        if customer_id is None and client_id is None:
            raise InvalidOrderPartyError()
    elif not has_customer and not has_client:
        raise InvalidOrderPartyError()


def merge_order_party(
        current_customer_id: Optional[int],
        current_client_id: Optional[int],
        changes: Dict[str, Any]
) -> Tuple[Optional[int], Optional[int]]:
    """Party of an order once ``changes`` is applied.

    Attaching one party detaches the other. The merged result must still
    name exactly one party.
    """
    customer_id = changes.get("customer_id", current_customer_id)
    client_id = changes.get("client_id", current_client_id)

    if changes.get("customer_id") is not None and "client_id" not in changes:
        client_id = None
    if changes.get("client_id") is not None and "customer_id" not in changes:
        customer_id = None

    if (customer_id is None) == (client_id is None):
        raise InvalidOrderPartyError()
    return customer_id, client_id


def _as_decimal(value: Any) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def compute_order_total(items: Iterable[Any]) -> Decimal:
    return sum(
        (_as_decimal(item.quantity) * _as_decimal(item.unit_price) for item in items),
        Decimal("0"),
    )


async def recompute_order_total(uow: UnitOfWork, order_id: int) -> Decimal:
    """Re-derive and store the total of an order from its items"""
    items = await uow.order_items.list_for_order(order_id)
    total = compute_order_total(items)

    order = await uow.orders.get(order_id)
    if order is None:
        raise NotFoundError("Order", order_id)
    await uow.orders.update(order, {"total_amount": total})

    logger.info(f"🧮 Order {order_id} total recomputed: {total} ({len(items)} items)")
    return total
