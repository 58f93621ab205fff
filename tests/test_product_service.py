from datetime import date
from decimal import Decimal

import pytest

from stock_manager.exceptions import NotFoundError, ValidationError
from stock_manager.models.product import Unit
from stock_manager.schemas.product import ProductCreate, ProductUpdate
from stock_manager.schemas.product_history import ProductHistoryCreate
from stock_manager.services import ProductHistoryService, ProductService
from stock_manager.services.product_service import previous_week

# Wednesday; the week before starts on Monday 2025-06-02
TODAY = date(2025, 6, 11)
LAST_MONDAY = date(2025, 6, 2)


async def record(uow, product_id, week_start, unsold):
    return await ProductHistoryService(uow).create(ProductHistoryCreate(
        product_id=product_id,
        week_start_date=week_start,
        received_quantity=20,
        sold_quantity=20 - unsold,
        unsold_quantity=unsold,
        price=Decimal("1.20"),
    ))


@pytest.mark.parametrize("today", [
    date(2025, 6, 9),
    date(2025, 6, 11),
    date(2025, 6, 15),
])
def test_previous_week_spans_monday_to_sunday(today):
    assert previous_week(today) == (LAST_MONDAY, date(2025, 6, 8))


async def test_create_product_checks_references(uow, catalog):
    with pytest.raises(NotFoundError) as exc:
        await ProductService(uow).create(ProductCreate(
            name="Butter", unit=Unit.KG, category_id=catalog.category.id, producer_id=404,
        ))

    assert exc.value.entity == "Producer"


async def test_create_product_defaults_to_active(uow, catalog):
    product = await ProductService(uow).create(ProductCreate(
        name="Butter", unit=Unit.KG, category_id=catalog.category.id, producer_id=catalog.producer.id,
    ))

    assert product.is_active is True
    assert product.producer.name == "Quinta do Vale"


async def test_update_rejects_null_required_field(uow, catalog):
    with pytest.raises(ValidationError):
        await ProductService(uow).update(catalog.milk.id, ProductUpdate(category_id=None))


async def test_update_allows_clearing_optional_field(uow, catalog):
    service = ProductService(uow)
    await service.update(catalog.milk.id, ProductUpdate(description="Whole milk"))

    product = await service.update(catalog.milk.id, ProductUpdate(description=None))

    assert product.description is None


async def test_delete_product_removes_its_history(uow, catalog):
    await record(uow, catalog.milk.id, LAST_MONDAY, 3)
    await record(uow, catalog.milk.id, date(2025, 5, 26), 8)
    kept = await record(uow, catalog.cheese.id, LAST_MONDAY, 1)

    await ProductService(uow).delete(catalog.milk.id)

    assert catalog.milk.id not in uow.products.rows
    assert list(uow.product_history.rows) == [kept.id]


async def test_history_for_unknown_product_is_not_found(uow, catalog):
    with pytest.raises(NotFoundError):
        await record(uow, 999, LAST_MONDAY, 0)


async def test_low_stock_uses_last_week_records(uow, catalog):
    await record(uow, catalog.milk.id, LAST_MONDAY, 5)
    await record(uow, catalog.cheese.id, LAST_MONDAY, 6)

    products = await ProductService(uow).list_low_stock(threshold=5, today=TODAY)

    assert [p.id for p in products] == [catalog.milk.id]


async def test_low_stock_ignores_other_weeks(uow, catalog):
    await record(uow, catalog.milk.id, date(2025, 5, 26), 0)
    await record(uow, catalog.cheese.id, date(2025, 6, 9), 0)

    assert await ProductService(uow).list_low_stock(threshold=5, today=TODAY) == []


async def test_low_stock_skips_inactive_products(uow, catalog):
    await record(uow, catalog.milk.id, LAST_MONDAY, 0)
    await ProductService(uow).update(catalog.milk.id, ProductUpdate(is_active=False))

    assert await ProductService(uow).list_low_stock(threshold=5, today=TODAY) == []


async def test_low_stock_filters_by_category(uow, catalog):
    bakery = await uow.categories.add({"name": "Bakery"})
    await record(uow, catalog.milk.id, LAST_MONDAY, 2)

    service = ProductService(uow)
    assert await service.list_low_stock(5, today=TODAY, category_ids=[bakery.id]) == []
    assert [p.id for p in await service.list_low_stock(5, today=TODAY, category_ids=[catalog.category.id])] == [
        catalog.milk.id
    ]
