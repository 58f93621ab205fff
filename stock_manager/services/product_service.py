import logging
from datetime import date, timedelta
from typing import Any, Iterable, List, Optional, Tuple

from ..models.product import Product
from .crud import CrudService

logger = logging.getLogger(__name__)


def previous_week(today: date) -> Tuple[date, date]:
    """Monday and Sunday of the ISO week before the one containing ``today``"""
    monday = today - timedelta(days=today.weekday(), weeks=1)
    return monday, monday + timedelta(days=6)


class ProductService(CrudService):
    repository_name = "products"
    entity_name = "Product"
    non_nullable = ("name", "unit", "category_id", "producer_id", "is_active")
    references = {
        "category_id": ("categories", "Category"),
        "subcategory_id": ("subcategories", "Subcategory"),
        "producer_id": ("producers", "Producer"),
    }

    async def _before_delete(self, entity: Any) -> None:
        removed = await self.uow.product_history.delete_for_product(entity.id)
        if removed:
            logger.info(f"🗑️ Removed {removed} history records of product {entity.id}")

    async def list_low_stock(
            self,
            threshold: int,
            today: Optional[date] = None,
            category_ids: Optional[Iterable[int]] = None
    ) -> List[Product]:
        """Active products whose last week's record shows at most ``threshold`` unsold units"""
        start, end = previous_week(today or date.today())
        histories = await self.uow.product_history.list_between(start, end)
        low_ids = {h.product_id for h in histories if h.unsold_quantity <= threshold}

        categories = set(category_ids) if category_ids else None
        products = await self.uow.products.list_active()
        return [
            p for p in products
            if p.id in low_ids and (categories is None or p.category_id in categories)
        ]
