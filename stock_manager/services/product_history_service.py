from .crud import CrudService


class ProductHistoryService(CrudService):
    repository_name = "product_history"
    entity_name = "ProductHistory"
    non_nullable = (
        "product_id",
        "week_start_date",
        "received_quantity",
        "sold_quantity",
        "unsold_quantity",
    )
    references = {"product_id": ("products", "Product")}
