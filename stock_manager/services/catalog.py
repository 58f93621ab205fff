"""Services of the product catalogue: categories, subcategories, producers"""

from .crud import CrudService


class CategoryService(CrudService):
    repository_name = "categories"
    entity_name = "Category"
    non_nullable = ("name",)


class SubcategoryService(CrudService):
    repository_name = "subcategories"
    entity_name = "Subcategory"
    non_nullable = ("name", "category_id")
    references = {"category_id": ("categories", "Category")}


class ProducerService(CrudService):
    repository_name = "producers"
    entity_name = "Producer"
    non_nullable = ("name",)
