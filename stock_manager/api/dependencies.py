from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..config import Settings, settings
from ..database import get_db
from ..repositories import UnitOfWork, SqlAlchemyUnitOfWork
from ..services import (
    CategoryService,
    SubcategoryService,
    ProducerService,
    CustomerService,
    ClientService,
    ProductService,
    ProductHistoryService,
    OrderService,
    OrderItemService,
    UserService,
    AuthService,
)


def get_settings() -> Settings:
    """Dependency returning the application settings"""
    return settings


async def get_uow(db: AsyncSession = Depends(get_db)) -> UnitOfWork:
    """Dependency returning the unit of work of the request"""
    return SqlAlchemyUnitOfWork(db)


async def get_category_service(uow: UnitOfWork = Depends(get_uow)) -> CategoryService:
    return CategoryService(uow)


async def get_subcategory_service(uow: UnitOfWork = Depends(get_uow)) -> SubcategoryService:
    return SubcategoryService(uow)


async def get_producer_service(uow: UnitOfWork = Depends(get_uow)) -> ProducerService:
    return ProducerService(uow)


async def get_customer_service(uow: UnitOfWork = Depends(get_uow)) -> CustomerService:
    return CustomerService(uow)


async def get_client_service(uow: UnitOfWork = Depends(get_uow)) -> ClientService:
    return ClientService(uow)


async def get_product_service(uow: UnitOfWork = Depends(get_uow)) -> ProductService:
    return ProductService(uow)


async def get_product_history_service(uow: UnitOfWork = Depends(get_uow)) -> ProductHistoryService:
    return ProductHistoryService(uow)


async def get_order_service(uow: UnitOfWork = Depends(get_uow)) -> OrderService:
    return OrderService(uow)


async def get_order_item_service(uow: UnitOfWork = Depends(get_uow)) -> OrderItemService:
    return OrderItemService(uow)


async def get_user_service(
        uow: UnitOfWork = Depends(get_uow),
        app_settings: Settings = Depends(get_settings)
) -> UserService:
    return UserService(uow, app_settings)


async def get_auth_service(
        uow: UnitOfWork = Depends(get_uow),
        app_settings: Settings = Depends(get_settings)
) -> AuthService:
    return AuthService(uow, app_settings)
