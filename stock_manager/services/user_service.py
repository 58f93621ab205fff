from typing import Any, Dict

from ..config import Settings
from ..exceptions import ValidationError
from ..repositories import UnitOfWork
from .crud import CrudService
from .security import hash_password


class UserService(CrudService):
    repository_name = "users"
    entity_name = "User"
    non_nullable = ("name", "email", "password")

    def __init__(self, uow: UnitOfWork, settings: Settings):
        super().__init__(uow)
        self.settings = settings

    async def _prepare_create(self, values: Dict[str, Any]) -> Dict[str, Any]:
        await self._check_email_free(values["email"])
        values["password"] = hash_password(values["password"], self.settings.bcrypt_rounds)
        return values

    async def _prepare_update(self, entity: Any, values: Dict[str, Any]) -> Dict[str, Any]:
        if "email" in values and values["email"] != entity.email:
            await self._check_email_free(values["email"])
        if values.get("password"):
            values["password"] = hash_password(values["password"], self.settings.bcrypt_rounds)
        return values

    async def _check_email_free(self, email: str) -> None:
        if await self.uow.users.get_by_email(email) is not None:
            raise ValidationError(f"Email {email} is already registered")
