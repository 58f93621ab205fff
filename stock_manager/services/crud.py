import logging
from typing import Any, Dict, List, Tuple

from pydantic import BaseModel

from ..exceptions import NotFoundError, ValidationError
from ..repositories import Repository
from .base import BaseService

logger = logging.getLogger(__name__)


class CrudService(BaseService):
    """create / list / get / update / delete over one repository.

    Subclasses name the repository of the unit of work they work on, the
    columns that may not be set to null, and the foreign keys that must
    point to an existing row before anything is written.
    """

    repository_name: str = ""
    entity_name: str = ""
    non_nullable: Tuple[str, ...] = ()
    # field -> (repository name, entity name)
    references: Dict[str, Tuple[str, str]] = {}

    @property
    def repository(self) -> Repository:
        return getattr(self.uow, self.repository_name)

    async def list(self) -> List[Any]:
        return await self.repository.list()

    async def get(self, entity_id: int) -> Any:
        entity = await self.repository.get(entity_id)
        if entity is None:
            raise NotFoundError(self.entity_name, entity_id)
        return entity

    async def create(self, data: BaseModel) -> Any:
        async with self.transaction(f"create {self.entity_name}"):
            values = await self._prepare_create(data.model_dump())
            await self._check_references(values)
            entity = await self.repository.add(values)

        logger.info(f"✅ {self.entity_name} {entity.id} created")
        return entity

    async def update(self, entity_id: int, data: BaseModel) -> Any:
        async with self.transaction(f"update {self.entity_name} {entity_id}"):
            values = data.model_dump(exclude_unset=True)
            self._reject_nulls(values)
            entity = await self.get(entity_id)
            values = await self._prepare_update(entity, values)
            await self._check_references(values)
            entity = await self.repository.update(entity, values)

        logger.info(f"✅ {self.entity_name} {entity_id} updated")
        return entity

    async def delete(self, entity_id: int) -> None:
        async with self.transaction(f"delete {self.entity_name} {entity_id}"):
            entity = await self.get(entity_id)
            await self._before_delete(entity)
            await self.repository.delete(entity)

        logger.info(f"🗑️ {self.entity_name} {entity_id} deleted")

    # Hooks

    async def _prepare_create(self, values: Dict[str, Any]) -> Dict[str, Any]:
        return values

    async def _prepare_update(self, entity: Any, values: Dict[str, Any]) -> Dict[str, Any]:
        return values

    async def _before_delete(self, entity: Any) -> None:
        pass

    # Checks

    def _reject_nulls(self, values: Dict[str, Any]) -> None:
        for field in self.non_nullable:
            if field in values and values[field] is None:
                raise ValidationError(f"{field} cannot be null")

    async def _check_references(self, values: Dict[str, Any]) -> None:
        for field, (repository_name, entity_name) in self.references.items():
            referenced_id = values.get(field)
            if referenced_id is None:
                continue
            repository = getattr(self.uow, repository_name)
            if await repository.get(referenced_id) is None:
                raise NotFoundError(entity_name, referenced_id)
