import logging
from typing import Any, Callable, Dict, Generic, TypeVar

from pydantic import BaseModel

from prisma_builder.core import exceptions
from prisma_builder.core.bases.base_repository import BaseRepository, RepositoryError

T = TypeVar("T", bound=BaseModel)

logger = logging.getLogger(__name__)


class BaseService(Generic[T]):
    """Session bookkeeping shared by services built on a BaseRepository.

    Public methods return ``{"data": ..., "message": ...}`` dicts that routers
    pass straight into ``success_response``.
    """

    entity_name: str = "Item"

    def __init__(self, repository: BaseRepository[T]):
        self.repository = repository

    def _result(self, data: Any, message: str) -> Dict[str, Any]:
        return {"data": data, "message": message}

    def _session_payload(self, item_id: str, item: T) -> Any:
        return {"session_id": item_id, "item": item}

    async def _get_or_404(self, item_id: str) -> T:
        item = await self.repository.get(item_id)
        if item is None:
            raise exceptions.NotFoundException(
                f"{self.entity_name} session {item_id} not found", target="session_id"
            )
        return item

    async def _save(self, item_id: str, item: T) -> T:
        try:
            return await self.repository.save(item_id, item)
        except RepositoryError as e:
            raise exceptions.ServiceException(str(e)) from e

    async def create(self, item: T) -> Dict[str, Any]:
        item_id = await self.repository.create(item)
        logger.info("Created %s session %s", self.entity_name.lower(), item_id)
        return self._result(
            self._session_payload(item_id, item),
            f"{self.entity_name} session created successfully",
        )

    async def get_by_id(self, item_id: str) -> Dict[str, Any]:
        item = await self._get_or_404(item_id)
        return self._result(item, f"{self.entity_name} retrieved successfully")

    async def delete(self, item_id: str) -> Dict[str, Any]:
        if not await self.repository.delete(item_id):
            raise exceptions.NotFoundException(
                f"{self.entity_name} session {item_id} not found", target="session_id"
            )
        logger.info("Deleted %s session %s", self.entity_name.lower(), item_id)
        return self._result(None, f"{self.entity_name} session deleted successfully")

    async def _apply(
        self, item_id: str, operation: Callable[..., T], message: str, *args: Any
    ) -> Dict[str, Any]:
        """Run ``operation(item, *args)`` under the session lock and store the result."""
        async with self.repository.locked(item_id) as item:
            if item is None:
                raise exceptions.NotFoundException(
                    f"{self.entity_name} session {item_id} not found",
                    target="session_id",
                )
            updated = operation(item, *args)
            await self._save(item_id, updated)
        return self._result(updated, message)
