"""Model service."""

import logging
from typing import Any, Dict, List, Optional

from prisma_builder.core.bases.base_service import BaseService
from prisma_builder.core.schemas.fields import (
    FieldCreate,
    FieldUpdate,
    PrismaModel,
    SchemaResponse,
    SessionResponse,
)
from prisma_builder.core.services.field_service import FieldService
from prisma_builder.core.services.schema_renderer import SchemaRenderer
from prisma_builder.apps.schema_builder.repositories.model_repository import ModelRepository

logger = logging.getLogger(__name__)


class ModelService(BaseService[PrismaModel]):
    """Apply model store operations to session models and render them."""

    entity_name = "Model"

    def __init__(self, repository: ModelRepository):
        super().__init__(repository)

    def _session_payload(self, item_id: str, item: PrismaModel) -> Any:
        return SessionResponse(session_id=item_id, model=item)

    async def create_session(
        self, name: str = "", fields: Optional[List[FieldCreate]] = None
    ) -> Dict[str, Any]:
        field_attrs = None if fields is None else [f.changes() for f in fields]
        return await self.create(FieldService.create_model(name, field_attrs))

    async def rename_model(self, session_id: str, name: str) -> Dict[str, Any]:
        return await self._apply(
            session_id, FieldService.rename_model, "Model renamed successfully", name
        )

    async def add_field(
        self, session_id: str, field: Optional[FieldCreate] = None
    ) -> Dict[str, Any]:
        attrs = field.changes() if field else {}
        return await self._apply(
            session_id,
            lambda model: FieldService.add_field(model, **attrs),
            "Field added successfully",
        )

    async def update_field(
        self, session_id: str, field_id: str, updates: FieldUpdate
    ) -> Dict[str, Any]:
        return await self._apply(
            session_id,
            FieldService.update_field,
            "Field updated successfully",
            field_id,
            updates,
        )

    async def remove_field(self, session_id: str, field_id: str) -> Dict[str, Any]:
        return await self._apply(
            session_id,
            FieldService.remove_field,
            "Field removed successfully",
            field_id,
        )

    async def reset_model(self, session_id: str) -> Dict[str, Any]:
        return await self._apply(
            session_id,
            lambda model: FieldService.reset_model(),
            "Model reset successfully",
        )

    async def render_session(self, session_id: str) -> Dict[str, Any]:
        model = await self._get_or_404(session_id)
        return self.render_model(model)

    def render_model(self, model: PrismaModel) -> Dict[str, Any]:
        """Render a model snapshot; raises SchemaValidationException."""
        schema = SchemaRenderer.render(model)
        logger.info("Rendered schema for model %s", model.name.strip())
        return self._result(
            SchemaResponse(name=model.name.strip(), schema_text=schema),
            "Schema generated successfully",
        )

    def build_model(self, name: str, fields: List[FieldCreate]) -> PrismaModel:
        return FieldService.create_model(name, [f.changes() for f in fields])
