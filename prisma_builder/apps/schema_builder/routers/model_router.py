"""Model router."""

from typing import Optional

from fastapi import APIRouter, status

from prisma_builder.core import exceptions
from prisma_builder.core.config import settings
from prisma_builder.core.bases.base_router import BaseRouter
from prisma_builder.core.response.handlers import exception_response, success_response
from prisma_builder.core.schemas.fields import (
    FieldCreate,
    FieldUpdate,
    ModelCreate,
    ModelRename,
    RenderRequest,
    ScalarType,
)
from prisma_builder.apps.schema_builder.services.model_service import ModelService
from prisma_builder.apps.schema_builder.repositories.model_repository import ModelRepository


def get_model_repository():
    """Get model repository instance."""
    return ModelRepository(max_items=settings.MAX_SESSIONS)


def get_model_service():
    """Get model service instance."""
    repository = get_model_repository()
    return ModelService(repository)


class ModelRouter(BaseRouter):
    """Model router class."""

    service: ModelService

    def __init__(self, service: Optional[ModelService] = None):
        super().__init__(
            service=service or get_model_service(),
            prefix="/models",
            tags=["Models"]
        )

    def _register_extra_routes(self) -> None:
        self._register_create()
        self._register_rename()
        self._register_add_field()
        self._register_update_field()
        self._register_remove_field()
        self._register_reset()
        self._register_schema()

    def _register_create(self) -> None:
        """Register POST / route."""
        @self.router.post(
            "",
            summary="Start an editing session",
            status_code=status.HTTP_201_CREATED,
        )
        async def create_session(payload: Optional[ModelCreate] = None):
            payload = payload or ModelCreate()
            result = await self.service.create_session(payload.name, payload.fields)
            return success_response(
                data=result["data"],
                message=result["message"],
                status_code=status.HTTP_201_CREATED
            )

    def _register_rename(self) -> None:
        """Register PUT /{session_id}/name route."""
        @self.router.put("/{session_id}/name", summary="Rename model")
        async def rename_model(session_id: str, payload: ModelRename):
            try:
                result = await self.service.rename_model(session_id, payload.name)
                return success_response(data=result["data"], message=result["message"])
            except exceptions.NotFoundException as e:
                return exception_response(e)

    def _register_add_field(self) -> None:
        """Register POST /{session_id}/fields route."""
        @self.router.post(
            "/{session_id}/fields",
            summary="Append a field",
            status_code=status.HTTP_201_CREATED,
        )
        async def add_field(session_id: str, payload: Optional[FieldCreate] = None):
            try:
                result = await self.service.add_field(session_id, payload)
                return success_response(
                    data=result["data"],
                    message=result["message"],
                    status_code=status.HTTP_201_CREATED
                )
            except exceptions.NotFoundException as e:
                return exception_response(e)

    def _register_update_field(self) -> None:
        """Register PATCH /{session_id}/fields/{field_id} route."""
        @self.router.patch(
            "/{session_id}/fields/{field_id}",
            summary="Merge attributes into a field",
        )
        async def update_field(session_id: str, field_id: str, payload: FieldUpdate):
            try:
                result = await self.service.update_field(session_id, field_id, payload)
                return success_response(data=result["data"], message=result["message"])
            except exceptions.NotFoundException as e:
                return exception_response(e)

    def _register_remove_field(self) -> None:
        """Register DELETE /{session_id}/fields/{field_id} route."""
        @self.router.delete(
            "/{session_id}/fields/{field_id}",
            summary="Remove a field",
        )
        async def remove_field(session_id: str, field_id: str):
            try:
                result = await self.service.remove_field(session_id, field_id)
                return success_response(data=result["data"], message=result["message"])
            except exceptions.NotFoundException as e:
                return exception_response(e)

    def _register_reset(self) -> None:
        """Register POST /{session_id}/reset route."""
        @self.router.post("/{session_id}/reset", summary="Reset model to defaults")
        async def reset_model(session_id: str):
            try:
                result = await self.service.reset_model(session_id)
                return success_response(data=result["data"], message=result["message"])
            except exceptions.NotFoundException as e:
                return exception_response(e)

    def _register_schema(self) -> None:
        """Register GET /{session_id}/schema route."""
        @self.router.get(
            "/{session_id}/schema",
            summary="Render the session model",
            responses={
                200: {"description": "Schema generated successfully"},
                404: {"description": "Session not found"},
                422: {"description": "Model name missing or no named field"},
            }
        )
        async def render_schema(session_id: str):
            try:
                result = await self.service.render_session(session_id)
                return success_response(data=result["data"], message=result["message"])
            except (exceptions.NotFoundException, exceptions.SchemaValidationException) as e:
                return exception_response(e)


def build_render_router(service: Optional[ModelService] = None) -> APIRouter:
    """Stateless routes: render a posted model, list scalar types."""
    service = service or get_model_service()
    router = APIRouter(tags=["Render"])

    @router.get("/types", summary="List scalar types")
    async def list_types():
        return success_response(
            data=[t.value for t in ScalarType],
            message="Types retrieved successfully"
        )

    @router.post("/render", summary="Render a model without a session")
    async def render(payload: RenderRequest):
        try:
            result = service.render_model(service.build_model(payload.name, payload.fields))
            return success_response(data=result["data"], message=result["message"])
        except exceptions.SchemaValidationException as e:
            return exception_response(e)

    return router


# Router instances
router = ModelRouter().get_router()
render_router = build_render_router()
