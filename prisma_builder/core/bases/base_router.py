from typing import Callable, List, Optional

from fastapi import APIRouter, status

from prisma_builder.core import exceptions
from prisma_builder.core.bases.base_service import BaseService
from prisma_builder.core.response.handlers import (
    error_response,
    exception_response,
    success_response,
)


class BaseRouter:
    """Base router class with the session endpoints every app shares.

    Subclasses add their own routes in ``_register_extra_routes``.
    """

    def __init__(
        self,
        service: BaseService,
        tags: Optional[List[str]] = None,
        prefix: str = "",
        dependencies: Optional[List[Callable]] = None
    ):
        self.service = service
        self.tags = tags or [self.__class__.__name__.replace("Router", "")]
        self.prefix = prefix

        # Create router
        self.router = APIRouter(
            prefix=self.prefix,
            tags=self.tags, #type:ignore
            dependencies=dependencies or [] #type:ignore
        )

        # Register routes
        self._register_routes()

    def _register_routes(self) -> None:
        """Register all session routes."""
        self._register_extra_routes()
        self._register_get_by_id()
        self._register_delete()

    def _register_extra_routes(self) -> None:
        """Hook for app specific routes; registered before the generic ones."""

    def _register_get_by_id(self) -> None:
        """Register GET /{session_id} route."""
        @self.router.get(
            "/{session_id}",
            summary="Get session item",
            responses={
                200: {"description": "Item retrieved successfully"},
                404: {"description": "Session not found"},
            }
        )
        async def get_by_id(session_id: str):
            try:
                result = await self.service.get_by_id(session_id)
                return success_response(
                    data=result["data"],
                    message=result["message"]
                )
            except exceptions.NotFoundException as e:
                return exception_response(e)

    def _register_delete(self) -> None:
        """Register DELETE /{session_id} route."""
        @self.router.delete(
            "/{session_id}",
            summary="Discard session",
            responses={
                200: {"description": "Session deleted successfully"},
                404: {"description": "Session not found"},
            }
        )
        async def delete_session(session_id: str):
            try:
                result = await self.service.delete(session_id)
                return success_response(message=result["message"])
            except exceptions.NotFoundException as e:
                return exception_response(e)
            except exceptions.ServiceException as e:
                return error_response(
                    error_code="SERVICE_ERROR",
                    message=str(e.detail),
                    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
                )

    def get_router(self) -> APIRouter:
        """Get the configured router."""
        return self.router
