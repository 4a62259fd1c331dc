"""Model repository."""

from prisma_builder.core.bases.base_repository import BaseRepository
from prisma_builder.core.schemas.fields import PrismaModel


class ModelRepository(BaseRepository[PrismaModel]):
    """Holds the model being edited in each session."""
