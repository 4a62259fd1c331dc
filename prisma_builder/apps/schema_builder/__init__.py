"""Schema builder app."""

from .routers.model_router import router as model_router
from .routers.model_router import render_router
