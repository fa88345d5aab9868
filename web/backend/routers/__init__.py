"""API route handlers."""

from .niches import router as niches_router
from .weights import router as weights_router
from .filters import router as filters_router
from .export import router as export_router
