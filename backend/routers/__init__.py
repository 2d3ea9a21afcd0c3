from .reference import router as reference_router
from .survey import router as survey_router

__all__ = ["reference_router", "survey_router"]
