"""Student focus tracking package."""
from .schemas import StudentState, InterventionState
from .service import FocusService, evaluate_checkin
from .router import router as students_router

__all__ = [
    'StudentState',
    'InterventionState',
    'FocusService',
    'evaluate_checkin',
    'students_router',
]
