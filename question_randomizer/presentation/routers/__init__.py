"""HTTP routers (system endpoints and the versioned API)."""

from question_randomizer.presentation.routers.system import system_router

__all__ = ["system_router"]
