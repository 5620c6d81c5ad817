"""Build Orchestrator - 빌드 상태 머신"""

from .builder import BuildOrchestrator, get_orchestrator
from .config import OrchestratorConfig, default_config
from .router import route_after_execution, route_after_query
from .state import BuildState, create_initial_state

__all__ = [
    "BuildOrchestrator",
    "get_orchestrator",
    "OrchestratorConfig",
    "default_config",
    "route_after_execution",
    "route_after_query",
    "BuildState",
    "create_initial_state",
]
