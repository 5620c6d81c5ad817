"""Router - 라우팅 로직

query_model 이후: 요청된 액션이 있으면 execute_actions, 없으면 finalize
execute_actions 이후: 라운드가 남았으면 query_model, 아니면 finalize
"""

from typing import Literal

from backend.app.core.logging import get_logger
from backend.app.site_builder.orchestrator.state import BuildState

logger = get_logger(__name__)


def route_after_query(state: BuildState) -> Literal["execute_actions", "finalize"]:
    reply = state.get("last_reply")
    if reply is not None and reply.tool_calls:
        return "execute_actions"

    logger.info("[router] Model requested no actions - finalizing")
    return "finalize"


def route_after_execution(
    state: BuildState,
    max_rounds: int = 1,
) -> Literal["query_model", "finalize"]:
    """라운드 제한 안에서만 모델을 다시 호출한다"""
    rounds = state.get("round", 0)

    if rounds < max_rounds:
        logger.info("[router] Re-planning", round=rounds + 1, max_rounds=max_rounds)
        return "query_model"

    return "finalize"
