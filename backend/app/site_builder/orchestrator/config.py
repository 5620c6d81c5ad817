"""Orchestrator Configuration

Graph 설정 및 빌드 제한값
"""

from dataclasses import dataclass, field

from backend.app.core.config import settings


@dataclass
class OrchestratorConfig:
    """오케스트레이터 설정"""

    # Model rounds (1 = 단일 배치, 재계획 없음)
    max_model_rounds: int = field(default_factory=lambda: settings.MAX_MODEL_ROUNDS)

    # 각 결과를 모델에 보고 (응답은 실행을 제어하지 않음)
    report_tool_results: bool = field(default_factory=lambda: settings.LLM_REPORT_TOOL_RESULTS)

    # Prompt validation
    max_prompt_length: int = field(default_factory=lambda: settings.MAX_PROMPT_LENGTH)

    # Node names
    node_create_project: str = "create_project"
    node_query_model: str = "query_model"
    node_execute_actions: str = "execute_actions"
    node_finalize: str = "finalize"

    @property
    def recursion_limit(self) -> int:
        # create + (query + execute) per round + finalize, with headroom
        return 2 * self.max_model_rounds + 5


# Default config singleton
default_config = OrchestratorConfig()
