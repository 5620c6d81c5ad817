"""BuildState Definition

LangGraph StateGraph에서 사용되는 빌드 1건의 상태 컨테이너
TypedDict 기반 (Pydantic BaseModel 아님)
"""

from typing import Annotated, Any, Optional

from typing_extensions import TypedDict

from backend.app.site_builder.models import BuildPhase, ExecutionRecord, ModelReply, ProjectContext


def records_reducer(
    existing: Optional[list[ExecutionRecord]],
    updates: Optional[list[ExecutionRecord]],
) -> list[ExecutionRecord]:
    """실행 기록은 append-only"""
    return (existing or []) + (updates or [])


def trace_reducer(existing: Optional[list[str]], updates: Optional[list[str]]) -> list[str]:
    return (existing or []) + (updates or [])


class BuildState(TypedDict, total=False):
    """빌드 상태

    Attributes:
        user_prompt: 검증된 사용자 프롬프트
        context: 이 빌드가 소유한 프로젝트 컨텍스트
        messages: 모델과의 대화 (라운드마다 갱신)
        last_reply: 가장 최근 모델 응답
        message: 사용자에게 돌려줄 모델 메시지
        round: 지금까지의 모델 호출 횟수
        execution_results: (tool, args, result) 기록 (append-only)
        has_index_file: 프로젝트 루트 index.html 존재 여부
        preview_url: 미리보기 URL (index.html이 있을 때만)
        phase: 현재 상태 머신 단계
        trace: 지나온 단계 목록
    """

    # ─── Input ───
    user_prompt: str

    # ─── Project ───
    context: ProjectContext

    # ─── Model ───
    messages: list[dict[str, Any]]
    last_reply: ModelReply
    message: Optional[str]
    round: int

    # ─── Execution ───
    execution_results: Annotated[list[ExecutionRecord], records_reducer]

    # ─── Output ───
    has_index_file: bool
    preview_url: Optional[str]

    # ─── Control ───
    phase: BuildPhase
    trace: Annotated[list[str], trace_reducer]


def create_initial_state(user_prompt: str) -> BuildState:
    """초기 상태 생성"""
    return BuildState(
        user_prompt=user_prompt,
        messages=[],
        message=None,
        round=0,
        execution_results=[],
        has_index_file=False,
        preview_url=None,
        phase=BuildPhase.IDLE,
        trace=[BuildPhase.IDLE.value],
    )
