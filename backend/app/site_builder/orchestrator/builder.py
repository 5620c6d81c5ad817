"""Build Orchestrator

LangGraph StateGraph로 구성된 빌드 상태 머신

    START → create_project → query_model ─┬→ execute_actions ─┬→ finalize → END
                                ▲          │                   │
                                │          └→ finalize         │
                                └──────────────────────────────┘ (round < max_model_rounds)

활성 프로젝트는 그래프 상태(ProjectContext)에 담겨 요청마다 독립적이다.
같은 인스턴스로 여러 빌드를 동시에 실행해도 서로의 디렉토리를 건드리지 않는다.
"""

import time
from functools import partial
from typing import Any, Optional

from langgraph.graph import END, START, StateGraph
from langgraph.graph.state import CompiledStateGraph

from backend.app.core.errors import BuilderError, BuildFailedError, ErrorCode, UpstreamError
from backend.app.core.logging import clear_log_context, get_logger, log_context
from backend.app.site_builder.llm_manager import LLMClient, format_build_messages, get_llm_client
from backend.app.site_builder.llm_manager.client import tool_result_message
from backend.app.site_builder.models import (
    BuildPhase,
    BuildResponse,
    BuildStats,
    ExecutionRecord,
    ModelReply,
    ToolCall,
    format_elapsed,
    utc_now_iso,
)
from backend.app.site_builder.orchestrator.config import OrchestratorConfig, default_config
from backend.app.site_builder.orchestrator.router import route_after_execution, route_after_query
from backend.app.site_builder.orchestrator.state import BuildState, create_initial_state
from backend.app.site_builder.projects import ProjectStore, get_project_store
from backend.app.site_builder.tools import ActionExecutor, openai_tools, printable, validate_prompt

logger = get_logger(__name__)


def _elapsed_ms(started: float) -> int:
    return int((time.perf_counter() - started) * 1000)


def _bind_project(state: BuildState) -> None:
    # nodes may run in their own task context
    context = state.get("context")
    if context is not None:
        log_context(project_id=context.project_id)


class BuildOrchestrator:
    """프롬프트 → 모델 호출 → 액션 실행 → BuildResponse

    Args:
        llm_client: 모델 클라이언트
        store: 프로젝트 저장소
        executor: 액션 실행기
        config: 오케스트레이터 설정
    """

    def __init__(
        self,
        llm_client: LLMClient,
        store: ProjectStore,
        executor: Optional[ActionExecutor] = None,
        config: OrchestratorConfig = default_config,
    ):
        self.llm_client = llm_client
        self.store = store
        self.executor = executor or ActionExecutor()
        self.config = config
        self.graph: CompiledStateGraph = self.build_graph().compile()

    # ------------------------------------------------------------------
    # Graph
    # ------------------------------------------------------------------

    def build_graph(self) -> StateGraph:
        """StateGraph 빌드 (컴파일 전)"""
        config = self.config
        graph = StateGraph(BuildState)

        graph.add_node(config.node_create_project, self.create_project_node)
        graph.add_node(config.node_query_model, self.query_model_node)
        graph.add_node(config.node_execute_actions, self.execute_actions_node)
        graph.add_node(config.node_finalize, self.finalize_node)

        graph.add_edge(START, config.node_create_project)
        graph.add_edge(config.node_create_project, config.node_query_model)

        graph.add_conditional_edges(
            config.node_query_model,
            route_after_query,
            {
                "execute_actions": config.node_execute_actions,
                "finalize": config.node_finalize,
            },
        )

        graph.add_conditional_edges(
            config.node_execute_actions,
            partial(route_after_execution, max_rounds=config.max_model_rounds),
            {
                "query_model": config.node_query_model,
                "finalize": config.node_finalize,
            },
        )

        graph.add_edge(config.node_finalize, END)
        return graph

    # ------------------------------------------------------------------
    # Nodes
    # ------------------------------------------------------------------

    async def create_project_node(self, state: BuildState) -> dict[str, Any]:
        context = self.store.create()
        log_context(project_id=context.project_id)

        return {
            "context": context,
            "messages": format_build_messages(state["user_prompt"]),
            "phase": BuildPhase.PROJECT_CREATED,
            "trace": [BuildPhase.PROJECT_CREATED.value],
        }

    async def query_model_node(self, state: BuildState) -> dict[str, Any]:
        _bind_project(state)
        reply = await self.llm_client.complete(state["messages"], tools=openai_tools())
        rounds = state.get("round", 0) + 1

        logger.info("Model queried", round=rounds, tool_calls=len(reply.tool_calls))

        return {
            "last_reply": reply,
            "message": reply.content if reply.content else state.get("message"),
            "round": rounds,
            "phase": BuildPhase.MODEL_QUERIED,
            "trace": [BuildPhase.MODEL_QUERIED.value],
        }

    async def execute_actions_node(self, state: BuildState) -> dict[str, Any]:
        """요청된 액션을 받은 순서대로 실행

        한 액션의 실패가 다른 액션을 막거나 취소하지 않는다.
        """
        _bind_project(state)
        context = state["context"]
        reply = state["last_reply"]
        messages = state["messages"]

        logger.info("Executing tool calls", count=len(reply.tool_calls))

        records: list[ExecutionRecord] = []
        tool_messages: list[dict[str, Any]] = []
        for call in reply.tool_calls:
            record = await self.executor.execute(context, call)
            records.append(record)
            tool_messages.append(tool_result_message(call, record.result))

            if self.config.report_tool_results:
                await self._report(messages, reply, call, record)

        return {
            "execution_results": records,
            "messages": messages + [reply.to_assistant_message()] + tool_messages,
            "phase": BuildPhase.EXECUTING_ACTIONS,
            "trace": [BuildPhase.EXECUTING_ACTIONS.value],
        }

    async def finalize_node(self, state: BuildState) -> dict[str, Any]:
        _bind_project(state)
        project_id = state["context"].project_id
        has_index = self.store.has_index(project_id)
        preview_url = self.store.preview_url(project_id) if has_index else None

        return {
            "has_index_file": has_index,
            "preview_url": preview_url,
            "phase": BuildPhase.COMPLETED,
            "trace": [BuildPhase.COMPLETED.value],
        }

    async def _report(
        self,
        messages: list[dict[str, Any]],
        reply: ModelReply,
        call: ToolCall,
        record: ExecutionRecord,
    ) -> None:
        try:
            await self.llm_client.report_tool_result(messages, reply, call, record.result)
        except UpstreamError as e:
            # the follow-up reply never gates execution
            logger.warning("Tool result report failed", tool=call.name, error=e.message)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def build(self, user_prompt: object) -> BuildResponse:
        """웹사이트 빌드 1건 실행

        Args:
            user_prompt: 사용자 프롬프트

        Returns:
            BuildResponse

        Raises:
            ValidationError: 프롬프트 검증 실패 (프로젝트 생성 전)
            BuildFailedError: 프로젝트 생성 이후 단계 실패
        """
        started = time.perf_counter()
        prompt = validate_prompt(user_prompt, self.config.max_prompt_length)

        logger.info("Build started", prompt_preview=prompt[:100], prompt_length=len(prompt))

        state: BuildState = create_initial_state(prompt)
        try:
            async for snapshot in self.graph.astream(
                state,
                config={"recursion_limit": self.config.recursion_limit},
                stream_mode="values",
            ):
                state = snapshot

            elapsed = _elapsed_ms(started)
            records = state.get("execution_results", [])
            response = BuildResponse(
                success=True,
                message=printable(state.get("message")),
                project_id=state["context"].project_id,
                preview_url=state.get("preview_url"),
                execution_results=records,
                stats=BuildStats(
                    tool_calls_executed=len(records),
                    execution_time=format_elapsed(elapsed),
                    timestamp=utc_now_iso(),
                    has_index_file=state.get("has_index_file", False),
                ),
            )

            logger.info(
                "Build completed",
                elapsed_ms=elapsed,
                tool_calls=len(records),
                failed_actions=sum(1 for r in records if not r.result.success),
                preview_url=response.preview_url,
            )
            return response

        except Exception as e:
            elapsed = _elapsed_ms(started)
            context = state.get("context")
            project_id = context.project_id if context else None
            cause = e.code if isinstance(e, BuilderError) else ErrorCode.INTERNAL_ERROR

            if isinstance(e, BuilderError):
                logger.error(
                    "Build failed",
                    error_code=e.code.value,
                    error_message=e.message,
                    phase=BuildPhase.FAILED.value,
                    failed_after=state.get("phase"),
                    elapsed_ms=elapsed,
                )
            else:
                logger.exception(
                    "Build failed",
                    phase=BuildPhase.FAILED.value,
                    failed_after=state.get("phase"),
                    elapsed_ms=elapsed,
                )

            raise BuildFailedError(
                str(e),
                stats={"executionTime": format_elapsed(elapsed), "timestamp": utc_now_iso()},
                project_id=project_id,
                cause_code=cause,
            ) from e

        finally:
            clear_log_context()


# Orchestrator singleton
_orchestrator: Optional[BuildOrchestrator] = None


def get_orchestrator() -> BuildOrchestrator:
    """BuildOrchestrator 싱글톤 반환"""
    global _orchestrator

    if _orchestrator is None:
        _orchestrator = BuildOrchestrator(
            llm_client=get_llm_client(),
            store=get_project_store(),
        )

    return _orchestrator
