"""테스트 헬퍼"""

import json
from typing import Any, Optional

from backend.app.site_builder.models import ModelReply, ToolCall

PREVIEW_BASE = "http://preview.test"


def make_call(name: str, call_id: Optional[str] = None, **arguments: Any) -> ToolCall:
    """모델이 보낸 것과 같은 ToolCall (arguments는 JSON 문자열)"""
    return ToolCall(id=call_id or f"call_{name}", name=name, arguments=json.dumps(arguments))


def make_reply(*calls: ToolCall, content: Optional[str] = "Done") -> ModelReply:
    return ModelReply(content=content, tool_calls=list(calls))
