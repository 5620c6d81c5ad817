"""API Request Schemas"""

from typing import Any

from pydantic import BaseModel, Field


class BuildRequest(BaseModel):
    """웹사이트 빌드 요청

    userPrompt의 타입/길이 검증은 오케스트레이터가 담당한다
    (400 응답 본문을 일정하게 유지하기 위해).
    본문 필드 이름은 userPrompt만 받는다.
    """

    user_prompt: Any = Field(None, alias="userPrompt", description="만들 웹사이트 설명")
