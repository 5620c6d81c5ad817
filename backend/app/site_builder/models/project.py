"""Project Models"""

from datetime import datetime
from pathlib import Path

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ProjectContext(BaseModel):
    """빌드 1건이 소유하는 프로젝트 컨텍스트

    요청마다 새로 만들어 validator/executor 호출에 명시적으로 전달한다.
    """

    model_config = ConfigDict(frozen=True)

    project_id: str
    root: Path


class WebsiteInfo(BaseModel):
    """index.html이 있는 생성 프로젝트"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    project_id: str
    preview_url: str
    created: datetime
    modified: datetime
