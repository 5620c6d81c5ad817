"""Command Policy Table

YAML 기반 명령어 허용/차단 테이블
"""

from pathlib import Path
from typing import Any, Optional

import yaml

from backend.app.core.logging import get_logger
from backend.app.site_builder.models import CommandPolicy

logger = get_logger(__name__)

# 정책 정의 디렉토리
DEFINITIONS_DIR = Path(__file__).parent / "definitions"
DEFAULT_POLICY_FILE = DEFINITIONS_DIR / "command_policy.yaml"


class CommandPolicyTable:
    """명령어 이름 → 정책 매핑

    테이블에 없는 명령어는 허용되지 않는다 (default-deny).
    """

    def __init__(
        self,
        policies: Optional[dict[str, CommandPolicy]] = None,
        allowed_prefixes: Optional[list[str]] = None,
    ):
        self._policies: dict[str, CommandPolicy] = dict(policies or {})
        self._allowed_prefixes: tuple[str, ...] = tuple(allowed_prefixes or ())

    @classmethod
    def from_yaml(cls, path: Path = DEFAULT_POLICY_FILE) -> "CommandPolicyTable":
        """YAML 파일에서 정책 로드

        Raises:
            ValueError: 알 수 없는 정책 값
        """
        with open(path, "r", encoding="utf-8") as f:
            data: dict[str, Any] = yaml.safe_load(f) or {}

        policies: dict[str, CommandPolicy] = {}
        for name, value in (data.get("commands") or {}).items():
            try:
                policies[str(name)] = CommandPolicy(str(value).lower())
            except ValueError:
                raise ValueError(f"Unknown policy '{value}' for command '{name}' in {path.name}")

        prefixes = [str(p) for p in data.get("allowed_prefixes") or []]

        logger.info(
            "Command policy loaded",
            path=str(path),
            allowed=sum(1 for p in policies.values() if p == CommandPolicy.ALLOW),
            denied=sum(1 for p in policies.values() if p == CommandPolicy.DENY),
        )
        return cls(policies, prefixes)

    def get(self, name: str) -> Optional[CommandPolicy]:
        return self._policies.get(name)

    def is_denied(self, name: str) -> bool:
        return self.get(name) == CommandPolicy.DENY

    def is_allowed(self, name: str) -> bool:
        if self.get(name) == CommandPolicy.ALLOW:
            return True
        return bool(name) and name.startswith(self._allowed_prefixes)

    def names(self, policy: CommandPolicy) -> list[str]:
        return sorted(n for n, p in self._policies.items() if p == policy)

    def with_policy(self, name: str, policy: CommandPolicy) -> "CommandPolicyTable":
        """정책 하나를 추가/변경한 새 테이블 반환"""
        policies = dict(self._policies)
        policies[name] = policy
        return CommandPolicyTable(policies, list(self._allowed_prefixes))


# 싱글톤 인스턴스
_policy_table: Optional[CommandPolicyTable] = None


def get_policy_table() -> CommandPolicyTable:
    """정책 테이블 싱글톤 반환"""
    global _policy_table

    if _policy_table is None:
        _policy_table = CommandPolicyTable.from_yaml()

    return _policy_table
