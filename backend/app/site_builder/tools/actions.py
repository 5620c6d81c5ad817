"""Built-in Actions

ExecuteCommand / WriteFile / ReadFile / ListDirectory
"""

import asyncio
import os
import posixpath
import signal
from typing import Any

from backend.app.core.errors import ErrorCode, ExecutionError, ValidationError
from backend.app.core.logging import get_logger
from backend.app.site_builder.models import (
    DirectoryEntry,
    EntryType,
    ProjectContext,
    ToolName,
    ToolResult,
)
from backend.app.site_builder.tools.base_tool import BaseAction, printable, register_action
from backend.app.site_builder.tools.validator import (
    resolve_in_project,
    sanitize_path,
    validate_command,
)

logger = get_logger(__name__)

_READ_CHUNK = 64 * 1024


async def _read_bounded(stream: asyncio.StreamReader, limit: int) -> bytes:
    """스트림을 limit 바이트까지만 읽는다. 초과 시 ExecutionError"""
    buffer = bytearray()
    while True:
        chunk = await stream.read(_READ_CHUNK)
        if not chunk:
            return bytes(buffer)
        buffer.extend(chunk)
        if len(buffer) > limit:
            raise ExecutionError(
                ErrorCode.COMMAND_OUTPUT_LIMIT,
                f"Command output exceeded {limit} bytes",
            )


def _terminate(proc: asyncio.subprocess.Process) -> None:
    """명령 종료 처리

    POSIX에서는 셸이 정상 종료했더라도 세션(프로세스 그룹) 전체를 죽인다.
    백그라운드로 남은 자식 프로세스도 같은 그룹에 있다.
    """
    try:
        if os.name == "posix":
            os.killpg(proc.pid, signal.SIGKILL)
        elif proc.returncode is None:
            proc.kill()
    except (ProcessLookupError, PermissionError):
        # group already gone
        pass


@register_action(ToolName.EXECUTE_COMMAND)
class ExecuteCommandAction(BaseAction):
    """프로젝트 디렉토리에서 허용된 셸 명령 실행"""

    name = ToolName.EXECUTE_COMMAND
    echo_field = "command"

    async def run(self, context: ProjectContext, command: str = "", **kwargs: Any) -> ToolResult:
        validate_command(command, self.policy)

        timeout = self.limits.command_timeout_sec
        limit = self.limits.command_max_output_bytes

        logger.info("Executing command", command=command)
        proc = await asyncio.create_subprocess_shell(
            command,
            cwd=str(context.root),
            stdin=asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
            start_new_session=(os.name == "posix"),
        )

        async def _collect() -> tuple[bytes, bytes]:
            readers = [
                asyncio.ensure_future(_read_bounded(proc.stdout, limit)),
                asyncio.ensure_future(_read_bounded(proc.stderr, limit)),
            ]
            try:
                stdout, stderr = await asyncio.gather(*readers)
            except BaseException:
                # one reader failed or we were cancelled; collect the other one too
                for reader in readers:
                    reader.cancel()
                await asyncio.gather(*readers, return_exceptions=True)
                raise
            await proc.wait()
            return stdout, stderr

        try:
            stdout, stderr = await asyncio.wait_for(_collect(), timeout=timeout)
        except asyncio.TimeoutError:
            raise ExecutionError(
                ErrorCode.COMMAND_TIMEOUT,
                f"Command timed out after {timeout:g}s",
                details={"command": command},
            )
        finally:
            _terminate(proc)
            await proc.wait()

        if proc.returncode != 0:
            detail = stderr.decode("utf-8", errors="replace").strip()
            raise ExecutionError(
                ErrorCode.COMMAND_FAILED,
                f"Command failed with exit code {proc.returncode}" + (f": {detail}" if detail else ""),
                details={"command": command, "returncode": proc.returncode},
            )

        return ToolResult(
            success=True,
            output=stdout.decode("utf-8", errors="replace").strip(),
            command=command,
        )


@register_action(ToolName.WRITE_FILE)
class WriteFileAction(BaseAction):
    """파일 쓰기 (상위 디렉토리 자동 생성, 기존 파일 덮어쓰기)"""

    name = ToolName.WRITE_FILE

    async def run(self, context: ProjectContext, path: str = "", content: str = "", **kwargs: Any) -> ToolResult:
        target = resolve_in_project(context, path)

        data = content.encode("utf-8")
        max_bytes = self.limits.max_file_bytes
        if len(data) > max_bytes:
            raise ValidationError(
                ErrorCode.CONTENT_TOO_LARGE,
                f"File content too large (max {max_bytes} bytes)",
                details={"path": path, "size": len(data)},
            )

        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(data)

        logger.info("File written", path=path, size=len(data))
        return ToolResult(
            success=True,
            message=f"Successfully written to {path}",
            path=path,
            size=len(data),
        )


@register_action(ToolName.READ_FILE)
class ReadFileAction(BaseAction):
    """파일 읽기"""

    name = ToolName.READ_FILE

    async def run(self, context: ProjectContext, path: str = "", **kwargs: Any) -> ToolResult:
        target = resolve_in_project(context, path)

        if not target.exists():
            raise ExecutionError(ErrorCode.FILE_NOT_FOUND, f"File does not exist: {path}")
        if not target.is_file():
            raise ExecutionError(ErrorCode.NOT_A_FILE, f"Path is not a file: {path}")

        data = target.read_bytes()
        return ToolResult(
            success=True,
            content=data.decode("utf-8", errors="replace"),
            path=path,
            size=len(data),
        )


@register_action(ToolName.LIST_DIRECTORY)
class ListDirectoryAction(BaseAction):
    """디렉토리 목록 (기본값: 프로젝트 루트)"""

    name = ToolName.LIST_DIRECTORY

    async def run(self, context: ProjectContext, path: str = ".", **kwargs: Any) -> ToolResult:
        target = resolve_in_project(context, path)
        relative = sanitize_path(path)

        if not target.exists():
            raise ExecutionError(ErrorCode.FILE_NOT_FOUND, f"Directory does not exist: {path}")
        if not target.is_dir():
            raise ExecutionError(ErrorCode.NOT_A_DIRECTORY, f"Path is not a directory: {path}")

        # names that are not valid UTF-8 on disk come back as surrogate escapes
        files = [
            DirectoryEntry(
                name=printable(entry.name),
                type=EntryType.DIRECTORY if entry.is_dir() else EntryType.FILE,
                path=printable(posixpath.normpath(posixpath.join(relative, entry.name))),
            )
            for entry in sorted(target.iterdir(), key=lambda e: e.name)
        ]

        return ToolResult(success=True, files=files, path=path, count=len(files))
