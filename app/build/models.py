import getpass
import json
import os
import platform
import socket
import uuid
from dataclasses import dataclass

from app.build.exceptions import InvalidBuildIdError


@dataclass(frozen=True)
class BuildId:
    """Opaque token identifying a single build invocation."""

    value: str

    @classmethod
    def from_json(cls, raw: str) -> "BuildId":
        """Parse a build id as it appears in JSON: bare or quoted string.

        Raises:
            InvalidBuildIdError: if the value is empty or not a JSON string.
        """
        text = raw.strip()
        if text.startswith('"'):
            try:
                text = json.loads(text)
            except json.JSONDecodeError as exc:
                raise InvalidBuildIdError(f"Malformed build id: {raw!r}") from exc
            if not isinstance(text, str):
                raise InvalidBuildIdError(f"Build id must be a string: {raw!r}")
            text = text.strip()
        if not text:
            raise InvalidBuildIdError("Build id must not be empty")
        return cls(text)

    @classmethod
    def new(cls) -> "BuildId":
        return cls(str(uuid.uuid4()))

    def to_json(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class BuildEnvironmentDescription:
    """Description of the host a build ran on, forwarded verbatim into reports."""

    JSON_PROTOCOL_VERSION = 1

    user: str
    hostname: str
    os: str
    available_cores: int
    system_memory_bytes: int
    python_version: str
    tool_commit: str = ""
    tool_dirty: bool = False
    json_protocol_version: int = JSON_PROTOCOL_VERSION
    extra_data: tuple[tuple[str, str], ...] = ()

    @classmethod
    def describe(
        cls,
        *,
        tool_commit: str = "",
        tool_dirty: bool = False,
        extra_data: dict[str, str] | None = None,
    ) -> "BuildEnvironmentDescription":
        """Collect the description from the running host."""
        return cls(
            user=_current_user(),
            hostname=socket.gethostname(),
            os=f"{platform.system()} {platform.release()}".strip(),
            available_cores=os.cpu_count() or 1,
            system_memory_bytes=_system_memory_bytes(),
            python_version=platform.python_version(),
            tool_commit=tool_commit,
            tool_dirty=tool_dirty,
            extra_data=tuple(sorted((extra_data or {}).items())),
        )

    def to_dict(self) -> dict[str, object]:
        return {
            "user": self.user,
            "hostname": self.hostname,
            "os": self.os,
            "available_cores": self.available_cores,
            "system_memory_bytes": self.system_memory_bytes,
            "python_version": self.python_version,
            "tool_commit": self.tool_commit,
            "tool_dirty": self.tool_dirty,
            "json_protocol_version": self.json_protocol_version,
            "extra_data": dict(self.extra_data),
        }


def _current_user() -> str:
    try:
        return getpass.getuser()
    except (KeyError, OSError):
        return "unknown"


def _system_memory_bytes() -> int:
    """Total physical memory, or 0 where the platform does not expose it."""
    try:
        return os.sysconf("SC_PAGE_SIZE") * os.sysconf("SC_PHYS_PAGES")
    except (AttributeError, ValueError, OSError):
        return 0
