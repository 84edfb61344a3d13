from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

TOOL_CODE_INTERPRETER = "code_interpreter"
# Assistants v2 name for the document retrieval tool
TOOL_FILE_SEARCH = "file_search"


def _tool_type(tool: Any) -> str:
    if isinstance(tool, Mapping):
        return str(tool.get("type", ""))
    return str(getattr(tool, "type", ""))


class AssistantCreationOptions(BaseModel):
    """Request body for creating an assistant."""

    model_config = ConfigDict(frozen=True)

    model: str = Field(min_length=1)
    name: Optional[str] = None
    description: Optional[str] = None
    instructions: Optional[str] = None
    metadata: Optional[dict[str, str]] = None
    tools: list[dict[str, str]] = Field(default_factory=list)

    @classmethod
    def build(
        cls,
        *,
        model: str,
        name: Optional[str] = None,
        description: Optional[str] = None,
        instructions: Optional[str] = None,
        metadata: Optional[Mapping[str, str]] = None,
        enable_code_interpreter: bool = False,
        enable_retrieval: bool = False,
    ) -> AssistantCreationOptions:
        tools: list[dict[str, str]] = []
        if enable_code_interpreter:
            tools.append({"type": TOOL_CODE_INTERPRETER})
        if enable_retrieval:
            tools.append({"type": TOOL_FILE_SEARCH})
        return cls(
            model=model,
            name=name,
            description=description,
            instructions=instructions,
            metadata=dict(metadata) if metadata is not None else None,
            tools=tools,
        )

    def to_request(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


@dataclass(frozen=True)
class AssistantDefinition:
    """Local, read-only snapshot of a remote assistant."""

    id: str
    model: str
    name: Optional[str] = None
    description: Optional[str] = None
    instructions: Optional[str] = None
    tools: tuple[str, ...] = ()
    metadata: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}), hash=False)

    @classmethod
    def from_assistant(cls, assistant: Any) -> AssistantDefinition:
        """Snapshot an SDK `Assistant` object."""
        metadata = getattr(assistant, "metadata", None) or {}
        return cls(
            id=assistant.id,
            model=getattr(assistant, "model", "") or "",
            name=getattr(assistant, "name", None),
            description=getattr(assistant, "description", None),
            instructions=getattr(assistant, "instructions", None),
            tools=tuple(_tool_type(tool) for tool in getattr(assistant, "tools", None) or ()),
            metadata=MappingProxyType({str(k): str(v) for k, v in dict(metadata).items()}),
        )


__all__ = [
    "AssistantCreationOptions",
    "AssistantDefinition",
    "TOOL_CODE_INTERPRETER",
    "TOOL_FILE_SEARCH",
]
