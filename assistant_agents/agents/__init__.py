# -*- coding: utf-8 -*-
"""
Agents
======

- KernelAgent / AgentChannel: base abstractions
- GptAgent / GptChannel: agents backed by the OpenAI Assistants API

Usage:
    from assistant_agents.agents import GptAgent

    agent = await GptAgent.create(kernel, api_key, instructions="...")
    channel = await agent.create_channel()
"""

from .assistant_models import (
    TOOL_CODE_INTERPRETER,
    TOOL_FILE_SEARCH,
    AssistantCreationOptions,
    AssistantDefinition,
)
from .base_agent import AgentChannel, KernelAgent
from .gpt_agent import GptAgent
from .gpt_channel import GptChannel

__all__ = [
    "AgentChannel",
    "AssistantCreationOptions",
    "AssistantDefinition",
    "GptAgent",
    "GptChannel",
    "KernelAgent",
    "TOOL_CODE_INTERPRETER",
    "TOOL_FILE_SEARCH",
]
