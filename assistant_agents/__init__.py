# -*- coding: utf-8 -*-
"""
assistant_agents
================

Agents backed by the OpenAI / Azure OpenAI Assistants API.

Usage:
    from assistant_agents import GptAgent, Kernel, OpenAIChatService

    kernel = Kernel([OpenAIChatService(model_id="gpt-4o")])
    agent = await GptAgent.create(kernel, api_key="sk-...", instructions="...")
    channel = await agent.create_channel()
"""

from .agents import AgentChannel, GptAgent, GptChannel, KernelAgent
from .services import Kernel
from .services.llm import (
    AgentConfigError,
    AgentError,
    AssistantNotFoundError,
    AzureOpenAIChatService,
    ChatCompletionService,
    OpenAIChatService,
    ServiceNotFoundError,
)

__version__ = "0.1.0"

__all__ = [
    "AgentChannel",
    "AgentConfigError",
    "AgentError",
    "AssistantNotFoundError",
    "AzureOpenAIChatService",
    "ChatCompletionService",
    "GptAgent",
    "GptChannel",
    "Kernel",
    "KernelAgent",
    "OpenAIChatService",
    "ServiceNotFoundError",
]
