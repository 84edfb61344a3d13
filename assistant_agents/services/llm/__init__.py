# -*- coding: utf-8 -*-
"""
LLM Services
============

Chat completion service descriptors and the resolver that maps them to an
Assistants API client:
- ChatCompletionService / AzureOpenAIChatService / OpenAIChatService
- resolve_client / resolve_model / create_client
- Exception types shared by the agent layer
"""

from .chat_services import (
    DEFAULT_AZURE_API_VERSION,
    AzureOpenAIChatService,
    ChatCompletionService,
    OpenAIChatService,
)
from .exceptions import AgentConfigError, AgentError, AssistantNotFoundError, ServiceNotFoundError
from .provider_resolver import (
    PROVIDER_AZURE,
    PROVIDER_OPENAI,
    AssistantsClient,
    ClientConfig,
    create_client,
    resolve_client,
    resolve_model,
)

__all__ = [
    "AgentConfigError",
    "AgentError",
    "AssistantNotFoundError",
    "AssistantsClient",
    "AzureOpenAIChatService",
    "ChatCompletionService",
    "ClientConfig",
    "DEFAULT_AZURE_API_VERSION",
    "OpenAIChatService",
    "PROVIDER_AZURE",
    "PROVIDER_OPENAI",
    "ServiceNotFoundError",
    "create_client",
    "resolve_client",
    "resolve_model",
]
