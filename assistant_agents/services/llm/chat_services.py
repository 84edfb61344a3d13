# -*- coding: utf-8 -*-
"""
Chat Completion Services
========================

Descriptors for the chat completion backends a kernel can be configured with.

Known variants:
- AzureOpenAIChatService: Azure OpenAI deployment (endpoint + deployment name)
- OpenAIChatService: OpenAI API directly (model id)

Any other ``ChatCompletionService`` subclass is a valid kernel service but
cannot back an assistant.
"""

from dataclasses import dataclass
from typing import Optional

DEFAULT_AZURE_API_VERSION = "2024-05-01-preview"


class ChatCompletionService:
    """Marker base for chat completion services registered on a kernel."""

    service_id: Optional[str] = None


@dataclass(frozen=True)
class AzureOpenAIChatService(ChatCompletionService):
    deployment_name: str
    endpoint: str
    api_version: str = DEFAULT_AZURE_API_VERSION
    service_id: Optional[str] = None


@dataclass(frozen=True)
class OpenAIChatService(ChatCompletionService):
    model_id: str
    org_id: Optional[str] = None
    service_id: Optional[str] = None


__all__ = [
    "AzureOpenAIChatService",
    "ChatCompletionService",
    "DEFAULT_AZURE_API_VERSION",
    "OpenAIChatService",
]
