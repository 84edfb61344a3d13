# -*- coding: utf-8 -*-
"""
LangChain Chat Model Mapping
============================

Maps configured LangChain chat models onto chat completion services, so a
kernel can be populated from the same objects an application already uses
for completions.

- AzureChatOpenAI -> AzureOpenAIChatService
- ChatOpenAI -> OpenAIChatService

Usage:
    from langchain_openai import ChatOpenAI
    from assistant_agents.services.llm.langchain_provider import chat_service_from_model

    service = chat_service_from_model(ChatOpenAI(model="gpt-4o"))
"""

from typing import Any, Optional

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_openai import AzureChatOpenAI, ChatOpenAI

from assistant_agents.logging import get_logger

from .chat_services import (
    DEFAULT_AZURE_API_VERSION,
    AzureOpenAIChatService,
    ChatCompletionService,
    OpenAIChatService,
)
from .exceptions import AgentConfigError

logger = get_logger("LangChain")


def _azure_service(llm: AzureChatOpenAI, service_id: Optional[str]) -> AzureOpenAIChatService:
    if not llm.deployment_name:
        raise AgentConfigError(
            "AzureChatOpenAI has no azure_deployment configured", provider="azure"
        )
    if not llm.azure_endpoint:
        raise AgentConfigError(
            "AzureChatOpenAI has no azure_endpoint configured", provider="azure"
        )
    return AzureOpenAIChatService(
        deployment_name=llm.deployment_name,
        endpoint=llm.azure_endpoint,
        api_version=llm.openai_api_version or DEFAULT_AZURE_API_VERSION,
        service_id=service_id,
    )


def _openai_service(llm: ChatOpenAI, service_id: Optional[str]) -> OpenAIChatService:
    return OpenAIChatService(
        model_id=llm.model_name,
        org_id=llm.openai_organization,
        service_id=service_id,
    )


def chat_service_from_model(
    llm: Any,
    service_id: Optional[str] = None,
) -> ChatCompletionService:
    """
    Convert a LangChain chat model into a chat completion service.

    Args:
        llm: LangChain chat model instance
        service_id: Optional id to register the service under

    Returns:
        Chat completion service describing the model's backend

    Raises:
        AgentConfigError: If the model is not an OpenAI or Azure OpenAI chat model
    """
    # Azure first: both classes share the OpenAI base
    if isinstance(llm, AzureChatOpenAI):
        service = _azure_service(llm, service_id)
    elif isinstance(llm, ChatOpenAI):
        service = _openai_service(llm, service_id)
    elif isinstance(llm, BaseChatModel):
        raise AgentConfigError(
            f"{type(llm).__name__} cannot back an assistant; "
            "use ChatOpenAI or AzureChatOpenAI"
        )
    else:
        raise AgentConfigError(f"Expected a LangChain chat model, got {type(llm).__name__}")

    logger.debug(f"Mapped {type(llm).__name__} to {type(service).__name__}")
    return service


__all__ = ["chat_service_from_model"]
