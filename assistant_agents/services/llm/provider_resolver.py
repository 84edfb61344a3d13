# -*- coding: utf-8 -*-
"""
Provider Resolver
=================

Translates a configured chat completion service into what the Assistants API
needs: a client configuration (endpoint / credential) and a model identifier.

Usage:
    from assistant_agents.services.llm import create_client, resolve_client, resolve_model

    model = resolve_model(service)
    client = create_client(resolve_client(service, api_key))
"""

from dataclasses import dataclass
from typing import Optional, Union

from openai import AsyncAzureOpenAI, AsyncOpenAI

from assistant_agents.logging import get_logger

from .chat_services import AzureOpenAIChatService, ChatCompletionService, OpenAIChatService
from .exceptions import AgentConfigError

logger = get_logger("ProviderResolver")

AssistantsClient = Union[AsyncOpenAI, AsyncAzureOpenAI]

PROVIDER_AZURE = "azure"
PROVIDER_OPENAI = "openai"


@dataclass(frozen=True)
class ClientConfig:
    """Resolved connection settings for the Assistants API."""

    provider: str
    api_key: str
    endpoint: Optional[str] = None
    api_version: Optional[str] = None
    org_id: Optional[str] = None

    def __repr__(self) -> str:
        # Never print the credential
        return (
            f"ClientConfig(provider={self.provider!r}, endpoint={self.endpoint!r}, "
            f"api_version={self.api_version!r}, org_id={self.org_id!r})"
        )


def _describe(service: object) -> str:
    return type(service).__name__ if service is not None else "None"


def _require_api_key(api_key: Optional[str], provider: str) -> str:
    if not api_key:
        raise AgentConfigError("Assistants API key is not configured", provider=provider)
    return api_key


def resolve_client(service: ChatCompletionService, api_key: Optional[str]) -> ClientConfig:
    """
    Derive the Assistants client configuration for a chat completion service.

    Args:
        service: Chat completion service registered on the kernel
        api_key: Assistants API key; never read from the environment

    Returns:
        ClientConfig for the service's provider

    Raises:
        AgentConfigError: If the service is not backed by OpenAI or Azure OpenAI,
            or no API key is given
    """
    match service:
        case AzureOpenAIChatService(endpoint=endpoint, api_version=api_version):
            logger.debug(f"Resolved Azure OpenAI client (endpoint={endpoint})")
            return ClientConfig(
                provider=PROVIDER_AZURE,
                api_key=_require_api_key(api_key, PROVIDER_AZURE),
                endpoint=endpoint,
                api_version=api_version,
            )
        case OpenAIChatService(org_id=org_id):
            logger.debug("Resolved OpenAI client")
            return ClientConfig(
                provider=PROVIDER_OPENAI,
                api_key=_require_api_key(api_key, PROVIDER_OPENAI),
                org_id=org_id,
            )
        case _:
            raise AgentConfigError(
                f"Missing chat completion service: {_describe(service)} "
                "is not an OpenAI or Azure OpenAI service"
            )


def resolve_model(service: ChatCompletionService) -> str:
    """
    Determine the model (OpenAI) or deployment (Azure) to create assistants with.

    Raises:
        AgentConfigError: If the service is unsupported or has no model configured
    """
    model: Optional[str] = None

    match service:
        case AzureOpenAIChatService(deployment_name=deployment_name):
            model = deployment_name
        case OpenAIChatService(model_id=model_id):
            model = model_id
        case _:
            model = None

    if not model:
        raise AgentConfigError(f"Unable to determine model for {_describe(service)}.")
    return model


def create_client(config: ClientConfig) -> AssistantsClient:
    """
    Build the async SDK client for a resolved configuration.

    Raises:
        AgentConfigError: If the provider is unknown, the API key is empty or Azure has no endpoint
    """
    _require_api_key(config.api_key, config.provider)
    if config.provider == PROVIDER_AZURE:
        if not config.endpoint:
            raise AgentConfigError("Azure OpenAI endpoint is not configured", provider=PROVIDER_AZURE)
        return AsyncAzureOpenAI(
            azure_endpoint=config.endpoint,
            api_key=config.api_key,
            api_version=config.api_version,
        )
    if config.provider == PROVIDER_OPENAI:
        return AsyncOpenAI(api_key=config.api_key, organization=config.org_id)
    raise AgentConfigError(f"Unsupported assistants provider: {config.provider}")


__all__ = [
    "AssistantsClient",
    "ClientConfig",
    "PROVIDER_AZURE",
    "PROVIDER_OPENAI",
    "create_client",
    "resolve_client",
    "resolve_model",
]
