# -*- coding: utf-8 -*-
"""
GPT Agent
=========

A KernelAgent backed by an OpenAI / Azure OpenAI Assistant.

The kernel's chat completion service decides which backend is used:
- AzureOpenAIChatService: Azure endpoint + deployment name as model
- OpenAIChatService: OpenAI API + model id

Usage:
    agent = await GptAgent.create(
        kernel,
        api_key="sk-...",
        instructions="Answer in one paragraph.",
        name="Helper",
        enable_code_interpreter=True,
    )
    channel = await agent.create_channel()

    # Later, from the stored id
    agent = await GptAgent.restore(kernel, api_key="sk-...", agent_id=agent.id)

Instances are only produced by `create()` and `restore()`. Properties are read
from the snapshot taken at that time and never call the provider.
"""

import asyncio
from typing import Mapping, Optional

import openai

from assistant_agents.logging import get_logger
from assistant_agents.services.kernel import Kernel
from assistant_agents.services.llm import (
    AssistantNotFoundError,
    AssistantsClient,
    ChatCompletionService,
    create_client,
    resolve_client,
    resolve_model,
)

from .assistant_models import AssistantCreationOptions, AssistantDefinition
from .base_agent import KernelAgent
from .gpt_channel import GptChannel

logger = get_logger("GptAgent")

_CONSTRUCTION_TOKEN = object()


class GptAgent(KernelAgent[GptChannel]):
    """Agent whose state lives in a remote Assistants API assistant."""

    def __init__(
        self,
        client: AssistantsClient,
        definition: AssistantDefinition,
        kernel: Kernel,
        *,
        _token: object = None,
    ):
        if _token is not _CONSTRUCTION_TOKEN:
            raise TypeError("Use GptAgent.create() or GptAgent.restore() to obtain an agent")
        super().__init__(kernel, logger=logger)
        self._client = client
        self._definition = definition

    # -------------------------------------------------------------------------
    # Snapshot properties
    # -------------------------------------------------------------------------

    @property
    def id(self) -> str:
        return self._definition.id

    @property
    def name(self) -> Optional[str]:
        return self._definition.name

    @property
    def description(self) -> Optional[str]:
        return self._definition.description

    @property
    def instructions(self) -> Optional[str]:
        """The instructions of the agent (optional)."""
        return self._definition.instructions

    @property
    def model(self) -> str:
        return self._definition.model

    @property
    def tools(self) -> tuple[str, ...]:
        """Enabled tool kinds, in creation order."""
        return self._definition.tools

    @property
    def metadata(self) -> Mapping[str, str]:
        return self._definition.metadata

    @property
    def definition(self) -> AssistantDefinition:
        return self._definition

    @property
    def client(self) -> AssistantsClient:
        return self._client

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    @classmethod
    async def create(
        cls,
        kernel: Kernel,
        api_key: Optional[str],
        instructions: Optional[str] = None,
        description: Optional[str] = None,
        name: Optional[str] = None,
        enable_code_interpreter: bool = False,
        enable_retrieval: bool = False,
        metadata: Optional[Mapping[str, str]] = None,
        service_id: Optional[str] = None,
    ) -> "GptAgent":
        """
        Define a new assistant and return an agent for it.

        Every call creates a new remote assistant, even with identical arguments.

        Args:
            kernel: Kernel holding the chat completion service
            api_key: Assistants API key
            instructions: Agent instructions
            description: Agent description (optional)
            name: Agent name
            enable_code_interpreter: Enable the code interpreter tool
            enable_retrieval: Enable the document retrieval tool
            metadata: Agent metadata
            service_id: Select a specific chat completion service on the kernel

        Returns:
            GptAgent for the created assistant

        Raises:
            AgentConfigError: No usable chat completion service or no API key (before any remote call)
            openai.APIError: Provider or transport failure, unchanged
            asyncio.CancelledError: The awaiting task was cancelled
        """
        service = kernel.get_required_service(ChatCompletionService, service_id)
        model = resolve_model(service)
        client = create_client(resolve_client(service, api_key))

        options = AssistantCreationOptions.build(
            model=model,
            name=name,
            description=description,
            instructions=instructions,
            metadata=metadata,
            enable_code_interpreter=enable_code_interpreter,
            enable_retrieval=enable_retrieval,
        )

        logger.debug(f"Creating assistant (model={model}, tools={[t['type'] for t in options.tools]})")
        try:
            assistant = await client.beta.assistants.create(**options.to_request())
        except asyncio.CancelledError:
            logger.warning("Assistant creation cancelled; the assistant may still exist remotely")
            raise

        agent = cls(client, AssistantDefinition.from_assistant(assistant), kernel, _token=_CONSTRUCTION_TOKEN)
        logger.info(f"Created assistant {agent.id} (name={agent.name})")
        return agent

    @classmethod
    async def restore(
        cls,
        kernel: Kernel,
        api_key: Optional[str],
        agent_id: str,
        service_id: Optional[str] = None,
    ) -> "GptAgent":
        """
        Retrieve an existing assistant by identifier.

        Args:
            kernel: Kernel holding the chat completion service
            api_key: Assistants API key
            agent_id: The agent identifier
            service_id: Select a specific chat completion service on the kernel

        Returns:
            GptAgent for the stored assistant

        Raises:
            AgentConfigError: No usable chat completion service or no API key (before any remote call)
            AssistantNotFoundError: The provider does not know `agent_id`
            openai.APIError: Any other provider or transport failure, unchanged
            asyncio.CancelledError: The awaiting task was cancelled
        """
        service = kernel.get_required_service(ChatCompletionService, service_id)
        config = resolve_client(service, api_key)
        client = create_client(config)

        try:
            assistant = await client.beta.assistants.retrieve(agent_id)
        except asyncio.CancelledError:
            logger.warning(f"Restoring assistant {agent_id} cancelled")
            raise
        except openai.NotFoundError as e:
            raise AssistantNotFoundError(
                f"Assistant not found: {agent_id}",
                assistant_id=agent_id,
                provider=config.provider,
            ) from e

        agent = cls(client, AssistantDefinition.from_assistant(assistant), kernel, _token=_CONSTRUCTION_TOKEN)
        logger.info(f"Restored assistant {agent.id} (name={agent.name})")
        return agent

    async def create_channel(self) -> GptChannel:
        """
        Open a new thread for a conversation with this agent.

        Every call creates a distinct remote thread; its lifetime is managed by
        the provider.
        """
        try:
            thread = await self._client.beta.threads.create()
        except asyncio.CancelledError:
            self.logger.warning(
                f"Opening a thread for assistant {self.id} cancelled; the thread may still exist remotely"
            )
            raise
        self.logger.info(f"Opened thread {thread.id} for assistant {self.id}")
        return GptChannel(client=self._client, thread_id=thread.id)


__all__ = ["GptAgent"]
