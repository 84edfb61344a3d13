# -*- coding: utf-8 -*-
"""Conversation channel backed by an Assistants API thread."""

from dataclasses import dataclass, field

from assistant_agents.services.llm import AssistantsClient

from .base_agent import AgentChannel


@dataclass(frozen=True)
class GptChannel(AgentChannel):
    """One remote thread, bound to the client that created it."""

    client: AssistantsClient = field(repr=False, compare=False)
    thread_id: str


__all__ = ["GptChannel"]
