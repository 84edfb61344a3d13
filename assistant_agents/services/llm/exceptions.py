# -*- coding: utf-8 -*-
"""
Agent Exceptions
================

Error types raised by the provider resolver and the agent lifecycle.

Provider transport errors (``openai.APIError`` and subclasses) and
``asyncio.CancelledError`` are never wrapped; they reach the caller as raised.
"""

from typing import Optional


class AgentError(Exception):
    """Base class for errors raised by this package."""

    def __init__(self, message: str, provider: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.provider = provider

    def __str__(self) -> str:
        if self.provider:
            return f"[{self.provider}] {self.message}"
        return self.message


class AgentConfigError(AgentError):
    """No usable chat completion service, or one that cannot be mapped to a client/model."""


class ServiceNotFoundError(AgentConfigError):
    """The kernel has no service registered for the requested kind."""

    def __init__(self, message: str, kind: Optional[type] = None):
        super().__init__(message)
        self.kind = kind


class AssistantNotFoundError(AgentError):
    """The provider does not know the requested assistant id."""

    def __init__(self, message: str, assistant_id: str, provider: Optional[str] = None):
        super().__init__(message, provider=provider)
        self.assistant_id = assistant_id


__all__ = [
    "AgentConfigError",
    "AgentError",
    "AssistantNotFoundError",
    "ServiceNotFoundError",
]
