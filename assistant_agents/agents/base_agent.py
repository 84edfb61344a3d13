# -*- coding: utf-8 -*-
"""
Agent Base Classes
==================

- KernelAgent: an agent bound to a Kernel that can open conversation channels
- AgentChannel: a conversation opened by an agent

Concrete agents expose their identity as plain properties and open a new
channel per conversation. Example:

    class MyAgent(KernelAgent[MyChannel]):
        @property
        def id(self) -> str:
            return self._id

        async def create_channel(self) -> MyChannel:
            return MyChannel(...)
"""

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

from assistant_agents.logging import Logger, get_logger
from assistant_agents.services.kernel import Kernel


class AgentChannel(ABC):
    """A single conversation with an agent."""


TChannel = TypeVar("TChannel", bound=AgentChannel)


class KernelAgent(ABC, Generic[TChannel]):
    """
    Base class for agents backed by a Kernel.

    Subclasses must implement `id` and `create_channel()`; `name` and
    `description` default to None.
    """

    def __init__(self, kernel: Kernel, logger: Optional[Logger] = None):
        self._kernel = kernel
        self.logger = logger or get_logger(self.__class__.__name__)

    @property
    def kernel(self) -> Kernel:
        """Kernel this agent was created against."""
        return self._kernel

    @property
    @abstractmethod
    def id(self) -> str:
        """Agent identifier."""

    @property
    def name(self) -> Optional[str]:
        return None

    @property
    def description(self) -> Optional[str]:
        return None

    @abstractmethod
    async def create_channel(self) -> TChannel:
        """Open a new conversation channel for this agent."""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KernelAgent):
            return NotImplemented
        return type(self) is type(other) and self.id == other.id

    def __hash__(self) -> int:
        return hash((type(self), self.id))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id}, name={self.name})"


__all__ = ["AgentChannel", "KernelAgent", "TChannel"]
