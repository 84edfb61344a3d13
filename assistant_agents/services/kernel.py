# -*- coding: utf-8 -*-
"""
Kernel
======

Minimal service container handed to agents. Agents look up the services they
need by kind (class), optionally narrowed to a service id.

Usage:
    from assistant_agents.services import Kernel
    from assistant_agents.services.llm import ChatCompletionService, OpenAIChatService

    kernel = Kernel()
    kernel.add_service(OpenAIChatService(model_id="gpt-4o"))
    service = kernel.get_required_service(ChatCompletionService)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional, TypeVar

from assistant_agents.logging import configure_logging, get_logger
from assistant_agents.services.llm.exceptions import ServiceNotFoundError

if TYPE_CHECKING:
    from assistant_agents.config.settings import AssistantSettings

logger = get_logger("Kernel")

T = TypeVar("T")


class Kernel:
    """Holds the services available to agents."""

    def __init__(self, services: Optional[list[Any]] = None):
        self._services: list[Any] = []
        for service in services or []:
            self.add_service(service)

    @classmethod
    def from_settings(cls, settings: AssistantSettings) -> Kernel:
        """Create a kernel with the chat completion service described by settings."""
        configure_logging(level=settings.log_level, log_dir=settings.log_dir)
        kernel = cls()
        kernel.add_service(settings.chat_service())
        return kernel

    @property
    def services(self) -> tuple[Any, ...]:
        return tuple(self._services)

    def add_service(self, service: Any) -> None:
        """Register a service. Later registrations of the same kind win lookups."""
        if service is None:
            raise ValueError("service must not be None")
        self._services.append(service)
        logger.debug(f"Registered service {type(service).__name__}")

    def add_chat_model(self, llm: Any, service_id: Optional[str] = None) -> None:
        """Register a LangChain chat model as a chat completion service."""
        from assistant_agents.services.llm.langchain_provider import chat_service_from_model

        self.add_service(chat_service_from_model(llm, service_id=service_id))

    def get_service(self, kind: type[T], service_id: Optional[str] = None) -> Optional[T]:
        """Return the most recently registered service of `kind`, or None."""
        for service in reversed(self._services):
            if not isinstance(service, kind):
                continue
            if service_id is not None and getattr(service, "service_id", None) != service_id:
                continue
            return service
        return None

    def get_required_service(self, kind: type[T], service_id: Optional[str] = None) -> T:
        """
        Return the most recently registered service of `kind`.

        Raises:
            ServiceNotFoundError: If no such service is registered
        """
        service = self.get_service(kind, service_id)
        if service is None:
            target = kind.__name__ if service_id is None else f"{kind.__name__} '{service_id}'"
            raise ServiceNotFoundError(f"Service of type {target} not found", kind=kind)
        return service

    def __repr__(self) -> str:
        names = ", ".join(type(s).__name__ for s in self._services)
        return f"Kernel(services=[{names}])"


__all__ = ["Kernel"]
