import pytest
from langchain_openai import ChatOpenAI

from assistant_agents.config import AssistantSettings
from assistant_agents.services import Kernel
from assistant_agents.services.llm import (
    AgentConfigError,
    AzureOpenAIChatService,
    ChatCompletionService,
    OpenAIChatService,
    ServiceNotFoundError,
)


def test_get_required_service_raises_when_missing():
    kernel = Kernel()

    with pytest.raises(ServiceNotFoundError) as exc_info:
        kernel.get_required_service(ChatCompletionService)

    assert isinstance(exc_info.value, AgentConfigError)
    assert exc_info.value.kind is ChatCompletionService
    assert kernel.get_service(ChatCompletionService) is None


def test_latest_registration_wins():
    first = OpenAIChatService(model_id="gpt-4o-mini")
    second = OpenAIChatService(model_id="gpt-4o")
    kernel = Kernel([first, second])

    assert kernel.get_required_service(ChatCompletionService) is second
    assert kernel.services == (first, second)


def test_lookup_by_service_id():
    openai_service = OpenAIChatService(model_id="gpt-4o", service_id="openai")
    azure_service = AzureOpenAIChatService(
        deployment_name="gpt4-prod",
        endpoint="https://contoso.openai.azure.com",
        service_id="azure",
    )
    kernel = Kernel([openai_service, azure_service])

    assert kernel.get_required_service(ChatCompletionService, "openai") is openai_service
    with pytest.raises(ServiceNotFoundError, match="missing"):
        kernel.get_required_service(ChatCompletionService, "missing")


def test_add_service_rejects_none():
    with pytest.raises(ValueError):
        Kernel().add_service(None)


def test_add_chat_model_registers_converted_service(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("OPENAI_ORG_ID", raising=False)
    monkeypatch.delenv("OPENAI_ORGANIZATION", raising=False)
    kernel = Kernel()

    kernel.add_chat_model(ChatOpenAI(model="gpt-4o", api_key="sk-test"))

    assert kernel.get_required_service(ChatCompletionService) == OpenAIChatService(model_id="gpt-4o")


def test_from_settings_registers_configured_service():
    settings = AssistantSettings(
        provider="azure",
        azure_api_key="azure-key",
        azure_endpoint="https://contoso.openai.azure.com",
        azure_deployment_name="gpt4-prod",
    )

    kernel = Kernel.from_settings(settings)

    service = kernel.get_required_service(ChatCompletionService)
    assert isinstance(service, AzureOpenAIChatService)
    assert service.deployment_name == "gpt4-prod"
