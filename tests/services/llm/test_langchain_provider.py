import pytest
from langchain_core.language_models.fake_chat_models import FakeListChatModel
from langchain_openai import AzureChatOpenAI, ChatOpenAI

from assistant_agents.services.llm import AgentConfigError, AzureOpenAIChatService, OpenAIChatService
from assistant_agents.services.llm.langchain_provider import chat_service_from_model


def test_chat_openai_maps_to_openai_service(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("OPENAI_ORG_ID", raising=False)
    monkeypatch.delenv("OPENAI_ORGANIZATION", raising=False)
    llm = ChatOpenAI(model="gpt-4o", api_key="sk-test")

    service = chat_service_from_model(llm, service_id="default")

    assert service == OpenAIChatService(model_id="gpt-4o", service_id="default")


def test_azure_chat_openai_maps_to_azure_service():
    llm = AzureChatOpenAI(
        azure_endpoint="https://contoso.openai.azure.com",
        azure_deployment="gpt4-prod",
        api_version="2024-06-01",
        api_key="azure-key",
    )

    service = chat_service_from_model(llm)

    assert isinstance(service, AzureOpenAIChatService)
    assert service.deployment_name == "gpt4-prod"
    assert service.endpoint == "https://contoso.openai.azure.com"
    assert service.api_version == "2024-06-01"


def test_other_chat_models_are_rejected():
    with pytest.raises(AgentConfigError):
        chat_service_from_model(FakeListChatModel(responses=["ok"]))


def test_non_models_are_rejected():
    with pytest.raises(AgentConfigError):
        chat_service_from_model("gpt-4o")


def test_azure_chat_openai_without_deployment_is_rejected(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("AZURE_OPENAI_DEPLOYMENT_NAME", raising=False)
    llm = AzureChatOpenAI(
        azure_endpoint="https://contoso.openai.azure.com",
        api_version="2024-06-01",
        api_key="azure-key",
    )

    with pytest.raises(AgentConfigError, match="azure_deployment"):
        chat_service_from_model(llm)
