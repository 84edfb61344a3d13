from pathlib import Path

import pytest
import yaml

from assistant_agents.config import AssistantSettings, get_assistant_settings
from assistant_agents.services.llm import AgentConfigError, AzureOpenAIChatService, OpenAIChatService

_ENV_VARS = (
    "ASSISTANTS_PROVIDER",
    "OPENAI_API_KEY",
    "OPENAI_CHAT_MODEL_ID",
    "OPENAI_ORG_ID",
    "AZURE_OPENAI_API_KEY",
    "AZURE_OPENAI_ENDPOINT",
    "AZURE_OPENAI_CHAT_DEPLOYMENT_NAME",
    "AZURE_OPENAI_API_VERSION",
    "ASSISTANTS_LOG_LEVEL",
    "ASSISTANTS_LOG_DIR",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def _write_yaml(path: Path, data: dict) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")


def test_defaults_without_config(tmp_path: Path):
    settings = get_assistant_settings(project_root=tmp_path)

    assert settings.provider == "openai"
    assert settings.api_key is None
    assert settings.log_level == "INFO"
    assert settings.log_dir is None


def test_yaml_section_is_read(tmp_path: Path):
    _write_yaml(
        tmp_path / "config" / "main.yaml",
        {
            "assistants": {
                "provider": "aoai",
                "azure": {
                    "endpoint": "https://contoso.openai.azure.com",
                    "deployment_name": "gpt4-prod",
                    "api_key": "yaml-key",
                },
                "log_dir": "./logs",
            }
        },
    )

    settings = get_assistant_settings(project_root=tmp_path)

    assert settings.provider == "azure"
    assert settings.api_key == "yaml-key"
    assert settings.log_dir == str((tmp_path / "logs").resolve())
    assert settings.chat_service() == AzureOpenAIChatService(
        deployment_name="gpt4-prod",
        endpoint="https://contoso.openai.azure.com",
    )


def test_env_overrides_yaml(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    _write_yaml(
        tmp_path / "config" / "main.yaml",
        {"assistants": {"provider": "azure", "openai": {"model_id": "gpt-4o-mini"}}},
    )
    monkeypatch.setenv("ASSISTANTS_PROVIDER", "openai")
    monkeypatch.setenv("OPENAI_CHAT_MODEL_ID", "gpt-4o")
    monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
    monkeypatch.setenv("ASSISTANTS_LOG_LEVEL", "debug")

    settings = get_assistant_settings(project_root=tmp_path)

    assert settings.provider == "openai"
    assert settings.api_key == "sk-env"
    assert settings.log_level == "DEBUG"
    assert settings.chat_service() == OpenAIChatService(model_id="gpt-4o")


def test_chat_service_requires_model():
    with pytest.raises(AgentConfigError, match="OPENAI_CHAT_MODEL_ID"):
        AssistantSettings(provider="openai").chat_service()
    with pytest.raises(AgentConfigError, match="AZURE_OPENAI_ENDPOINT"):
        AssistantSettings(provider="azure", azure_deployment_name="d").chat_service()


def test_invalid_section_is_rejected(tmp_path: Path):
    _write_yaml(tmp_path / "config" / "main.yaml", {"assistants": ["not", "a", "mapping"]})

    with pytest.raises(ValueError):
        get_assistant_settings(project_root=tmp_path)
