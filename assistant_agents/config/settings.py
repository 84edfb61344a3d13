from __future__ import annotations

"""
Assistants API settings.

Priority:
1) Environment variables (a project `.env` is loaded without overriding)
2) config/main.yaml ("assistants" section)
3) Built-in defaults
"""

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
import yaml

from assistant_agents.services.llm.chat_services import (
    DEFAULT_AZURE_API_VERSION,
    AzureOpenAIChatService,
    ChatCompletionService,
    OpenAIChatService,
)
from assistant_agents.services.llm.exceptions import AgentConfigError
from assistant_agents.services.llm.provider_resolver import PROVIDER_AZURE, PROVIDER_OPENAI

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
load_dotenv(PROJECT_ROOT / ".env", override=False)


def _normalize_provider(value: str) -> str:
    provider = (value or "").strip().lower()
    if provider in {"azure", "azure_openai", "azure-openai", "aoai"}:
        return PROVIDER_AZURE
    if provider in {"openai", "oai", "gpt"}:
        return PROVIDER_OPENAI
    return PROVIDER_OPENAI


def _optional(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def load_main_config(project_root: Path) -> dict[str, Any]:
    path = project_root / "config" / "main.yaml"
    if not path.exists():
        return {}
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"invalid yaml mapping: {path}")
    return data


@dataclass(frozen=True)
class AssistantSettings:
    provider: str
    openai_api_key: str | None = None
    openai_model_id: str | None = None
    openai_org_id: str | None = None
    azure_api_key: str | None = None
    azure_endpoint: str | None = None
    azure_deployment_name: str | None = None
    azure_api_version: str = DEFAULT_AZURE_API_VERSION
    log_level: str = "INFO"
    log_dir: str | None = None

    @property
    def api_key(self) -> str | None:
        """API key for the selected provider."""
        if self.provider == PROVIDER_AZURE:
            return self.azure_api_key
        return self.openai_api_key

    def chat_service(self) -> ChatCompletionService:
        """Build the chat completion service for the selected provider."""
        if self.provider == PROVIDER_AZURE:
            if not self.azure_endpoint:
                raise AgentConfigError(
                    "AZURE_OPENAI_ENDPOINT must be configured", provider=PROVIDER_AZURE
                )
            if not self.azure_deployment_name:
                raise AgentConfigError(
                    "AZURE_OPENAI_CHAT_DEPLOYMENT_NAME must be configured",
                    provider=PROVIDER_AZURE,
                )
            return AzureOpenAIChatService(
                deployment_name=self.azure_deployment_name,
                endpoint=self.azure_endpoint,
                api_version=self.azure_api_version,
            )
        if not self.openai_model_id:
            raise AgentConfigError(
                "OPENAI_CHAT_MODEL_ID must be configured", provider=PROVIDER_OPENAI
            )
        return OpenAIChatService(model_id=self.openai_model_id, org_id=self.openai_org_id)


def get_assistant_settings(project_root: Path | None = None) -> AssistantSettings:
    if project_root is None:
        project_root = PROJECT_ROOT

    cfg = load_main_config(project_root)
    section = cfg.get("assistants", {}) or {}
    if not isinstance(section, dict):
        raise ValueError("'assistants' section of config/main.yaml must be a mapping")

    openai_cfg = section.get("openai", {}) or {}
    azure_cfg = section.get("azure", {}) or {}

    provider = _normalize_provider(
        os.getenv("ASSISTANTS_PROVIDER") or str(section.get("provider", PROVIDER_OPENAI))
    )

    log_dir = _optional(os.getenv("ASSISTANTS_LOG_DIR") or section.get("log_dir"))
    if log_dir and not Path(log_dir).is_absolute():
        log_dir = str((project_root / log_dir).resolve())

    return AssistantSettings(
        provider=provider,
        openai_api_key=_optional(os.getenv("OPENAI_API_KEY") or openai_cfg.get("api_key")),
        openai_model_id=_optional(os.getenv("OPENAI_CHAT_MODEL_ID") or openai_cfg.get("model_id")),
        openai_org_id=_optional(os.getenv("OPENAI_ORG_ID") or openai_cfg.get("org_id")),
        azure_api_key=_optional(os.getenv("AZURE_OPENAI_API_KEY") or azure_cfg.get("api_key")),
        azure_endpoint=_optional(os.getenv("AZURE_OPENAI_ENDPOINT") or azure_cfg.get("endpoint")),
        azure_deployment_name=_optional(
            os.getenv("AZURE_OPENAI_CHAT_DEPLOYMENT_NAME") or azure_cfg.get("deployment_name")
        ),
        azure_api_version=_optional(
            os.getenv("AZURE_OPENAI_API_VERSION") or azure_cfg.get("api_version")
        )
        or DEFAULT_AZURE_API_VERSION,
        log_level=(os.getenv("ASSISTANTS_LOG_LEVEL") or str(section.get("log_level", "INFO"))).upper(),
        log_dir=log_dir,
    )


__all__ = ["AssistantSettings", "get_assistant_settings", "load_main_config"]
