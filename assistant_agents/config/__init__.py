from .settings import AssistantSettings, get_assistant_settings, load_main_config

__all__ = ["AssistantSettings", "get_assistant_settings", "load_main_config"]
