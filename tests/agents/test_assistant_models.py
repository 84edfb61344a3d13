from types import SimpleNamespace

from pydantic import ValidationError
import pytest

from assistant_agents.agents import AssistantCreationOptions, AssistantDefinition, GptChannel


def test_options_omit_unset_fields():
    options = AssistantCreationOptions.build(model="gpt-4o", name="Helper")

    assert options.to_request() == {"model": "gpt-4o", "name": "Helper", "tools": []}


def test_options_tool_flags():
    assert AssistantCreationOptions.build(model="m", enable_retrieval=True).tools == [{"type": "file_search"}]
    assert AssistantCreationOptions.build(model="m", enable_code_interpreter=True).tools == [
        {"type": "code_interpreter"}
    ]


def test_options_require_a_model():
    with pytest.raises(ValidationError):
        AssistantCreationOptions.build(model="")


def test_definition_snapshot_is_read_only():
    metadata = {"team": "docs"}
    assistant = SimpleNamespace(
        id="asst_1",
        model="gpt-4o",
        name="Helper",
        description=None,
        instructions="Be brief.",
        tools=[{"type": "code_interpreter"}, SimpleNamespace(type="file_search")],
        metadata=metadata,
    )

    definition = AssistantDefinition.from_assistant(assistant)
    metadata["team"] = "changed"

    assert definition.tools == ("code_interpreter", "file_search")
    assert definition.metadata["team"] == "docs"
    with pytest.raises(TypeError):
        definition.metadata["team"] = "other"  # type: ignore[index]
    with pytest.raises(AttributeError):
        definition.name = "Other"  # type: ignore[misc]


def test_channel_identity_is_thread_id():
    client = object()

    channel = GptChannel(client=client, thread_id="thread_1")

    assert channel == GptChannel(client=object(), thread_id="thread_1")
    assert "thread_1" in repr(channel)
    assert channel.client is client
