"""Tests for MessageOperations and LogOperations."""

import pytest

from common.exception.exceptions import EncodingError
from conversation.api.dialog_nodes import DialogNodeOperations
from conversation.api.logs import LogOperations
from conversation.api.message import MessageOperations
from conversation.models import InputData, MessageResponse


def message_response(conversation_id, turn, text):
    return {
        "input": {"text": "hi"},
        "intents": [{"intent": "greeting", "confidence": 0.98}],
        "entities": [],
        "context": {
            "conversation_id": conversation_id,
            "system": {
                "dialog_stack": [{"dialog_node": "root"}],
                "dialog_turn_counter": turn,
                "dialog_request_counter": turn,
            },
            "reprompt": False,
        },
        "output": {"log_messages": [], "text": [text], "nodes_visited": ["node_1"]},
    }


@pytest.fixture
def messages(api_client):
    return MessageOperations(client=api_client)


@pytest.fixture
def logs(api_client):
    return LogOperations(client=api_client)


class TestMessageOperations:
    """Test the message exchange."""

    @pytest.mark.asyncio
    async def test_plain_text_input(self, server, messages):
        """Test that a string input is wrapped into an input object."""
        server.respond(200, json=message_response("conv-1", 1, "Hello!"))

        response = await messages.message("ws-1", "hi")

        assert server.last_request.method == "POST"
        assert server.last_path == "/api/v1/workspaces/ws-1/message"
        assert server.last_query == [("version", "2017-05-26")]
        assert server.last_json == {"input": {"text": "hi"}}
        assert isinstance(response, MessageResponse)
        assert response.output.text == ["Hello!"]
        assert response.intents[0].intent == "greeting"

    @pytest.mark.asyncio
    async def test_empty_message_starts_conversation(self, server, messages):
        """Test that a message without input sends an empty object."""
        server.respond(200, json=message_response("conv-1", 1, "Welcome"))

        await messages.message("ws-1")

        assert server.last_json == {}

    @pytest.mark.asyncio
    async def test_input_data_extras_are_sent(self, server, messages):
        server.respond(200, json=message_response("conv-1", 1, "Hello!"))

        await messages.message(
            "ws-1", InputData(text="hi", spelling_suggestions=True), alternate_intents=True
        )

        assert server.last_json == {
            "input": {"text": "hi", "spelling_suggestions": True},
            "alternate_intents": True,
        }

    @pytest.mark.asyncio
    async def test_context_is_threaded_between_turns(self, server, messages):
        """Test that the context of one turn is sent back unchanged in the next."""
        first_turn = message_response("conv-1", 1, "Hello! What can I do for you?")
        server.respond(200, json=first_turn)
        server.respond(200, json=message_response("conv-1", 2, "Turning on the lights"))

        first = await messages.message("ws-1", "hi")
        second = await messages.message("ws-1", "turn on the lights", context=first.context)

        assert server.last_json == {
            "input": {"text": "turn on the lights"},
            "context": first_turn["context"],
        }
        assert second.context.conversation_id == "conv-1"
        assert second.context.system.additional_properties["dialog_turn_counter"] == 2
        assert second.context.additional_properties == {"reprompt": False}

    @pytest.mark.asyncio
    async def test_previous_intents_and_entities(self, server, messages):
        """Test sending the recognized intents and entities back to the service."""
        first_turn = message_response("conv-1", 1, "Which room?")
        first_turn["entities"] = [{"entity": "room", "location": [0, 7], "value": "kitchen"}]
        server.respond(200, json=first_turn)
        server.respond(200, json=message_response("conv-1", 2, "Done"))

        first = await messages.message("ws-1", "kitchen")
        await messages.message(
            "ws-1",
            "yes",
            context=first.context,
            intents=first.intents,
            entities=first.entities,
            output=first.output,
        )

        body = server.last_json
        assert body["intents"] == [{"intent": "greeting", "confidence": 0.98}]
        assert body["entities"] == [{"entity": "room", "location": [0, 7], "value": "kitchen"}]
        assert body["output"] == first_turn["output"]

    @pytest.mark.asyncio
    async def test_invalid_workspace_id(self, server, messages):
        with pytest.raises(EncodingError):
            await messages.message("", "hi")

        assert server.requests == []


class TestLogOperations:
    """Test listing conversation logs."""

    @pytest.mark.asyncio
    async def test_list_logs(self, server, logs):
        server.respond(
            200,
            json={
                "logs": [
                    {
                        "request": {"input": {"text": "hi"}},
                        "response": message_response("conv-1", 1, "Hello!"),
                        "log_id": "log-1",
                        "request_timestamp": "2017-05-26T10:00:00.000Z",
                        "response_timestamp": "2017-05-26T10:00:00.120Z",
                    }
                ],
                "pagination": {"next_url": "/v1/workspaces/ws-1/logs?cursor=abc", "next_cursor": "abc"},
            },
        )

        result = await logs.list_logs(
            "ws-1", sort="-request_timestamp", filter="response.top_intent:greeting", page_limit=20
        )

        assert server.last_path == "/api/v1/workspaces/ws-1/logs"
        assert server.last_query == [
            ("version", "2017-05-26"),
            ("sort", "-request_timestamp"),
            ("filter", "response.top_intent:greeting"),
            ("page_limit", "20"),
        ]
        assert result.logs[0].log_id == "log-1"
        assert result.logs[0].response.output.text == ["Hello!"]
        assert result.pagination.next_cursor == "abc"


class TestOperationLogging:
    """Test that mutating operations log whether or not a record comes back."""

    @pytest.mark.asyncio
    async def test_message_logged_without_response_body(self, server, messages, caplog):
        server.respond(200)

        with caplog.at_level("INFO", logger="conversation.api.message"):
            response = await messages.message("ws-1", "hi")

        assert response is None
        assert "Sent message to workspace ws-1" in caplog.messages

    @pytest.mark.asyncio
    async def test_dialog_node_logged_without_response_body(self, server, api_client, caplog):
        operations = DialogNodeOperations(client=api_client)
        server.respond(201)
        server.respond(200)

        with caplog.at_level("INFO", logger="conversation.api.dialog_nodes"):
            await operations.create_dialog_node("ws-1", "root")
            await operations.update_dialog_node("ws-1", "root", "start")

        assert "Created dialog node root in workspace ws-1" in caplog.messages
        assert "Updated dialog node root in workspace ws-1" in caplog.messages
