import anyio
import pytest
from pydantic import ValidationError

from chat_relay.core.errors import ChatValidationError
from chat_relay.models.chat import ChatRequest
from chat_relay.services.prompt import RelayConfig, SamplingConfig
from chat_relay.services.relay_service import RelayService


class _RecordingGenerator:
    def __init__(self):
        self.calls = []

    async def generate_text(self, contents, sampling):
        self.calls.append((contents, sampling))
        return "ok"


def test_reply_uses_injected_config():
    generator = _RecordingGenerator()
    config = RelayConfig(
        system_instruction="Be brief.",
        sampling=SamplingConfig(temperature=0.1),
    )
    service = RelayService(generator, config=config)

    response = anyio.run(service.reply, ChatRequest(message="hi"))

    assert response.reply == "ok"
    contents, sampling = generator.calls[0]
    assert contents[0].parts[0].text == "Be brief."
    assert sampling.temperature == 0.1


@pytest.mark.parametrize("request_", [None, ChatRequest(), ChatRequest(message=""), ChatRequest(message=3)])
def test_reply_validates_before_calling_upstream(request_):
    generator = _RecordingGenerator()
    service = RelayService(generator)

    with pytest.raises(ChatValidationError) as exc_info:
        anyio.run(service.reply, request_)

    assert exc_info.value.status_code == 400
    assert exc_info.value.message == "message is required (string)"
    assert generator.calls == []


def test_config_is_immutable():
    config = RelayConfig()

    with pytest.raises(ValidationError):
        config.system_instruction = "changed"


def test_reply_rejects_non_list_history_after_message_check():
    generator = _RecordingGenerator()
    service = RelayService(generator)

    with pytest.raises(ChatValidationError):
        anyio.run(service.reply, ChatRequest(history="x"))

    with pytest.raises(TypeError):
        anyio.run(service.reply, ChatRequest(message="hi", history={"a": 1}))

    assert generator.calls == []


def test_turns_coerce_entries():
    request = ChatRequest(
        message="hi",
        history=[
            {"role": "model", "text": "B"},
            {"role": "user", "text": {"a": 1}},
            {"role": "user", "text": [1, 2]},
            None,
        ],
    )

    assert [(t.role, t.text) for t in request.turns()] == [
        ("model", "B"),
        ("user", '{"a": 1}'),
        ("user", "[1, 2]"),
        ("user", ""),
    ]
    assert ChatRequest(message="hi", history=None).turns() == []
