"""Tests for RelayService."""
import pytest
from langchain_core.messages import AIMessage, HumanMessage, SystemMessage

from neura.schemas.chat import ChatTurn
from neura.services.chat import RelayError


class TestBuildMessages:
    def test_order_without_history(self, relay):
        messages = relay.build_messages("How do I sleep better?")

        assert [type(m) for m in messages] == [
            SystemMessage,
            HumanMessage,
            AIMessage,
            HumanMessage,
        ]
        assert messages[0].content == "Be kind."
        assert messages[1].content == "Hi there."
        assert messages[2].content == "Hello, how can I help?"
        assert messages[3].content == "How do I sleep better?"

    def test_history_between_seed_and_message(self, relay):
        history = [
            ChatTurn(role="user", content="I had a rough day."),
            ChatTurn(role="assistant", content="I'm sorry to hear that."),
        ]

        messages = relay.build_messages("It was work.", history)

        assert isinstance(messages[3], HumanMessage)
        assert isinstance(messages[4], AIMessage)
        assert messages[3].content == "I had a rough day."
        assert messages[4].content == "I'm sorry to hear that."
        assert messages[5].content == "It was work."


class TestReply:
    @pytest.mark.asyncio
    async def test_returns_stripped_text(self, relay, fake_llm):
        fake_llm.ainvoke.return_value = AIMessage(content="  Breathe slowly.\n")

        assert await relay.reply("help") == "Breathe slowly."
        fake_llm.ainvoke.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_joins_content_parts(self, relay, fake_llm):
        fake_llm.ainvoke.return_value = AIMessage(
            content=[{"type": "text", "text": "One, "}, "two."]
        )

        assert await relay.reply("count") == "One, two."

    @pytest.mark.asyncio
    async def test_provider_error_becomes_relay_error(self, relay, fake_llm):
        fake_llm.ainvoke.side_effect = ConnectionError("network down")

        with pytest.raises(RelayError) as exc_info:
            await relay.reply("hello")

        assert exc_info.value.message == "Failed to process your message"
        assert isinstance(exc_info.value.__cause__, ConnectionError)

    @pytest.mark.asyncio
    async def test_empty_completion_is_an_error(self, relay, fake_llm):
        fake_llm.ainvoke.return_value = AIMessage(content="")

        with pytest.raises(RelayError):
            await relay.reply("hello")

    @pytest.mark.asyncio
    async def test_null_text_part_is_an_error(self, relay, fake_llm):
        fake_llm.ainvoke.return_value = AIMessage(
            content=[{"type": "text", "text": None}]
        )

        with pytest.raises(RelayError):
            await relay.reply("hello")

    @pytest.mark.asyncio
    async def test_response_without_content_is_an_error(self, relay, fake_llm):
        fake_llm.ainvoke.return_value = object()

        with pytest.raises(RelayError) as exc_info:
            await relay.reply("hello")

        assert isinstance(exc_info.value.__cause__, AttributeError)
