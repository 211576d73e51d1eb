"""Tests for the mock LLM provider used across the test suite."""

import pytest

from careercampus.providers.errors import TransientError
from careercampus.providers.llm.base import LLMMessage, TaskType
from careercampus.providers.llm.mock_adapter import MockLLMProvider

_MESSAGES = [LLMMessage(role="user", content="Hello")]


class TestMockLLMProvider:
    """Tests for MockLLMProvider behavior."""

    @pytest.mark.asyncio
    async def test_returns_configured_response(self):
        """Configured task responses are returned verbatim."""
        mock = MockLLMProvider({TaskType.RESUME_DRAFT: "# Resume"})
        response = await mock.complete(_MESSAGES, TaskType.RESUME_DRAFT)
        assert response.content == "# Resume"
        assert response.model == "mock-model"
        assert response.finish_reason == "STOP"

    @pytest.mark.asyncio
    async def test_returns_default_response(self):
        """Unconfigured tasks return a default string."""
        mock = MockLLMProvider()
        response = await mock.complete(_MESSAGES, TaskType.ATS_ANALYSIS)
        assert response.content == "Mock response for ats_analysis"

    @pytest.mark.asyncio
    async def test_none_response_simulates_empty_reply(self):
        """A None response yields content None."""
        mock = MockLLMProvider({TaskType.RESUME_DRAFT: None})
        response = await mock.complete(_MESSAGES, TaskType.RESUME_DRAFT)
        assert response.content is None

    @pytest.mark.asyncio
    async def test_configured_error_is_raised(self):
        """set_error() makes the task raise the given error."""
        mock = MockLLMProvider()
        mock.set_error(TaskType.CAREER_RECOMMENDATION, TransientError("down"))
        with pytest.raises(TransientError):
            await mock.complete(_MESSAGES, TaskType.CAREER_RECOMMENDATION)

    @pytest.mark.asyncio
    async def test_set_response_clears_error(self):
        """set_response() replaces a previously configured error."""
        mock = MockLLMProvider()
        mock.set_error(TaskType.RESUME_DRAFT, TransientError("down"))
        mock.set_response(TaskType.RESUME_DRAFT, "ok")
        response = await mock.complete(_MESSAGES, TaskType.RESUME_DRAFT)
        assert response.content == "ok"

    @pytest.mark.asyncio
    async def test_records_calls(self):
        """Each call is recorded with its task and options."""
        mock = MockLLMProvider()
        await mock.complete(
            _MESSAGES, TaskType.ATS_ANALYSIS, temperature=0.2, json_mode=True
        )
        assert mock.last_task == TaskType.ATS_ANALYSIS
        assert mock.calls[0]["kwargs"]["temperature"] == 0.2
        assert mock.calls[0]["kwargs"]["json_mode"] is True
        mock.assert_called_with_task(TaskType.ATS_ANALYSIS)

    def test_assert_called_with_task_fails_when_not_called(self):
        """The helper raises when the task was never requested."""
        mock = MockLLMProvider()
        with pytest.raises(AssertionError):
            mock.assert_called_with_task(TaskType.RESUME_DRAFT)
