"""Mock LLM provider for tests and offline development.

Replies are canned per TaskType. The factory builds one when
``llm_provider == "mock"``; tests usually inject one into the factory
singleton (see the ``mock_llm`` fixture).
"""

from typing import Any

from careercampus.providers.errors import ProviderError
from careercampus.providers.llm.base import (
    LLMMessage,
    LLMProvider,
    LLMResponse,
    TaskType,
)

MOCK_MODEL = "mock-model"


class MockLLMProvider(LLMProvider):
    """In-memory provider with canned replies and failures.

    Attributes:
        responses: Reply text per task. None simulates an empty reply;
            a missing task gets "Mock response for <task>".
        errors: Provider errors to raise per task, checked before replies.
        calls: Every request, as {"method", "messages", "task", "kwargs"}.
        last_task: Task of the most recent request.
    """

    def __init__(self, responses: dict[TaskType, str | None] | None = None) -> None:
        # No ProviderConfig: nothing here reads settings.
        self.responses: dict[TaskType, str | None] = dict(responses or {})
        self.errors: dict[TaskType, ProviderError] = {}
        self.calls: list[dict[str, Any]] = []
        self.last_task: TaskType | None = None

    @property
    def provider_name(self) -> str:
        """Return 'mock' for logging."""
        return "mock"

    def get_model_for_task(self, _task: TaskType) -> str:
        """Every task uses MOCK_MODEL."""
        return MOCK_MODEL

    def set_response(self, task: TaskType, content: str | None) -> None:
        """Reply with ``content`` for ``task``, clearing any configured error."""
        self.responses[task] = content
        self.errors.pop(task, None)

    def set_error(self, task: TaskType, error: ProviderError) -> None:
        """Raise ``error`` for every request with ``task``."""
        self.errors[task] = error

    async def complete(
        self,
        messages: list[LLMMessage],
        task: TaskType,
        max_tokens: int | None = None,
        temperature: float | None = None,
        json_mode: bool = False,
        response_schema: dict[str, Any] | None = None,
    ) -> LLMResponse:
        """Record the request, then raise or reply as configured."""
        self.calls.append(
            {
                "method": "complete",
                "messages": messages,
                "task": task,
                "kwargs": {
                    "max_tokens": max_tokens,
                    "temperature": temperature,
                    "json_mode": json_mode,
                    "response_schema": response_schema,
                },
            }
        )
        self.last_task = task

        error = self.errors.get(task)
        if error is not None:
            raise error

        return LLMResponse(
            content=self.responses.get(task, f"Mock response for {task.value}"),
            model=MOCK_MODEL,
            input_tokens=sum(len((m.content or "").split()) for m in messages),
            output_tokens=0,
            finish_reason="STOP",
            latency_ms=0.0,
        )

    def assert_called_with_task(self, task: TaskType) -> None:
        """Fail the test unless some request used ``task``."""
        tasks_called = [c["task"] for c in self.calls]
        assert task in tasks_called, f"Expected {task}, got {tasks_called}"
