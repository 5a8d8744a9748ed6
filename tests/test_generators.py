import asyncio
import pytest
from unittest import mock

from backend.constants import SYSTEM_PROMPT
from backend.generators import gemini_review

# --- Tests for gemini_review ---

def make_client(generate_content):
    client = mock.Mock()
    client.aio.models.generate_content = generate_content
    return client

def test_gemini_review_returns_text():
    generate_content = mock.AsyncMock(return_value=mock.Mock(text="looks good"))

    async def run_test():
        return await gemini_review(make_client(generate_content), "x = 1", "gemini-test", 5)

    assert asyncio.run(run_test()) == "looks good"

    kwargs = generate_content.await_args.kwargs
    assert kwargs["model"] == "gemini-test"
    assert kwargs["contents"] == "x = 1"
    assert kwargs["config"].system_instruction == SYSTEM_PROMPT

def test_gemini_review_timeout():
    async def slow_generate(**kwargs):
        await asyncio.sleep(1)

    async def run_test():
        await gemini_review(make_client(slow_generate), "x = 1", "gemini-test", 0.01)

    with pytest.raises(asyncio.TimeoutError):
        asyncio.run(run_test())

def test_gemini_review_propagates_errors():
    generate_content = mock.AsyncMock(side_effect=RuntimeError("quota exceeded"))

    async def run_test():
        await gemini_review(make_client(generate_content), "x = 1", "gemini-test", 5)

    with pytest.raises(RuntimeError, match="quota exceeded"):
        asyncio.run(run_test())

def test_system_prompt_lists_mandatory_sections():
    for section in (
        "❌ Bad Code",
        "🔍 Issues",
        "✅ Recommended Fix",
        "💡 Improvements",
        "🏆 Best Practice Verdict",
    ):
        assert section in SYSTEM_PROMPT
