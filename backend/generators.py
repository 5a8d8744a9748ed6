import asyncio
from typing import Optional

from google import genai
from google.genai import types

from backend.constants import SYSTEM_PROMPT


async def gemini_review(
    client: genai.Client,
    code: str,
    model: str,
    timeout: float,
) -> Optional[str]:
    """
    Send the code to Gemini with the reviewer system instruction.

    Returns the generated text (None when the model produced no text).
    Raises asyncio.TimeoutError when the call exceeds `timeout` seconds and
    lets provider errors propagate to the caller.
    """
    response = await asyncio.wait_for(
        client.aio.models.generate_content(
            model=model,
            contents=code,
            config=types.GenerateContentConfig(system_instruction=SYSTEM_PROMPT),
        ),
        timeout=timeout,
    )
    return response.text
