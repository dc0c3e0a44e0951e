"""OpenAI async client construction and single-message completion calls.

The analyzer only ever sends one system message and reads the first
choice's content; complete() captures that contract in one place.
"""

from typing import Any, Optional
from openai import AsyncOpenAI
from ..config import Settings, get_settings
from .retry import RetryingClient


class EmptyCompletionError(RuntimeError):
    """The completion service answered without message content."""


def build_client(settings: Optional[Settings] = None) -> Any:
    """
    Create the completion client from settings.
    Wrapped in RetryingClient when COMPLETION_MAX_RETRIES > 0.
    """
    settings = settings or get_settings()
    client = AsyncOpenAI(
        api_key=settings.OPENAI_API_KEY,
        base_url=settings.OPENAI_BASE_URL,
    )
    if settings.COMPLETION_MAX_RETRIES > 0:
        return RetryingClient(
            client,
            attempts=settings.COMPLETION_MAX_RETRIES + 1,
            wait_seconds=settings.COMPLETION_RETRY_WAIT_SECONDS,
        )
    return client


async def complete(client: Any, model: str, prompt: str) -> str:
    response = await client.chat.completions.create(
        model=model,
        messages=[{"role": "system", "content": prompt}],
    )
    content = response.choices[0].message.content
    if content is None:
        raise EmptyCompletionError("Completion returned no message content")
    return content
