"""Retry wrapper around an async chat completion client.

Keeps the chat.completions.create surface so it can be handed to the
analyzer in place of the raw client. Only transient API errors are retried;
the last error is re-raised once attempts run out.
"""

import logging
from typing import Any

import openai
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_fixed,
    before_sleep_log,
)

from ..log import get_logger

logger = get_logger(__name__)

TRANSIENT_ERRORS = (
    openai.APIConnectionError,
    openai.APITimeoutError,
    openai.RateLimitError,
    openai.InternalServerError,
)


class _RetryingCompletions:
    def __init__(self, completions: Any, attempts: int, wait_seconds: float):
        self._completions = completions
        self._attempts = attempts
        self._wait_seconds = wait_seconds

    async def create(self, **kwargs: Any) -> Any:
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(self._attempts),
            wait=wait_fixed(self._wait_seconds),
            retry=retry_if_exception_type(TRANSIENT_ERRORS),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        ):
            with attempt:
                return await self._completions.create(**kwargs)


class _RetryingChat:
    def __init__(self, completions: _RetryingCompletions):
        self.completions = completions


class RetryingClient:
    def __init__(self, client: Any, attempts: int = 3, wait_seconds: float = 2.0):
        if attempts < 1:
            raise ValueError("attempts must be >= 1")
        self.client = client
        self.chat = _RetryingChat(
            _RetryingCompletions(client.chat.completions, attempts, wait_seconds)
        )
