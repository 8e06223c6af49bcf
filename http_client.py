# http_client.py
"""Async client for the Gemini text-generation API with canned fallbacks.

Provides a LegalAssistantClient async context manager that answers
free-text legal questions.  ``generate()`` never raises: when no API key
is configured, or the API keeps failing, it logs a degraded response and
returns a canned answer keyed on the question's wording.

Usage:
    async with LegalAssistantClient() as client:
        answer = await client.generate("How do I contest a property will?")
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

import httpx
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
    before_sleep_log,
    RetryError,
)

import config

logger = logging.getLogger(__name__)

SAFETY_SETTINGS = [
    {"category": category, "threshold": "BLOCK_MEDIUM_AND_ABOVE"}
    for category in (
        "HARM_CATEGORY_HARASSMENT",
        "HARM_CATEGORY_HATE_SPEECH",
        "HARM_CATEGORY_SEXUALLY_EXPLICIT",
        "HARM_CATEGORY_DANGEROUS_CONTENT",
    )
]

PROMPT_TEMPLATE = """\
You are a helpful legal assistant. Provide a brief, informative response to the following legal query.
Do not provide specific legal advice, but rather general information and suggest consulting with a qualified advocate.

Query: "{query}"
"""

FALLBACK_RESPONSES = {
    "property": (
        "Property disputes typically involve disagreements over ownership, boundaries, "
        "or usage rights. These cases often require documentation like property deeds, "
        "survey reports, and previous agreements. I recommend consulting with a Real "
        "Estate Law specialist who can review your specific situation and advise on the "
        "best course of action. Remember that property laws can vary significantly by "
        "location, so local expertise is valuable."
    ),
    "family": (
        "Family law matters like divorce and custody require careful consideration of "
        "many factors. These cases typically involve division of assets, determination "
        "of support payments, and creating parenting plans. Each family's situation is "
        "unique, and outcomes depend on many specific details. I recommend consulting "
        "with a Family Law advocate who can provide guidance tailored to your "
        "circumstances and help you understand your rights and responsibilities."
    ),
    "criminal": (
        "Criminal law matters are serious and require immediate attention from a "
        "qualified legal professional. If you're facing criminal charges or "
        "investigation, you have important rights that need protection. The specific "
        "procedures and potential consequences vary widely depending on the nature of "
        "the charges and your jurisdiction. I strongly recommend consulting with a "
        "Criminal Law advocate who can provide confidential advice specific to your "
        "situation and help ensure your rights are protected throughout the legal process."
    ),
    "general": (
        "Thank you for your question. Legal matters often involve complex "
        "considerations that depend on specific details of your situation. While I can "
        "provide general information, your case likely has unique aspects that require "
        "personalized attention. I recommend consulting with a qualified advocate who "
        "specializes in this area of law. They can review the specific details of your "
        "situation, explain your rights and options, and help you determine the best "
        "path forward based on your particular circumstances and applicable laws."
    ),
}

_FALLBACK_KEYWORDS = (
    ("property", ("property", "land", "real estate")),
    ("family", ("divorce", "custody", "marriage")),
    ("criminal", ("crime", "arrest", "police")),
)


def fallback_response(query: str) -> str:
    """Return the canned answer whose keywords first appear in *query*."""
    lowered = (query or "").lower()
    for topic, keywords in _FALLBACK_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return FALLBACK_RESPONSES[topic]
    return FALLBACK_RESPONSES["general"]


class GenerationError(Exception):
    """Raised when a generation request fails and should be retried."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class LegalAssistantClient:
    """Async context manager providing retried, rate-limited text generation.

    Keeps a single httpx.AsyncClient alive across requests and limits
    concurrency with an asyncio.Semaphore.
    """

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        max_concurrent: int | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_key = api_key if api_key is not None else config.GEMINI_API_KEY
        self._model = model or config.GEMINI_MODEL
        self._semaphore = asyncio.Semaphore(max_concurrent or config.MAX_CONCURRENT)
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def enabled(self) -> bool:
        return bool(self._api_key)

    async def __aenter__(self) -> LegalAssistantClient:
        if self.enabled:
            self._client = httpx.AsyncClient(
                base_url=config.GEMINI_BASE_URL,
                timeout=config.REQUEST_TIMEOUT,
                transport=self._transport,
            )
            logger.info("Legal assistant ready (model %s)", self._model)
        else:
            logger.info("No GEMINI_API_KEY set; legal assistant uses canned answers")
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def generate(self, query: str) -> str:
        """Answer *query*, or return a canned fallback on any failure.

        Args:
            query: The user's free-text legal question.

        Returns:
            The model's answer, or the keyword-matched fallback text when
            the API is unavailable, errors after all retries, or returns
            no usable text.
        """
        if not self.enabled:
            return fallback_response(query)
        if self._client is None:
            raise RuntimeError(
                "LegalAssistantClient must be used as an async context manager"
            )

        async with self._semaphore:
            try:
                text = await self._generate_with_retry(query)
            except (RetryError, GenerationError) as exc:
                logger.warning(
                    "Degraded response: generation failed after %d attempts: %s",
                    config.MAX_RETRIES,
                    exc,
                )
                return fallback_response(query)

        if not text:
            logger.warning("Degraded response: model returned no text")
            return fallback_response(query)
        return text

    async def _generate_with_retry(self, query: str) -> Optional[str]:
        """Inner request wrapped with tenacity retry logic.

        The retry decorator is applied dynamically so that config values
        are read at call time rather than import time.
        """

        @retry(
            retry=retry_if_exception_type(GenerationError),
            stop=stop_after_attempt(config.MAX_RETRIES),
            wait=wait_exponential(
                multiplier=config.RETRY_BACKOFF_BASE,
                min=config.RETRY_BACKOFF_BASE,
                max=config.RETRY_BACKOFF_BASE ** config.MAX_RETRIES,
            ),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        )
        async def _do_generate() -> Optional[str]:
            return await self._single_generate(query)

        return await _do_generate()

    async def _single_generate(self, query: str) -> Optional[str]:
        """Send one generateContent request and return its text or raise GenerationError."""
        payload = {
            "contents": [{"parts": [{"text": PROMPT_TEMPLATE.format(query=query)}]}],
            "safetySettings": SAFETY_SETTINGS,
        }
        url = f"/models/{self._model}:generateContent"

        try:
            response = await self._client.post(
                url, params={"key": self._api_key}, json=payload
            )
        except httpx.HTTPError as exc:
            logger.warning("Generation request error: %s", exc)
            raise GenerationError(f"Transport error: {exc}") from exc

        status = response.status_code
        logger.debug("Generation response: %s", status)

        if status == 429 or status >= 500:
            raise GenerationError(f"HTTP {status}", status_code=status)
        if status >= 400:
            # Bad key or request: retrying will not help
            logger.warning("Generation rejected with HTTP %d", status)
            return None

        try:
            data = response.json()
        except ValueError:
            logger.warning("Generation response was not JSON")
            return None
        return extract_text(data)


def extract_text(data: dict) -> Optional[str]:
    """Join the text parts of the first candidate, or None if there are none."""
    candidates = data.get("candidates") or []
    if not candidates:
        reason = (data.get("promptFeedback") or {}).get("blockReason")
        if reason:
            logger.warning("Prompt blocked: %s", reason)
        return None

    parts = (candidates[0].get("content") or {}).get("parts") or []
    text = "".join(part.get("text", "") for part in parts).strip()
    return text or None
