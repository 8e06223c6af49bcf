# commands/ask.py
"""Ask the legal assistant a free-text question."""

from __future__ import annotations

from http_client import LegalAssistantClient


async def run(question: str, client: LegalAssistantClient | None = None) -> str:
    """Return the assistant's answer to *question* (canned text when degraded)."""
    if client is not None:
        return await client.generate(question)
    async with LegalAssistantClient() as assistant:
        return await assistant.generate(question)
