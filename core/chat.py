"""
core/chat.py
────────────────────────────────────────────────────────────────────────
Stateless "chef" chat: one message in, one reply + related recipes out.

    received → prompt built → Gemini attempted → success | failure → reply

Nothing is remembered between calls, and `ChefChat.chat()` never raises:
every Gemini problem lands in the keyword fallback table.
"""
from __future__ import annotations

import logging

from pydantic import BaseModel

from core.fallbacks import fallback_chat_response
from core.matching import RecipeMatcher
from core.models import RecipeRef
from services.gemini import GeminiUnavailable, TextGenerator

_LOG = logging.getLogger(__name__)


class ChatReply(BaseModel):
    response: str
    recipes: list[RecipeRef] = []


def build_chat_prompt(message: str) -> str:
    return (
        "You are a helpful chef assistant providing recipe ideas and cooking advice. "
        f"The user is asking about: {message}\n\n"
        "Provide a helpful, detailed response with cooking instructions if they're "
        "asking for a recipe. If they're asking for cooking advice, give clear, "
        "practical tips. Focus exclusively on food and cooking topics; politely "
        "decline anything else.\n\n"
        "Format lightly so the app can render it: start section headers with '#', "
        "use **bold** and *italic* for emphasis, and '-' for list items."
    )


class ChefChat:
    def __init__(self, llm: TextGenerator, matcher: RecipeMatcher) -> None:
        self._llm = llm
        self._matcher = matcher

    async def chat(self, message: str) -> ChatReply:
        prompt = build_chat_prompt(message)
        _LOG.debug("chat prompt built (%d chars)", len(prompt))

        try:
            text = await self._llm.generate(prompt)
        except GeminiUnavailable as exc:
            _LOG.warning("chat falling back: %s", exc)
            return ChatReply(response=fallback_chat_response(message), recipes=[])

        if not text.strip():
            _LOG.warning("chat falling back: empty reply")
            return ChatReply(response=fallback_chat_response(message), recipes=[])

        return ChatReply(response=text, recipes=await self._related(message))

    async def _related(self, message: str) -> list[RecipeRef]:
        # best effort: [] on store errors
        try:
            return await self._matcher.related_for_chat(message)
        except Exception:
            _LOG.exception("related-recipe lookup failed")
            return []
