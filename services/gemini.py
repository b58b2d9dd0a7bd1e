# services/gemini.py
from __future__ import annotations

import asyncio
import logging
from typing import Any, Protocol

import httpx
from google import genai
from google.genai import errors as gerrors
from google.genai import types

from config import settings
from core.json_extract import Err, Result, extract_json

_LOG = logging.getLogger(__name__)

# ───────────── Model Names ─────────────
CHAT_MODEL = "gemini-2.0-flash"


class GeminiUnavailable(RuntimeError):
    """Missing key, network/API error, timeout or empty reply – all alike."""


class TextGenerator(Protocol):
    async def generate(
        self,
        prompt: str,
        temperature: float = ...,
        max_output_tokens: int = ...,
    ) -> str: ...


# ───────────── Client ─────────────
class GeminiClient:
    """Thin async wrapper around `google-genai` with a hard timeout."""

    def __init__(
        self,
        api_key: str | None,
        model: str = CHAT_MODEL,
        timeout_seconds: float = 20.0,
    ) -> None:
        self.model = model
        self.timeout_seconds = timeout_seconds
        self._client: genai.Client | None = None
        if api_key:
            self._client = genai.Client(
                api_key=api_key,
                http_options=types.HttpOptions(timeout=int(timeout_seconds * 1000)),
            )
        else:
            _LOG.warning("GEMINI_API_KEY not set – AI features will use fallbacks")

    @property
    def available(self) -> bool:
        return self._client is not None

    async def generate(
        self,
        prompt: str,
        temperature: float = 0.7,
        max_output_tokens: int = 2000,
    ) -> str:
        """Run a completion and return the LLM’s text, or raise GeminiUnavailable."""
        if self._client is None:
            raise GeminiUnavailable("GEMINI_API_KEY not set")

        try:
            resp = await asyncio.wait_for(
                self._client.aio.models.generate_content(
                    model=self.model,
                    contents=[prompt],
                    config=types.GenerateContentConfig(
                        temperature=temperature,
                        max_output_tokens=max_output_tokens,
                    ),
                ),
                timeout=self.timeout_seconds,
            )
        except asyncio.TimeoutError as exc:
            raise GeminiUnavailable(
                f"Gemini call timed out after {self.timeout_seconds:.0f}s"
            ) from exc
        except gerrors.APIError as exc:
            raise GeminiUnavailable(f"Gemini API error {exc.code}: {exc.message}") from exc
        except (httpx.HTTPError, OSError) as exc:
            raise GeminiUnavailable(f"Gemini network error: {exc}") from exc
        except ValueError as exc:
            # UnknownApiResponseError and response-parsing ValidationErrors
            raise GeminiUnavailable(f"Gemini response could not be read: {exc}") from exc
        except Exception as exc:
            _LOG.exception("unexpected error from Gemini SDK")
            raise GeminiUnavailable(f"Gemini call failed: {exc}") from exc

        # take the first candidate’s text
        try:
            text = resp.candidates[0].content.parts[0].text
        except (AttributeError, IndexError, TypeError):
            text = None
        if not text or not text.strip():
            raise GeminiUnavailable("Gemini returned an empty response")
        return text


def client_from_settings() -> GeminiClient:
    return GeminiClient(
        settings.gemini_api_key,
        model=settings.gemini_model,
        timeout_seconds=settings.gemini_timeout_seconds,
    )


# ───────────── Generation → parsed JSON ─────────────
async def request_json(
    llm: TextGenerator,
    prompt: str,
    expect: type = dict,
    **gen_kwargs: Any,
) -> Result[Any]:
    """
    Ask the model and pull the first JSON object (or array) out of the
    reply. Every failure comes back as `Err`, never as an exception.
    """
    try:
        raw = await llm.generate(prompt, **gen_kwargs)
    except GeminiUnavailable as exc:
        return Err(str(exc))

    result = extract_json(raw, expect)
    if isinstance(result, Err):
        _LOG.debug("unparseable Gemini reply (%s) >>>\n%s", result.reason, raw)
    return result
