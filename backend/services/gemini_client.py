"""Google Gemini API wrapper with error handling."""

import asyncio
import json
import logging

from google import genai
from google.genai import errors, types

from config import settings

logger = logging.getLogger(__name__)

_client: genai.Client | None = None


class GeminiError(RuntimeError):
    """Gemini call failed. ``status_code`` is the HTTP status when known."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


def get_client() -> genai.Client | None:
    global _client
    if not settings.gemini_api_key:
        logger.warning("No GEMINI_API_KEY set - Gemini features disabled")
        return None
    if _client is None:
        _client = genai.Client(api_key=settings.gemini_api_key)
    return _client


def _strip_code_fences(text: str) -> str:
    text = text.strip()
    if text.startswith("```"):
        text = text.split("\n", 1)[1] if "\n" in text else text[3:]
        if text.endswith("```"):
            text = text[:-3]
        text = text.strip()
    return text


async def generate_json(prompt: str) -> dict:
    """Send a prompt to Gemini and parse the JSON response.

    Raises ``GeminiError`` on any failure.
    """
    client = get_client()
    if client is None:
        raise GeminiError("Gemini API key not configured")

    try:
        response = await asyncio.wait_for(
            client.aio.models.generate_content(
                model=settings.gemini_model,
                contents=prompt,
                config=types.GenerateContentConfig(
                    temperature=0.3,
                    max_output_tokens=4096,
                    response_mime_type="application/json",
                ),
            ),
            timeout=settings.gemini_timeout_seconds,
        )
    except asyncio.TimeoutError as e:
        logger.error("Gemini request timed out after %.0fs", settings.gemini_timeout_seconds)
        raise GeminiError(f"Gemini request timed out after {settings.gemini_timeout_seconds:.0f}s") from e
    except errors.APIError as e:
        logger.error("Gemini API error %s: %s", e.code, e.message)
        raise GeminiError(f"Gemini API error {e.code}: {e.message}", status_code=e.code) from e

    try:
        data = json.loads(_strip_code_fences(response.text or ""))
    except json.JSONDecodeError as e:
        logger.error("Failed to parse Gemini response as JSON: %s", e)
        raise GeminiError(f"Gemini returned invalid JSON: {e}") from e

    if not isinstance(data, dict):
        raise GeminiError("Gemini returned JSON that is not an object")
    return data
