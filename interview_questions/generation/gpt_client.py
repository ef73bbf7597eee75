"""
Shared LLM helper for the generation pipeline.

Talks to any OpenAI-compatible Chat Completions endpoint. The default is
Groq's endpoint with llama-3.3-70b-versatile; point LLM_BASE_URL at
https://api.openai.com/v1 and set LLM_MODEL to use OpenAI instead.

Every failure (network, auth, quota, missing key) is logged and surfaced as
GenerationFailedError. No retries: the user re-triggers the action.
"""

import logging
import os

from openai import AsyncOpenAI

from ..errors import GenerationFailedError
from .schemas import GenerationRequest

log = logging.getLogger(__name__)

# ── Model config ───────────────────────────────────────────────────────────────
LLM_MODEL = os.getenv("LLM_MODEL", "llama-3.3-70b-versatile")
LLM_BASE_URL = os.getenv("LLM_BASE_URL", "https://api.groq.com/openai/v1")
LLM_TIMEOUT_SECONDS = float(os.getenv("LLM_TIMEOUT_SECONDS", "60"))

# Lazy singleton
_client: AsyncOpenAI | None = None


def _get_client() -> AsyncOpenAI:
    global _client
    if _client is None:
        api_key = os.getenv("GROQ_API_KEY") or os.getenv("OPENAI_API_KEY")
        if not api_key:
            raise RuntimeError(
                "GROQ_API_KEY is not set. Add it to your .env file."
            )
        _client = AsyncOpenAI(
            api_key=api_key,
            base_url=LLM_BASE_URL,
            timeout=LLM_TIMEOUT_SECONDS,
            max_retries=0,
        )
    return _client


async def call_llm(request: GenerationRequest) -> str:
    """
    Send one request to the text-completion service and return its text.

    Args:
        request: System instruction, user turn and sampling parameters

    Returns:
        Raw string content of the model response (may be empty)

    Raises:
        GenerationFailedError: on any client or transport failure
    """
    try:
        client = _get_client()
        response = await client.chat.completions.create(
            model=LLM_MODEL,
            messages=[
                {"role": "system", "content": request.system_instruction},
                {"role": "user", "content": request.user_message},
            ],
            temperature=request.temperature,
            max_tokens=request.max_output_tokens,
        )
    except Exception as e:
        log.error("LLM call failed model=%s: %s", LLM_MODEL, e)
        raise GenerationFailedError(detail=f"{type(e).__name__}: {e}") from e

    if not response.choices:
        log.error("LLM returned no choices model=%s", LLM_MODEL)
        raise GenerationFailedError(detail="completion contained no choices")

    return response.choices[0].message.content or ""
