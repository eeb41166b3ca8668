# services/gemini.py
import functools
import logging

from google import genai
from google.genai import types

_LOG = logging.getLogger(__name__)

# ───────────── Model Names ─────────────
CHAT_MODEL = "models/gemini-2.0-flash"


# ───────────── Client ─────────────
@functools.lru_cache(maxsize=8)
def client_for(api_key: str) -> genai.Client:
    """One client per key; created on first use, never at import time."""
    return genai.Client(api_key=api_key)


# ───────────── Generation (async) ─────────────
async def generate(
    prompt: str,
    *,
    api_key: str,
    model: str = CHAT_MODEL,
    system_instruction: str | None = None,
    temperature: float = 0.7,
    max_output_tokens: int = 2500,
) -> str:
    """Run one completion and return the first candidate's text ("" if none)."""
    resp = await client_for(api_key).aio.models.generate_content(
        model=model,
        contents=[prompt],
        config=types.GenerateContentConfig(
            system_instruction=system_instruction,
            temperature=temperature,
            max_output_tokens=max_output_tokens,
        ),
    )
    # take the first candidate’s text
    if not resp.candidates:
        _LOG.warning("Gemini returned no candidates")
        return ""
    content = resp.candidates[0].content
    parts = (content.parts if content else None) or []
    return "".join(p.text for p in parts if getattr(p, "text", None))
