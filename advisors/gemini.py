# advisors/gemini.py

import logging

from google import genai
from google.genai import types

from config.settings import (
    ADVISORY_TIMEOUT_SECONDS,
    GEMINI_API_KEY,
    GEMINI_MAX_OUTPUT_TOKENS,
    GEMINI_MODEL,
    GEMINI_TEMPERATURE,
    GEMINI_TOP_P,
)

logger = logging.getLogger(__name__)

_client = None


def get_client():
    """
    Lazily build the Gemini client so importing the app
    does not require an API key.
    """
    global _client
    if _client is None:
        _client = genai.Client(
            api_key=GEMINI_API_KEY,
            http_options=types.HttpOptions(timeout=int(ADVISORY_TIMEOUT_SECONDS * 1000)),
        )
    return _client


def call_llm(system_prompt, developer_prompt, user_message):
    prompt_parts = [
        "SYSTEM ROLE:\n" + system_prompt.strip(),
        "\nDEVELOPER RULES:\n" + developer_prompt.strip(),
        "\nUSER MESSAGE:\n" + user_message,
    ]

    response = get_client().models.generate_content(
        model=GEMINI_MODEL,
        contents="\n\n".join(prompt_parts),
        config={
            "temperature": GEMINI_TEMPERATURE,
            "top_p": GEMINI_TOP_P,
            "max_output_tokens": GEMINI_MAX_OUTPUT_TOKENS,
            "response_mime_type": "application/json",
        },
    )

    text = (response.text or "").strip()
    logger.debug("Gemini returned %d characters", len(text))
    return text
