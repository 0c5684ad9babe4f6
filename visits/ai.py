import logging
from functools import lru_cache

from django.conf import settings
from openai import OpenAI, OpenAIError

from medi.errors import GenerationError

logger = logging.getLogger(__name__)

VISIT_SUMMARY_PROMPT = """Please generate a brief, no longer than 2 sentences, medical visit summary based on this document title: {title}.
Include possible type of visit, potential medical conditions discussed, and any other relevant medical information
you can infer from the title. Keep it concise but informative. Don't do any formatting, just output the pure text."""

VISIT_TRANSLATION_PROMPT = """Translate the following medical summary to {language}.
Maintain medical accuracy and terminology:

{text}"""


@lru_cache(maxsize=1)
def get_client() -> OpenAI:
    # built on first use so a missing key only fails the calls that need it
    return OpenAI(api_key=settings.OPENAI_API_KEY or None)


def generate_text(prompt: str) -> str:
    """Send one prompt to the completion endpoint and return the reply text."""
    try:
        response = get_client().chat.completions.create(
            model=settings.OPENAI_MODEL,
            messages=[{"role": "user", "content": prompt}],
            max_tokens=settings.OPENAI_MAX_TOKENS,
        )
    except OpenAIError as e:
        logger.error("Error generating text: %s", e)
        raise GenerationError("Text generation failed", cause=e) from e

    content = response.choices[0].message.content if response.choices else None
    if not content or not content.strip():
        raise GenerationError("Text generation returned no content")
    return content.strip()
