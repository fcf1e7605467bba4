"""
Gemini text generation used for welcome intros and news summaries.
"""
import random
import time
from functools import lru_cache

from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from signalist.config import GEMINI_API_KEY
from signalist.logging import log_event

MAX_RETRIES = 5
INITIAL_BACKOFF_SECONDS = 4.0
MAX_BACKOFF_SECONDS = 20.0


class AIError(Exception):
    pass


@lru_cache(maxsize=1)
def get_genai_client():
    return genai.Client(api_key=GEMINI_API_KEY)


def _is_rate_limited(error):
    msg = str(error)
    return "429" in msg or "RESOURCE_EXHAUSTED" in msg


def generate_text(prompt, model, temperature=0.7):
    """
    Sends a single user prompt to Gemini and returns the stripped response text,
    or None when the model answered with nothing. Rate limits are retried with
    exponential backoff; anything else raises AIError.
    """
    client = get_genai_client()
    delay = INITIAL_BACKOFF_SECONDS
    for attempt in range(1, MAX_RETRIES + 1):
        try:
            response = client.models.generate_content(
                model=model,
                contents=[prompt],
                config=types.GenerateContentConfig(temperature=temperature),
            )
            return (response.text or "").strip() or None
        except genai_errors.ClientError as e:
            if _is_rate_limited(e) and attempt < MAX_RETRIES:
                log_event("WARN", "Gemini rate limited, retrying", model=model, attempt=attempt, delay=delay)
                time.sleep(delay + random.random())
                delay = min(delay * 2, MAX_BACKOFF_SECONDS)
                continue
            raise AIError(f"Gemini request failed: {e}") from e
        except Exception as e:
            raise AIError(f"Gemini request failed: {e}") from e
