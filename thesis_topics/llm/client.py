# =============================
# FILE: thesis_topics/llm/client.py
# =============================
import os
from dotenv import load_dotenv
from loguru import logger
from openai import AuthenticationError, BadRequestError, NotFoundError, OpenAI, PermissionDeniedError

from ..errors import CredentialError, MissingCredentialError

load_dotenv()

# Gemini's OpenAI-compatible endpoint; any compatible server works.
BASE_URL = os.getenv("OPENAI_BASE_URL") or "https://generativelanguage.googleapis.com/v1beta/openai/"

# Defaults
CHAT_MODEL = os.getenv("CHAT_MODEL", "gemini-2.5-flash")
API_KEY_ENV = "API_KEY"
INVALID_KEY_MARKERS = ("API_KEY_INVALID", "API key not valid")


def get_api_key() -> str | None:
    """Read the credential from process configuration at call time."""
    return os.getenv(API_KEY_ENV) or None


def make_client() -> OpenAI:
    # A fresh client per call, so a just-reselected key is used immediately.
    api_key = get_api_key()
    if not api_key:
        raise MissingCredentialError(f"{API_KEY_ENV} is not configured.")
    return OpenAI(api_key=api_key, base_url=BASE_URL, max_retries=0)


def chat_json(system: str, user: str, schema_name: str, schema: dict,
              model: str = CHAT_MODEL, temperature: float = 0.7) -> str:
    """Run one schema-constrained completion and return the raw response text."""
    client = make_client()
    logger.info(f"Calling LLM model: {model}")
    try:
        resp = client.chat.completions.create(
            model=model,
            temperature=temperature,
            messages=[
                {"role": "system", "content": system},
                {"role": "user", "content": user},
            ],
            response_format={
                "type": "json_schema",
                "json_schema": {"name": schema_name, "schema": schema},
            },
        )
    except (AuthenticationError, PermissionDeniedError, NotFoundError) as e:
        raise CredentialError(str(e)) from e
    except BadRequestError as e:
        # Gemini answers a bad key with 400 INVALID_ARGUMENT / API_KEY_INVALID
        if _is_invalid_key(e):
            raise CredentialError(str(e)) from e
        raise
    return resp.choices[0].message.content or ""


def _is_invalid_key(error: BadRequestError) -> bool:
    text = f"{error} {error.body}"
    return any(marker in text for marker in INVALID_KEY_MARKERS)
