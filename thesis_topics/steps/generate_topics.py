# =============================
# FILE: thesis_topics/steps/generate_topics.py
# =============================
import json
from loguru import logger
from pydantic import ValidationError

from ..errors import KeywordsValidationError, ParseError, ShapeError
from ..llm.client import CHAT_MODEL, chat_json
from ..llm.schemas import ApiResponse, CompletionRequest

_TOPICS_SYS = (
    "You are an experienced academic supervisor who helps graduate students choose a thesis topic. "
    "Suggest original, feasible and clearly scoped research topics. "
    "Write every field in Persian (Farsi). Return JSON only per schema."
)

_TOPICS_USER_TPL = (
    "The student is interested in the following keywords:\n{keywords}\n\n"
    "Suggest 5 distinct thesis topics related to these keywords. For each topic return:\n"
    "1) title: a precise thesis title\n"
    "2) description: one paragraph explaining the problem, the approach and the expected contribution\n"
    "3) keywords: 3-6 keywords for the topic\n"
    "4) potentialResearchQuestions: 2-4 research questions the thesis could answer\n"
)


def build_topics_request(keywords: str, model: str = CHAT_MODEL) -> CompletionRequest:
    """Turn raw keyword text into the prompt and output schema for one completion."""
    cleaned = keywords.strip()
    if not cleaned:
        raise KeywordsValidationError("At least one keyword is required.")
    return CompletionRequest(
        model=model,
        system=_TOPICS_SYS,
        user=_TOPICS_USER_TPL.format(keywords=cleaned),
    )


def parse_topics_response(text: str) -> ApiResponse:
    try:
        data = json.loads(text.strip())
    except json.JSONDecodeError as e:
        raise ParseError("Failed to parse AI response. The generated content might not be valid JSON.") from e

    if not isinstance(data, dict) or not isinstance(data.get("topics"), list):
        raise ShapeError('Invalid response format from completion service: "topics" array not found or invalid.')
    try:
        return ApiResponse.model_validate(data)
    except ValidationError as e:
        raise ShapeError(f"Invalid topic in completion response: {e.error_count()} validation error(s).") from e


def generate_thesis_topics(keywords: str) -> ApiResponse:
    """
    Generates thesis topics for the given keywords.

    Raises ParseError / ShapeError for malformed replies, CredentialError when the
    service rejects the key; any other service error propagates unchanged.
    """
    request = build_topics_request(keywords)
    try:
        text = chat_json(
            system=request.system,
            user=request.user,
            schema_name=request.schema_name,
            schema=request.response_schema,
            model=request.model,
        )
        response = parse_topics_response(text)
    except Exception as e:
        logger.error(f"Error generating thesis topics: {e}")
        raise
    logger.info(f"Received {len(response.topics)} topics")
    return response
