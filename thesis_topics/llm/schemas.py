# =============================
# FILE: thesis_topics/llm/schemas.py
# =============================
import copy
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


class ThesisTopic(BaseModel):
    """Schema for one suggested thesis subject."""
    model_config = ConfigDict(frozen=True)

    title: str = Field(..., description="A concise, specific thesis title.")
    description: str = Field(..., description="A short paragraph describing the scope and contribution of the thesis.")
    keywords: List[str] = Field(..., description="Keywords that characterise the topic.")
    potentialResearchQuestions: Optional[List[str]] = Field(
        default=None, description="Research questions the thesis could answer."
    )


class ApiResponse(BaseModel):
    """Schema for the completion service reply: an ordered list of topics."""
    model_config = ConfigDict(frozen=True)

    topics: List[ThesisTopic]


# Sent to the completion service as the structured-output contract.
TOPICS_RESPONSE_SCHEMA = {
    "type": "object",
    "properties": {
        "topics": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "title": {"type": "string"},
                    "description": {"type": "string"},
                    "keywords": {"type": "array", "items": {"type": "string"}},
                    "potentialResearchQuestions": {"type": "array", "items": {"type": "string"}},
                },
                "required": ["title", "description", "keywords"],
            },
        },
    },
    "required": ["topics"],
}


class CompletionRequest(BaseModel):
    """One outbound completion: prompt text plus the output schema."""
    model_config = ConfigDict(frozen=True)

    model: str
    system: str
    user: str
    schema_name: str = "thesis_topics"
    response_schema: dict = Field(default_factory=lambda: copy.deepcopy(TOPICS_RESPONSE_SCHEMA))
