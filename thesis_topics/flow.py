# =============================
# FILE: thesis_topics/flow.py
# =============================
"""
Request lifecycle for one page of thesis-topic suggestions.

RequestState is immutable; every handler returns a new state so the web UI can
keep it in a dcc.Store between callbacks. Phases:

    idle -> submitting -> success | failure | credential_prompt
    credential_prompt -> idle          (after a successful key reselection)
    any phase -> submitting            (resubmission with non-empty keywords)
"""
import uuid
from enum import Enum
from typing import Callable, List, Optional

from loguru import logger
from pydantic import BaseModel, ConfigDict

from . import messages
from .credentials import CredentialSelector, UnavailableCredentialSelector
from .errors import ErrorKind, classify_error
from .llm.schemas import ApiResponse, ThesisTopic
from .steps.generate_topics import generate_thesis_topics


class FlowPhase(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    FAILURE = "failure"
    CREDENTIAL_PROMPT = "credential_prompt"


class RequestState(BaseModel):
    model_config = ConfigDict(frozen=True)

    keywords: str = ""
    topics: Optional[List[ThesisTopic]] = None
    loading: bool = False
    error: Optional[str] = None
    credential_prompt_visible: bool = False
    credential_valid: bool = True
    phase: FlowPhase = FlowPhase.IDLE
    request_id: Optional[str] = None


class Completion(BaseModel):
    """Outcome of one completion call, tagged with the request it answers."""
    model_config = ConfigDict(frozen=True)

    request_id: str
    response: Optional[ApiResponse] = None
    error: Optional[str] = None
    error_kind: Optional[ErrorKind] = None


class TopicRequestFlow:
    """Drives submissions and credential reselection over a RequestState."""

    def __init__(self, generate: Callable[[str], ApiResponse] = generate_thesis_topics,
                 credential_selector: Optional[CredentialSelector] = None):
        self.generate = generate
        self.credential_selector = credential_selector or UnavailableCredentialSelector()

    def begin_submit(self, state: RequestState, keywords: str) -> RequestState:
        if not keywords.strip():
            return state.model_copy(update={
                "keywords": keywords,
                "topics": None,
                "error": messages.EMPTY_KEYWORDS,
                "loading": False,
                "phase": FlowPhase.FAILURE,
                "request_id": None,
            })
        return state.model_copy(update={
            "keywords": keywords,
            "topics": None,
            "error": None,
            "loading": True,
            "phase": FlowPhase.SUBMITTING,
            "request_id": uuid.uuid4().hex,
        })

    def execute(self, request_id: str, keywords: str) -> Completion:
        """Issue the single outbound call for ``request_id``."""
        try:
            response = self.generate(keywords)
        except Exception as e:
            logger.error(f"Failed to fetch topics: {e}")
            return Completion(request_id=request_id, error=str(e), error_kind=classify_error(e))
        return Completion(request_id=request_id, response=response)

    def complete(self, state: RequestState, completion: Completion) -> RequestState:
        """Apply ``completion`` to the current state unless a newer request superseded it."""
        if completion.request_id != state.request_id:
            logger.warning(f"Discarding stale response for request {completion.request_id}")
            return state

        if completion.error_kind is None:
            return state.model_copy(update={
                "topics": list(completion.response.topics),
                "error": None,
                "loading": False,
                "phase": FlowPhase.SUCCESS,
            })

        if completion.error_kind is ErrorKind.CREDENTIAL:
            logger.warning(f"Credential rejected by completion service: {completion.error}")
            return state.model_copy(update={
                "error": messages.CREDENTIAL_FAILURE,
                "loading": False,
                "phase": FlowPhase.CREDENTIAL_PROMPT,
                "credential_valid": False,
                "credential_prompt_visible": True,
            })

        return state.model_copy(update={
            "error": completion.error or messages.GENERIC_FAILURE,
            "loading": False,
            "phase": FlowPhase.FAILURE,
        })

    def submit(self, state: RequestState, keywords: str) -> RequestState:
        """Begin, execute and complete in one step, for callers with a single request in flight."""
        state = self.begin_submit(state, keywords)
        if state.phase is not FlowPhase.SUBMITTING:
            return state
        return self.complete(state, self.execute(state.request_id, keywords))

    def reselect_credential(self, state: RequestState) -> RequestState:
        selector = self.credential_selector
        if not selector.available:
            return state.model_copy(update={"error": messages.SELECTOR_UNAVAILABLE})

        try:
            selector.select()
        except Exception:
            logger.exception("Error opening API key selection dialog")
            return state.model_copy(update={"error": messages.SELECTOR_FAILED})

        return state.model_copy(update={
            "credential_valid": True,
            "credential_prompt_visible": False,
            "error": None,
            "phase": FlowPhase.IDLE,
        })
