"""
Error taxonomy for topic generation and the credential side-channel.

Anything that is not one of these (transport failures, 5xx replies, ...) is a
generic service error and its message is shown to the user unchanged.
"""
from enum import Enum

# Message fragments that the hosted runtime produces when the configured key
# is invalid or refers to a project that does not exist.
CREDENTIAL_ERROR_MARKERS = (
    "Rpc failed due to xhr error",
    "Requested entity was not found.",
)


class TopicGenerationError(Exception):
    """Base class for errors raised while generating thesis topics."""


class KeywordsValidationError(TopicGenerationError):
    """The keyword text is empty after trimming."""


class ParseError(TopicGenerationError):
    """The completion text is not valid JSON."""


class ShapeError(TopicGenerationError):
    """The parsed completion does not carry a usable ``topics`` list."""


class CredentialError(TopicGenerationError):
    """The service rejected the configured credential."""


class MissingCredentialError(CredentialError):
    """No credential is configured at call time."""


class CredentialSelectionError(Exception):
    """The credential-selection capability could not complete."""


class ErrorKind(str, Enum):
    CREDENTIAL = "credential"
    GENERIC = "generic"


def classify_error(exc: BaseException) -> ErrorKind:
    if isinstance(exc, CredentialError):
        return ErrorKind.CREDENTIAL
    message = str(exc)
    if any(marker in message for marker in CREDENTIAL_ERROR_MARKERS):
        return ErrorKind.CREDENTIAL
    return ErrorKind.GENERIC
