"""Turn step-service failures into a single user-facing message."""
from typing import Callable, Optional
import json
import logging

from src.integrations.contracts.step_submission import StepErrorBody
from src.integrations.policy.response_wrappers import parse_error_body

logger = logging.getLogger(__name__)

FALLBACK_MESSAGE = "Unexpected error"

ErrorNormalizer = Callable[[BaseException], str]


def _message_from_body(body: StepErrorBody) -> Optional[str]:
    if body.page_errors and body.page_errors[0].message:
        return body.page_errors[0].message
    if body.message:
        return body.message
    if body.field_errors:
        return json.dumps(body.field_errors, default=str)
    return None


def normalize_step_error(exc: BaseException) -> str:
    """
    Pick the most specific message available.

    When the failure carries an error body: page-level errors, then the
    structured message, then field errors (as JSON text), otherwise the
    fixed fallback. Without a body: the exception's own message, then the
    fallback.
    """
    raw_body = getattr(exc, "body", None)
    if raw_body is not None:
        body = parse_error_body(raw_body)
        message = _message_from_body(body) if body is not None else None
        if message:
            return message
        logger.debug("Error body without a usable message: %r", raw_body)
        return FALLBACK_MESSAGE

    message = getattr(exc, "message", None) or str(exc)
    return str(message) if message else FALLBACK_MESSAGE
