"""
Dialogflow Input Normalization

PURE CONVERSION - NO LOGIC, NO NETWORK CALLS

Converts a Dialogflow webhook request into a canonical NormalizedRequest.
- Intent: display name of the matched intent
- Parameters: passed through untouched
- Surface: reduced to a single has_screen flag
"""

from pydantic import ValidationError

from .schemas import (
    SCREEN_OUTPUT_CAPABILITY,
    NormalizedRequest,
    OriginalDetectIntentRequest,
    WebhookRequest,
)


GOOGLE_SOURCE = "google"


class NormalizationError(Exception):
    """Input normalization failed."""
    pass


def normalize_request(payload: dict | WebhookRequest) -> NormalizedRequest:
    """
    Convert a Dialogflow webhook request into NormalizedRequest.

    Args:
        payload: Raw Dialogflow webhook payload

    Returns:
        NormalizedRequest ready for intent dispatch

    Raises:
        NormalizationError: Missing query result or intent
    """

    if not isinstance(payload, WebhookRequest):
        try:
            payload = WebhookRequest.model_validate(payload)
        except ValidationError as e:
            raise NormalizationError(f"Invalid payload structure: {e}")

    query_result = payload.query_result
    if query_result is None:
        raise NormalizationError("Request has no queryResult")

    if query_result.intent is None or not query_result.intent.display_name:
        raise NormalizationError("Request has no intent displayName")

    return NormalizedRequest(
        intent=query_result.intent.display_name,
        parameters=dict(query_result.parameters),
        has_screen=has_screen_output(payload.original_detect_intent_request),
        session=payload.session,
        language_code=query_result.language_code,
    )


def has_screen_output(original: OriginalDetectIntentRequest | None) -> bool:
    """
    True when the request came from Google Assistant on a screen surface.

    Requests from other integrations (or the Dialogflow console) never get
    a rich response.
    """
    if original is None or original.source != GOOGLE_SOURCE:
        return False

    if original.payload is None or original.payload.surface is None:
        return False

    return any(
        capability.name == SCREEN_OUTPUT_CAPABILITY
        for capability in original.payload.surface.capabilities
    )
