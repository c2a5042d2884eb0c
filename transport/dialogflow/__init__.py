"""Dialogflow Transport Layer - Module Exports"""

from .agent import IntentHandler, UnknownIntentError, WebhookAgent
from .normalize import NormalizationError, has_screen_output, normalize_request
from .schemas import (
    SCREEN_OUTPUT_CAPABILITY,
    NormalizedRequest,
    WebhookRequest,
    WebhookResponse,
)

__all__ = [
    # Schemas
    "NormalizedRequest",
    "WebhookRequest",
    "WebhookResponse",
    "SCREEN_OUTPUT_CAPABILITY",
    # Normalization
    "normalize_request",
    "has_screen_output",
    "NormalizationError",
    # Agent
    "WebhookAgent",
    "IntentHandler",
    "UnknownIntentError",
]
