"""
Dialogflow Transport Layer - Pydantic Schemas

PURE DATA MODELS - NO LOGIC
Only defines the contract between Dialogflow fulfillment and the normalized interface.

ref: https://cloud.google.com/dialogflow/es/docs/fulfillment-webhook
"""

from typing import Any, Optional

from pydantic import BaseModel, Field


SCREEN_OUTPUT_CAPABILITY = "actions.capability.SCREEN_OUTPUT"


# ============================================================================
# NORMALIZED REQUEST (THE CONTRACT)
# ============================================================================

class NormalizedRequest(BaseModel):
    """
    Canonical input format that intent handlers consume.

    Handlers never see the Dialogflow envelope.
    """

    intent: str = Field(..., description="Intent display name, e.g. 'show-menu'")
    parameters: dict[str, Any] = Field(
        default_factory=dict,
        description="Slot-filled intent parameters"
    )
    has_screen: bool = Field(
        False,
        description="Whether the requesting surface can render visual content"
    )
    session: Optional[str] = Field(None, description="Dialogflow session path")
    language_code: Optional[str] = Field(None, description="BCP-47 language code")

    class Config:
        """Pydantic config."""
        frozen = True  # Immutable - transport shouldn't mutate


# ============================================================================
# DIALOGFLOW WEBHOOK REQUEST (INPUT)
# ============================================================================

class Intent(BaseModel):
    """Matched intent."""
    name: Optional[str] = None
    display_name: Optional[str] = Field(None, alias="displayName")

    class Config:
        populate_by_name = True


class QueryResult(BaseModel):
    """Result of the conversational query."""
    query_text: Optional[str] = Field(None, alias="queryText")
    parameters: dict[str, Any] = Field(default_factory=dict)
    intent: Optional[Intent] = None
    language_code: Optional[str] = Field(None, alias="languageCode")

    class Config:
        populate_by_name = True
        extra = "allow"


class Capability(BaseModel):
    """A single surface capability."""
    name: str


class Surface(BaseModel):
    """Device the user is talking through."""
    capabilities: list[Capability] = Field(default_factory=list)


class AssistantPayload(BaseModel):
    """Google Assistant payload embedded in the original request."""
    surface: Optional[Surface] = None

    class Config:
        extra = "allow"  # conversation, user, inputs, ...


class OriginalDetectIntentRequest(BaseModel):
    """Request as received by Dialogflow from the integration."""
    source: Optional[str] = None
    version: Optional[str] = None
    payload: Optional[AssistantPayload] = None


class WebhookRequest(BaseModel):
    """
    Full Dialogflow v2 webhook request.
    """

    response_id: Optional[str] = Field(None, alias="responseId")
    session: Optional[str] = None
    query_result: Optional[QueryResult] = Field(None, alias="queryResult")
    original_detect_intent_request: Optional[OriginalDetectIntentRequest] = Field(
        None, alias="originalDetectIntentRequest"
    )

    class Config:
        populate_by_name = True
        extra = "allow"  # Dialogflow may add fields


# ============================================================================
# DIALOGFLOW WEBHOOK RESPONSE (OUTPUT)
# ============================================================================

class WebhookResponse(BaseModel):
    """
    Dialogflow v2 webhook response.

    `payload` carries the Google Assistant rich response when one was built.
    """

    fulfillment_text: Optional[str] = Field(None, alias="fulfillmentText")
    fulfillment_messages: list[dict[str, Any]] = Field(
        default_factory=list, alias="fulfillmentMessages"
    )
    payload: Optional[dict[str, Any]] = None

    class Config:
        populate_by_name = True
