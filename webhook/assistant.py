"""
Assistant Webhook Handler

Receives Dialogflow fulfillment requests and answers them through the
registered intent handlers.

Update Flow:
  webhook → normalize_request → WebhookAgent → intent handler → WebhookResponse
"""

import json
import logging
from typing import Any

from fastapi import APIRouter, HTTPException, Request, status

from services.menu import INTENT_HANDLERS, RESTO_ENDPOINTS
from transport.dialogflow import (
    NormalizationError,
    UnknownIntentError,
    WebhookAgent,
    normalize_request,
)

# Setup logging
logger = logging.getLogger(__name__)

# Create router
router = APIRouter(tags=["assistant"])


@router.post("/assistant")
async def assistant_webhook(request: Request) -> dict[str, Any]:
    """
    Receive a Dialogflow webhook request.

    Expected payload (abridged):
    {
        "queryResult": {
            "parameters": {"resto": "Coupure", "date": "2023-03-14T12:00:00+01:00"},
            "intent": {"displayName": "show-menu"}
        },
        "originalDetectIntentRequest": {
            "source": "google",
            "payload": {"surface": {"capabilities": [{"name": "actions.capability.SCREEN_OUTPUT"}]}}
        }
    }

    Returns:
        Dialogflow WebhookResponse JSON

    Raises:
        HTTPException(422): Invalid JSON payload
        HTTPException(400): Unreadable body, missing intent, or no handler for the intent
    """
    try:
        payload = json.loads(await request.body())
    except json.JSONDecodeError:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Invalid JSON payload"
        )
    except Exception as e:
        logger.error(f"Failed to read request: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Failed to read request"
        )

    try:
        normalized = normalize_request(payload)
    except NormalizationError as e:
        logger.warning(f"Normalization failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Normalization failed: {str(e)}"
        )

    logger.info(
        f"Received intent '{normalized.intent}' (screen: {normalized.has_screen})"
    )

    agent = WebhookAgent(normalized)
    try:
        await agent.handle_request(INTENT_HANDLERS)
    except UnknownIntentError as e:
        logger.warning(str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No handler for requested intent"
        )

    return agent.build_response().model_dump(by_alias=True, exclude_none=True)


@router.get("/assistant/health")
async def assistant_health():
    """Health check for the assistant webhook."""
    return {
        "status": "ok",
        "intents": sorted(INTENT_HANDLERS),
        "restos": len(RESTO_ENDPOINTS),
    }
