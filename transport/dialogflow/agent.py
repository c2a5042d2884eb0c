"""
Dialogflow Webhook Agent

Collects the reply for a single webhook request and renders it as a
Dialogflow v2 WebhookResponse.

One agent per request. Nothing is shared between requests.
"""

import logging
from typing import Any, Awaitable, Callable, Mapping, Optional, Sequence

from .schemas import NormalizedRequest, WebhookResponse

logger = logging.getLogger(__name__)


IntentHandler = Callable[["WebhookAgent"], Awaitable[None]]


class UnknownIntentError(Exception):
    """No handler is registered for the requested intent."""
    pass


class WebhookAgent:
    """
    Per-request fulfillment agent.

    Handlers read `parameters` and `has_screen`, then reply with `add()`
    (plain text) or `close()` (speech plus a table card, ends the conversation).
    """

    def __init__(self, request: NormalizedRequest):
        self.request = request
        self._texts: list[str] = []
        self._rich_response: Optional[dict[str, Any]] = None

    @property
    def intent(self) -> str:
        return self.request.intent

    @property
    def parameters(self) -> dict[str, Any]:
        return self.request.parameters

    @property
    def has_screen(self) -> bool:
        return self.request.has_screen

    def add(self, text: str) -> None:
        """Append a plain text message to the reply."""
        self._texts.append(text)

    def close(
        self,
        speech: str,
        columns: Sequence[str],
        rows: Sequence[Sequence[str]],
    ) -> None:
        """
        Reply with spoken text and a table card, and end the conversation.

        Args:
            speech: SSML spoken alongside the table
            columns: Table column headers
            rows: Table rows, one cell per column
        """
        self._rich_response = {
            "items": [
                {"simpleResponse": {"textToSpeech": speech}},
                {
                    "tableCard": {
                        "columnProperties": [{"header": column} for column in columns],
                        "rows": [
                            {
                                "cells": [{"text": cell} for cell in row],
                                "dividerAfter": True,
                            }
                            for row in rows
                        ],
                    }
                },
            ]
        }
        self._texts.append(speech)

    async def handle_request(self, intent_map: Mapping[str, IntentHandler]) -> None:
        """
        Dispatch to the handler registered for this request's intent.

        Raises:
            UnknownIntentError: No handler registered for the intent
        """
        handler = intent_map.get(self.intent)
        if handler is None:
            raise UnknownIntentError(f"No handler for requested intent: {self.intent}")

        logger.debug(f"Dispatching intent '{self.intent}'")
        await handler(self)

    def build_response(self) -> WebhookResponse:
        """Render everything added so far as a Dialogflow webhook response."""
        payload = None
        if self._rich_response is not None:
            payload = {
                "google": {
                    "expectUserResponse": False,
                    "richResponse": self._rich_response,
                }
            }

        return WebhookResponse(
            fulfillment_text=self._texts[0] if self._texts else None,
            fulfillment_messages=[{"text": {"text": [text]}} for text in self._texts],
            payload=payload,
        )
