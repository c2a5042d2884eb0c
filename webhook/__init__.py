"""
Webhook module - FastAPI route handlers for the conversational platform.

Includes:
- assistant.py: Dialogflow fulfillment handler
"""

from webhook.assistant import router as assistant_router

__all__ = ["assistant_router"]
