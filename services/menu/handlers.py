"""
Intent handlers for the menu assistant.

Flow (one network step, one formatting step, one catch):
    resto check → date → fetch_menu → format_menu → reply

Every failure ends in a short Dutch apology. Nothing is raised to the caller.
"""

import logging

from transport.dialogflow import IntentHandler, WebhookAgent

from .client import fetch_menu, parse_menu_date
from .formatter import format_menu
from .registry import resolve_endpoint
from .schemas import MenuQuery

logger = logging.getLogger(__name__)


SHOW_MENU_INTENT = "show-menu"

RESTO_NOT_RECOGNIZED = "De resto {resto} ken ik niet. Probeer het opnieuw met een andere resto."
NO_MENU_FOUND = "Er is geen menu gevonden."
NO_MENU_FOR_RESTO = "Er is geen menu gevonden voor {resto}."


async def show_menu(agent: WebhookAgent) -> None:
    """
    Reply with the menu of the requested resto on the requested day.

    Parameters:
        resto: Resto name, must be in the registry
        date: Optional ISO-8601 date, defaults to today
    """
    resto = agent.parameters.get("resto")
    date_param = agent.parameters.get("date")

    logger.info(f"Resto is: {resto}")

    endpoint = resolve_endpoint(resto)
    if endpoint is None:
        agent.add(RESTO_NOT_RECOGNIZED.format(resto=resto))
        return

    day = parse_menu_date(date_param)
    logger.info(f"Date is {day}")

    try:
        lookup = await fetch_menu(MenuQuery(endpoint=endpoint, day=day))
        if lookup.status == "not_found":
            agent.add(NO_MENU_FOUND)
            return
        reply = format_menu(lookup.menu, day, agent.has_screen)
    except Exception as e:
        logger.warning(f"Menu lookup for {resto} failed: {e}", exc_info=True)
        agent.add(NO_MENU_FOR_RESTO.format(resto=resto))
        return

    if reply.table is None:
        agent.add(reply.text)
    else:
        agent.close(reply.text, reply.table.columns, reply.table.rows)


INTENT_HANDLERS: dict[str, IntentHandler] = {
    SHOW_MENU_INTENT: show_menu,
}
