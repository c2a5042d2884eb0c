"""
tests/unit/test_menu_handlers.py

Unit tests for the show-menu intent handler.

Verifies:
✔ Unknown resto → apology, no network call
✔ Found menu → text or table reply depending on surface
✔ Non-success status → "no menu found"
✔ Any failure in fetch or formatting → apology naming the resto
"""

from datetime import date
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from services.menu.client import MenuFetchError
from services.menu.handlers import INTENT_HANDLERS, show_menu
from services.menu.schemas import Menu, MenuLookup
from transport.dialogflow import NormalizedRequest, WebhookAgent


MEALS = [
    {"name": "Tomatensoep klein", "kind": "soup"},
    {"name": "Tomatensoep groot", "kind": "soup"},
    {"name": "Stoofvlees", "kind": "meat", "price": "3.50"},
]


# ─────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────


def make_agent(resto="Coupure", date_param="2023-03-14", has_screen=False) -> WebhookAgent:
    return WebhookAgent(
        NormalizedRequest(
            intent="show-menu",
            parameters={"resto": resto, "date": date_param},
            has_screen=has_screen,
        )
    )


def found(body: dict) -> MenuLookup:
    return MenuLookup(status="found", menu=Menu.model_validate(body))


def texts(agent: WebhookAgent) -> list[str]:
    return [m["text"]["text"][0] for m in agent.build_response().fulfillment_messages]


# ─────────────────────────────────────────────────────
# Resto validation
# ─────────────────────────────────────────────────────


class TestUnknownResto:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("resto", ["Atlantis", "coupure", "", None])
    async def test_unknown_resto_no_network_call(self, resto):
        agent = make_agent(resto=resto)

        with patch("services.menu.handlers.fetch_menu", new_callable=AsyncMock) as mock_fetch:
            await show_menu(agent)

        mock_fetch.assert_not_called()
        assert texts(agent) == [
            f"De resto {resto} ken ik niet. Probeer het opnieuw met een andere resto."
        ]


# ─────────────────────────────────────────────────────
# Lookup outcomes
# ─────────────────────────────────────────────────────


class TestShowMenu:
    @pytest.mark.asyncio
    async def test_query_uses_endpoint_and_date(self):
        agent = make_agent(resto="Heymans")

        with patch("services.menu.handlers.fetch_menu", new_callable=AsyncMock) as mock_fetch:
            mock_fetch.return_value = found({"open": False})
            await show_menu(agent)

        query = mock_fetch.call_args.args[0]
        assert query.endpoint == "nl-heymans"
        assert query.day == date(2023, 3, 14)

    @pytest.mark.asyncio
    async def test_voice_only_sentence(self):
        agent = make_agent()

        with patch("services.menu.handlers.fetch_menu", new_callable=AsyncMock) as mock_fetch:
            mock_fetch.return_value = found({"open": True, "meals": MEALS})
            await show_menu(agent)

        response = agent.build_response()
        assert response.fulfillment_text == "Op het menu staat Tomatensoep en Stoofvlees."
        assert response.payload is None

    @pytest.mark.asyncio
    async def test_screen_gets_table(self):
        agent = make_agent(has_screen=True)

        with patch("services.menu.handlers.fetch_menu", new_callable=AsyncMock) as mock_fetch:
            mock_fetch.return_value = found({"open": True, "meals": MEALS})
            await show_menu(agent)

        items = agent.build_response().payload["google"]["richResponse"]["items"]
        rows = items[1]["tableCard"]["rows"]
        assert [[c["text"] for c in row["cells"]] for row in rows] == [
            ["Tomatensoep", ""],
            ["Stoofvlees", "3.50"],
        ]
        assert "14-3" in items[0]["simpleResponse"]["textToSpeech"]

    @pytest.mark.asyncio
    async def test_closed_with_message(self):
        agent = make_agent()

        with patch("services.menu.handlers.fetch_menu", new_callable=AsyncMock) as mock_fetch:
            mock_fetch.return_value = found({"open": False, "message": "Renovatie"})
            await show_menu(agent)

        assert texts(agent) == ["De resto is gesloten met dit bericht: Renovatie"]

    @pytest.mark.asyncio
    async def test_null_open_flag_reads_as_closed(self):
        agent = make_agent()

        response = MagicMock()
        response.status_code = 200
        response.is_success = True
        response.json.return_value = {"open": None, "message": "Renovatie"}

        mock_instance = AsyncMock()
        mock_instance.__aenter__ = AsyncMock(return_value=mock_instance)
        mock_instance.__aexit__ = AsyncMock(return_value=False)
        mock_instance.get.return_value = response

        with patch("httpx.AsyncClient", return_value=mock_instance):
            await show_menu(agent)

        assert texts(agent) == ["De resto is gesloten met dit bericht: Renovatie"]

    @pytest.mark.asyncio
    async def test_not_found(self):
        agent = make_agent()

        with patch("services.menu.handlers.fetch_menu", new_callable=AsyncMock) as mock_fetch:
            mock_fetch.return_value = MenuLookup(status="not_found")
            await show_menu(agent)

        assert texts(agent) == ["Er is geen menu gevonden."]


# ─────────────────────────────────────────────────────
# Failures
# ─────────────────────────────────────────────────────


class TestFailures:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("resto", ["Coupure", "De Brug", "Sint-Jansvest"])
    async def test_timeout_apologizes_with_resto(self, resto):
        agent = make_agent(resto=resto)

        mock_instance = AsyncMock()
        mock_instance.__aenter__ = AsyncMock(return_value=mock_instance)
        mock_instance.__aexit__ = AsyncMock(return_value=False)
        mock_instance.get.side_effect = httpx.TimeoutException("timed out")

        with patch("httpx.AsyncClient", return_value=mock_instance):
            await show_menu(agent)

        assert texts(agent) == [f"Er is geen menu gevonden voor {resto}."]

    @pytest.mark.asyncio
    async def test_fetch_error_apologizes(self):
        agent = make_agent(resto="Sterre")

        with patch("services.menu.handlers.fetch_menu", new_callable=AsyncMock) as mock_fetch:
            mock_fetch.side_effect = MenuFetchError("Bad JSON")
            await show_menu(agent)

        assert texts(agent) == ["Er is geen menu gevonden voor Sterre."]

    @pytest.mark.asyncio
    async def test_formatting_error_apologizes(self):
        agent = make_agent(resto="Dunant")

        with patch("services.menu.handlers.fetch_menu", new_callable=AsyncMock) as mock_fetch, \
                patch("services.menu.handlers.format_menu", MagicMock(side_effect=RuntimeError("boom"))):
            mock_fetch.return_value = found({"open": True, "meals": MEALS})
            await show_menu(agent)

        assert texts(agent) == ["Er is geen menu gevonden voor Dunant."]

    @pytest.mark.asyncio
    async def test_malformed_date_still_requests_and_reports_not_found(self):
        agent = make_agent(date_param="gisteren-ish")

        response = MagicMock()
        response.status_code = 404
        response.is_success = False

        mock_instance = AsyncMock()
        mock_instance.__aenter__ = AsyncMock(return_value=mock_instance)
        mock_instance.__aexit__ = AsyncMock(return_value=False)
        mock_instance.get.return_value = response

        with patch("httpx.AsyncClient", return_value=mock_instance):
            await show_menu(agent)

        assert mock_instance.get.call_args.args[0].endswith("/nl/NaN/NaN/NaN.json")
        assert texts(agent) == ["Er is geen menu gevonden."]


def test_only_show_menu_registered():
    assert INTENT_HANDLERS == {"show-menu": show_menu}
