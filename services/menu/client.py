"""
Menu API client.

Fetches one day's menu for one endpoint code.
No caching. No retries. No timeout beyond the httpx default.

URL shape:
    <base>/<endpoint>/<year>/<month>/<day>.json   (month and day not zero-padded)
"""

import logging
from datetime import date, datetime
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from config import Config

from .schemas import Menu, MenuLookup, MenuQuery

logger = logging.getLogger(__name__)


# Date segments used when the requested date could not be parsed.
# The API answers these with a non-success status.
UNPARSEABLE_DATE_PATH = "NaN/NaN/NaN"


class MenuFetchError(Exception):
    """The menu could not be fetched or decoded."""
    pass


def parse_menu_date(value: Any, today: Optional[date] = None) -> Optional[date]:
    """
    Effective calendar date for a `date` intent parameter.

    Absent or empty means today. An ISO-8601 date or datetime is taken at its
    written calendar date (no timezone conversion). Anything else is passed
    through as None, which builds a URL the API will not recognize.
    """
    if not value:
        return today or date.today()

    if isinstance(value, date):
        return value if not isinstance(value, datetime) else value.date()

    try:
        return datetime.fromisoformat(str(value).strip()).date()
    except ValueError:
        logger.warning(f"Unparseable date parameter: {value!r}")
        return None


def build_menu_url(query: MenuQuery, base_url: Optional[str] = None) -> str:
    """Build the menu API URL for a query."""
    base = (base_url or Config.MENU_API_BASE_URL).rstrip("/")

    if query.day is None:
        date_path = UNPARSEABLE_DATE_PATH
    else:
        date_path = f"{query.day.year}/{query.day.month}/{query.day.day}"

    return f"{base}/{query.endpoint}/{date_path}.json"


async def fetch_menu(query: MenuQuery, base_url: Optional[str] = None) -> MenuLookup:
    """
    GET the menu for a query.

    A non-success status is an expected outcome ("no menu"), not an error.

    Returns:
        MenuLookup with status "found" and the parsed menu, or "not_found"

    Raises:
        MenuFetchError: Network failure, invalid JSON, or unexpected JSON shape
    """
    url = build_menu_url(query, base_url)
    logger.debug(f"Fetching menu from {url}")

    try:
        async with httpx.AsyncClient() as client:
            response = await client.get(url)
    except httpx.HTTPError as e:
        raise MenuFetchError(f"Request to {url} failed: {e}") from e

    if not response.is_success:
        logger.info(f"No menu found at {url} (status {response.status_code})")
        return MenuLookup(status="not_found")

    try:
        menu = Menu.model_validate(response.json())
    except (ValueError, ValidationError) as e:
        raise MenuFetchError(f"Invalid menu JSON from {url}: {e}") from e

    return MenuLookup(status="found", menu=menu)
