"""
Menu service exports.

Resto registry, menu API client, reply formatting and the intent handlers
built on them.
"""

from .client import MenuFetchError, build_menu_url, fetch_menu, parse_menu_date
from .formatter import format_menu, join_items, strip_soup_size, unique_soups
from .handlers import INTENT_HANDLERS, SHOW_MENU_INTENT, show_menu
from .registry import RESTO_ENDPOINTS, resolve_endpoint
from .schemas import Meal, Menu, MenuLookup, MenuQuery, MenuReply, MenuTable

__all__ = [
    "RESTO_ENDPOINTS",
    "resolve_endpoint",
    "Meal",
    "Menu",
    "MenuQuery",
    "MenuLookup",
    "MenuReply",
    "MenuTable",
    "MenuFetchError",
    "build_menu_url",
    "fetch_menu",
    "parse_menu_date",
    "format_menu",
    "join_items",
    "strip_soup_size",
    "unique_soups",
    "INTENT_HANDLERS",
    "SHOW_MENU_INTENT",
    "show_menu",
]
