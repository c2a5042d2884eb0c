"""
Menu reply formatting.

Turns a parsed menu into what the assistant says (Dutch):
- closed resto → closed notice, with the resto's own message if it has one
- open resto, no screen → one sentence listing every item
- open resto, screen → spoken preamble plus an Item/Prijs table

Soups come in small and large portions ("Tomatensoep klein",
"Tomatensoep groot"); both collapse to a single "Tomatensoep".
"""

from datetime import date
from typing import Iterable, Optional

from babel.lists import format_list

from .schemas import Meal, Menu, MenuReply, MenuTable


LOCALE = "nl"

SOUP_SIZE_MARKERS = (" klein", " groot")
TABLE_COLUMNS = ["Item", "Prijs"]

CLOSED = "De resto is gesloten."
CLOSED_WITH_MESSAGE = "De resto is gesloten met dit bericht: {message}"
MENU_SENTENCE = "Op het menu staat {items}."
MENU_SPEECH = (
    '<speak>Hier is het menu van '
    '<say-as interpret-as="date" format="dm">{day}-{month}</say-as>:</speak>'
)


def strip_soup_size(name: str) -> str:
    """'Tomatensoep klein' -> 'Tomatensoep'."""
    for marker in SOUP_SIZE_MARKERS:
        name = name.removesuffix(marker)
    return name


def unique_soups(meals: Iterable[Meal]) -> list[str]:
    """Soup names without size markers, deduplicated in first-seen order."""
    return list(dict.fromkeys(strip_soup_size(m.name) for m in meals if m.is_soup))


def join_items(items: list[str]) -> str:
    """Dutch conjunctive list: 'a, b en c'."""
    return format_list(items, style="standard", locale=LOCALE)


def speech_for(day: Optional[date]) -> str:
    # Day first, month second ("14-3"), read out as a date.
    if day is None:
        return MENU_SPEECH.format(day="NaN", month="NaN")
    return MENU_SPEECH.format(day=day.day, month=day.month)


def format_menu(menu: Menu, day: Optional[date], has_screen: bool) -> MenuReply:
    """
    Build the reply for a fetched menu.

    Args:
        menu: Parsed menu API response
        day: Date the menu was requested for
        has_screen: Whether the surface can show a table

    Returns:
        MenuReply; `table` is set only for open restos on screen surfaces
    """
    if not menu.open or menu.meals is None:
        if menu.message:
            return MenuReply(text=CLOSED_WITH_MESSAGE.format(message=menu.message))
        return MenuReply(text=CLOSED)

    soups = unique_soups(menu.meals)
    others = [m for m in menu.meals if not m.is_soup]

    if not has_screen:
        items = join_items(soups + [m.name for m in others])
        return MenuReply(text=MENU_SENTENCE.format(items=items))

    rows = [[soup, ""] for soup in soups]
    rows += [[m.name, m.price or ""] for m in others]

    return MenuReply(
        text=speech_for(day),
        table=MenuTable(columns=list(TABLE_COLUMNS), rows=rows),
    )
