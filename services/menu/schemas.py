"""
Menu data models.

`Menu` mirrors the menu API's JSON. The API owns that contract, so fields are
optional and unknown fields are kept rather than rejected.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Literal, Optional

from pydantic import BaseModel, Field, validator


SOUP_KIND = "soup"


class Meal(BaseModel):
    """A single menu item."""
    name: str
    kind: Optional[str] = None
    price: Optional[str] = None

    @validator("price", pre=True)
    def price_as_text(cls, v):
        """Prices are shown verbatim; numbers are rendered as-is."""
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    @property
    def is_soup(self) -> bool:
        return self.kind == SOUP_KIND

    class Config:
        extra = "allow"  # type, hot/cold, allergens, ...


class Menu(BaseModel):
    """Menu for one resto on one day."""
    open: Optional[bool] = None
    meals: Optional[list[Meal]] = None
    message: Optional[str] = None

    class Config:
        extra = "allow"  # date, vegetables, ...


@dataclass(frozen=True)
class MenuQuery:
    """
    Remote lookup key.

    `day` is None when the requested date could not be parsed.
    """

    endpoint: str
    day: Optional[date]


LookupStatus = Literal["found", "not_found"]


@dataclass
class MenuLookup:
    """Outcome of a menu request that reached the API."""

    status: LookupStatus
    menu: Optional[Menu] = None


@dataclass
class MenuTable:
    """Two-column menu table, one row per item."""

    columns: list[str]
    rows: list[list[str]] = field(default_factory=list)


@dataclass
class MenuReply:
    """
    Reply for one request.

    Without a table, `text` is the whole reply. With a table, `text` is the
    SSML spoken alongside it.
    """

    text: str
    table: Optional[MenuTable] = None
