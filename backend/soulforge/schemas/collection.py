"""Collection Schemas — read models for the collection, tokens, accounts, events.

Invariants:
    - Wei amounts are rendered as decimal strings (JSON numbers lose precision
      past 2**53 in most clients)
"""

from datetime import datetime

from pydantic import BaseModel


class CollectionSummary(BaseModel):
    name: str
    symbol: str
    owner: str
    cap: int
    issued_count: int
    live_supply: int
    remaining_capacity: int
    phase: str
    public_price_wei: str
    presale_price_wei: str
    allow_list_root: str | None
    revealed: bool
    paused: bool
    balance_wei: str


class TokenView(BaseModel):
    token_id: int
    owner: str
    locked: bool
    approved: str | None
    token_uri: str
    user: str
    user_expires: int


class AccountView(BaseModel):
    address: str
    balance: int
    token_ids: list[int]
    presale_claimed: int
    roles: list[str]


class RoyaltyView(BaseModel):
    receiver: str
    royalty_amount_wei: str


class InterfaceSupport(BaseModel):
    interface_id: str
    supported: bool


class EventView(BaseModel):
    id: int
    name: str
    payload: dict
    caller: str | None
    created_at: datetime


class EventPage(BaseModel):
    events: list[EventView]
    total: int
    limit: int
    offset: int
