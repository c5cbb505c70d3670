"""Crafting Schemas — burn-to-upgrade request/response."""

from pydantic import BaseModel, Field


class CraftRequest(BaseModel):
    token_a: int = Field(ge=1)
    token_b: int = Field(ge=1)
    descriptor: str


class CraftResponse(BaseModel):
    token_id: int
    burned: list[int]
    descriptor: str
