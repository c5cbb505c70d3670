"""Minting Schemas — presale, public, and airdrop requests.

Invariants:
    - value is the attached payment in wei; it is kept whole on success
    - amount is NOT range-checked here: the core rejects amount <= 0 after its
      phase gate, so the abort reason reflects the first failing rule
"""

from pydantic import BaseModel, Field

from soulforge.schemas.types import AddressStr, DigestStr, WeiInt


class PresaleMintRequest(BaseModel):
    amount: int
    proof: list[DigestStr] = Field(default_factory=list, max_length=64)
    value: WeiInt = 0


class PublicMintRequest(BaseModel):
    amount: int
    value: WeiInt = 0


class AirdropRequest(BaseModel):
    recipients: list[AddressStr] = Field(max_length=1000)


class MintResponse(BaseModel):
    token_ids: list[int]
    issued_count: int
