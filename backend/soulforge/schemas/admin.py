"""Admin Schemas — owner-only configuration requests."""

from pydantic import BaseModel, model_validator

from soulforge.core.domain_types import Role, SalePhase
from soulforge.schemas.types import AddressStr, DigestStr, WeiInt


class PhaseUpdate(BaseModel):
    phase: SalePhase


class PresaleRootUpdate(BaseModel):
    root: DigestStr


class PriceUpdate(BaseModel):
    public_price_wei: WeiInt | None = None
    presale_price_wei: WeiInt | None = None

    @model_validator(mode="after")
    def require_one_price(self):
        if self.public_price_wei is None and self.presale_price_wei is None:
            raise ValueError("at least one of public_price_wei / presale_price_wei")
        return self


class LockUpdate(BaseModel):
    locked: bool


class RevealRequest(BaseModel):
    base_uri: str


class RoleChange(BaseModel):
    role: Role
    account: AddressStr


class WithdrawResponse(BaseModel):
    recipient: str
    amount_wei: str
