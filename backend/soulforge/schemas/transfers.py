"""Transfer Schemas — transfers, approvals, operators, delegated users.

Invariants:
    - data is hex (with or without 0x) and only meaningful when safe=True
"""

from pydantic import BaseModel, Field, field_validator

from soulforge.schemas.types import AddressStr, TimestampInt


class TransferRequest(BaseModel):
    from_address: AddressStr
    to_address: AddressStr
    token_id: int = Field(ge=1)
    safe: bool = False
    data: str | None = None

    @field_validator("data")
    @classmethod
    def validate_hex(cls, v: str | None) -> str | None:
        if v is None:
            return v
        raw = v[2:] if v.startswith("0x") else v
        try:
            bytes.fromhex(raw)
        except ValueError:
            raise ValueError("data must be hex encoded")
        return raw

    def data_bytes(self) -> bytes:
        return bytes.fromhex(self.data) if self.data else b""


class ApprovalRequest(BaseModel):
    to_address: AddressStr
    token_id: int = Field(ge=1)


class OperatorRequest(BaseModel):
    operator: AddressStr
    approved: bool


class SetUserRequest(BaseModel):
    user: AddressStr
    expires: TimestampInt
