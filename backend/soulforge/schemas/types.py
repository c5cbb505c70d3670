"""Shared boundary types — address, digest, wei, and timestamp fields."""

from typing import Annotated

from pydantic import AfterValidator, Field

from soulforge.core.domain_types import MAX_TIMESTAMP, MAX_WEI

AddressStr = Annotated[
    str, Field(pattern=r"^0x[0-9a-fA-F]{40}$"), AfterValidator(str.lower),
]
DigestStr = Annotated[
    str, Field(pattern=r"^0x[0-9a-fA-F]{64}$"), AfterValidator(str.lower),
]
WeiInt = Annotated[int, Field(ge=0, le=MAX_WEI)]
TimestampInt = Annotated[int, Field(ge=0, le=MAX_TIMESTAMP)]
