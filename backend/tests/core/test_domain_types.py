"""Domain type tests — address/digest normalization and enum wire values."""

import pytest

from soulforge.core.domain_types import (
    EventName, Role, SalePhase, ZERO_ADDRESS, normalize_address, normalize_digest,
)
from soulforge.core.errors import InvalidInputError


def test_normalize_address_lowercases():
    raw = "0x" + "AbCdEf" * 6 + "0123"
    assert normalize_address(raw) == raw.lower()


@pytest.mark.parametrize("bad", [
    "",
    "0x1234",
    "1" * 42,
    "0x" + "g" * 40,
    "0x" + "1" * 41,
    None,
    42,
])
def test_normalize_address_rejects_malformed(bad):
    with pytest.raises(InvalidInputError) as exc:
        normalize_address(bad, "recipient")
    assert exc.value.field == "recipient"
    assert exc.value.http_status == 400


def test_normalize_digest_accepts_32_bytes():
    digest = "0x" + "AB" * 32
    assert normalize_digest(digest) == digest.lower()


def test_normalize_digest_rejects_20_bytes():
    with pytest.raises(InvalidInputError):
        normalize_digest("0x" + "ab" * 20)


def test_zero_address_is_normalized():
    assert normalize_address(ZERO_ADDRESS) == ZERO_ADDRESS


def test_enum_values_are_wire_strings():
    assert SalePhase.PUBLIC_SALE.value == "public_sale"
    assert Role.MINTER.value == "MINTER_ROLE"
    assert EventName.PRESALE_CLAIMED.value == "PresaleClaimed"
    assert SalePhase("presale") is SalePhase.PRESALE
