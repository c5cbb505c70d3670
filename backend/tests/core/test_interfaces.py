"""Capability discovery tests — ORed interface ids across modules."""

import pytest

from soulforge.core.interfaces import (
    MODULE_CAPABILITIES, supported_interfaces, supports_interface,
)


@pytest.mark.parametrize("interface_id", [
    "0x01ffc9a7",   # introspection
    "0x80ac58cd",   # ownership ledger
    "0x5b5e139f",   # ledger metadata
    "0x2a55205a",   # royalty
    "0xad092b5c",   # delegated usage
    "0x7965db0b",   # role store
])
def test_declared_ids_supported(interface_id):
    assert supports_interface(interface_id)


def test_invalid_id_never_supported():
    assert not supports_interface("0xffffffff")
    assert not supports_interface("0xFFFFFFFF")


def test_unknown_id_unsupported():
    assert not supports_interface("0x12345678")


def test_case_insensitive():
    assert supports_interface("0x80AC58CD")


def test_union_of_every_module():
    total = sum(len(ids) for ids in MODULE_CAPABILITIES.values())
    assert len(supported_interfaces()) == total
