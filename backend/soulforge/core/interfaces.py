"""Capability Discovery — one registry ORing together each module's interface ids.

Invariants:
    - supports_interface is true iff some registered module declares the id
    - 0xffffffff is never supported

Design Decisions:
    - Explicit registry over a linear inheritance chain: every capability visible in
      one dict (ADR: no convention-over-config)
"""

from soulforge.core.domain_types import InterfaceId

INVALID_INTERFACE = InterfaceId("0xffffffff")

MODULE_CAPABILITIES: dict[str, frozenset[InterfaceId]] = {
    "introspection": frozenset({InterfaceId("0x01ffc9a7")}),   # ERC-165
    "ledger": frozenset({
        InterfaceId("0x80ac58cd"),                              # ERC-721
        InterfaceId("0x5b5e139f"),                              # ERC-721 Metadata
    }),
    "royalty": frozenset({InterfaceId("0x2a55205a")}),         # ERC-2981
    "rental": frozenset({InterfaceId("0xad092b5c")}),          # ERC-4907
    "roles": frozenset({InterfaceId("0x7965db0b")}),           # AccessControl
}


def supported_interfaces() -> frozenset[InterfaceId]:
    return frozenset().union(*MODULE_CAPABILITIES.values())


def supports_interface(interface_id: str) -> bool:
    normalized = interface_id.lower()
    if normalized == INVALID_INTERFACE:
        return False
    return normalized in supported_interfaces()
