"""Allow-List Verifier — Merkle membership proofs over the presale allow-list.

Invariants:
    - leaf = SHA256(raw 20 address bytes): membership only, no amount or index bound
    - node = SHA256(min(a, b) || max(a, b)): sibling order never needs tracking
    - verify_membership is PURE: no state mutation, returns bool, never raises on bad proofs
    - No committed root means nobody verifies

Design Decisions:
    - SHA-256 via hashlib, same primitive the corridor MMR uses (ADR: no extra crypto dep)
    - Sorted-pair combination over positional: proofs are a flat list of siblings
    - build_allow_list lives next to verify so root and proofs can never drift apart
"""

import hashlib
from dataclasses import dataclass

from soulforge.core.domain_types import Address, Digest, normalize_address


def _sha256(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()


def _to_hex(raw: bytes) -> Digest:
    return Digest("0x" + raw.hex())


def _from_hex(digest: str) -> bytes | None:
    """Decode a 0x-prefixed 32-byte digest, or None when malformed."""
    if not isinstance(digest, str) or not digest.startswith("0x") or len(digest) != 66:
        return None
    try:
        return bytes.fromhex(digest[2:])
    except ValueError:
        return None


def leaf_hash(identity: str) -> Digest:
    """Leaf for an identity: hash of its address value alone."""
    address = normalize_address(identity, "identity")
    return _to_hex(_sha256(bytes.fromhex(address[2:])))


def hash_pair(a: bytes, b: bytes) -> bytes:
    """Combine two nodes in canonical (sorted) order."""
    if a <= b:
        return _sha256(a + b)
    return _sha256(b + a)


def compute_root(identity: str, proof: list[str]) -> Digest | None:
    """Fold a proof onto the identity's leaf. None if any proof element is malformed."""
    node = _from_hex(leaf_hash(identity))
    for sibling_hex in proof:
        sibling = _from_hex(sibling_hex)
        if sibling is None:
            return None
        node = hash_pair(node, sibling)
    return _to_hex(node)


def verify_membership(root: str | None, identity: str, proof: list[str]) -> bool:
    """True when proof links identity's leaf to the committed root."""
    if root is None:
        return False
    computed = compute_root(identity, proof)
    return computed is not None and computed == root.lower()


# --- Tree construction (owner-side tooling) ----------------------------------

@dataclass(frozen=True)
class AllowListTree:
    """A committed allow-list: root plus one proof per member."""
    root: Digest
    proofs: dict[Address, list[Digest]]


def build_allow_list(identities: list[str]) -> AllowListTree:
    """Build a sorted-pair Merkle tree over identities.

    Duplicates collapse to one leaf. An odd node at any level is promoted
    unchanged to the next level, so its proof simply skips that level.
    """
    if not identities:
        raise ValueError("allow-list must contain at least one identity")

    members = sorted({normalize_address(i, "identity") for i in identities})
    leaves = [_from_hex(leaf_hash(m)) for m in members]

    # positions[i] = index of member i's ancestor in the current level
    positions = list(range(len(members)))
    proofs: dict[Address, list[Digest]] = {m: [] for m in members}
    level = leaves
    while len(level) > 1:
        for member, pos in zip(members, positions):
            sibling = pos ^ 1
            if sibling < len(level):
                proofs[member].append(_to_hex(level[sibling]))
        level = _next_level(level)
        positions = [pos // 2 for pos in positions]

    return AllowListTree(root=_to_hex(level[0]), proofs=proofs)


def _next_level(level: list[bytes]) -> list[bytes]:
    parents = []
    for i in range(0, len(level), 2):
        if i + 1 < len(level):
            parents.append(hash_pair(level[i], level[i + 1]))
        else:
            parents.append(level[i])
    return parents
