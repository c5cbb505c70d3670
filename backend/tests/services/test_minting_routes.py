"""Minting routes — presale, public sale, airdrop over HTTP.

Invariants:
    - Successful mints return 201 with the new ids and the cumulative issued_count
    - Each failure maps to its error code and status, with nothing persisted
"""

from soulforge.core.allow_list import build_allow_list

OWNER = "0x" + "1" * 40
ALICE = "0x" + "a" * 40
BOB = "0x" + "b" * 40
CAROL = "0x" + "c" * 40
PUBLIC_PRICE = 100
PRESALE_PRICE = 50


async def _open_presale(client, as_caller, members):
    tree = build_allow_list(members)
    res = await client.put(
        "/api/v1/admin/presale-root", json={"root": tree.root}, headers=as_caller(OWNER),
    )
    assert res.status_code == 200
    res = await client.put(
        "/api/v1/admin/phase", json={"phase": "presale"}, headers=as_caller(OWNER),
    )
    assert res.status_code == 200
    return tree


async def _open_public(client, as_caller):
    res = await client.put(
        "/api/v1/admin/phase", json={"phase": "public_sale"}, headers=as_caller(OWNER),
    )
    assert res.status_code == 200


async def test_presale_mint_returns_ids(client, as_caller):
    tree = await _open_presale(client, as_caller, [ALICE, BOB])
    res = await client.post(
        "/api/v1/mint/presale",
        json={"amount": 2, "proof": tree.proofs[ALICE], "value": 2 * PRESALE_PRICE},
        headers=as_caller(ALICE),
    )
    assert res.status_code == 201
    assert res.json() == {"token_ids": [1, 2], "issued_count": 2}


async def test_presale_repeat_rejected(client, as_caller):
    tree = await _open_presale(client, as_caller, [ALICE])
    body = {"amount": 1, "proof": tree.proofs[ALICE], "value": PRESALE_PRICE}
    await client.post("/api/v1/mint/presale", json=body, headers=as_caller(ALICE))
    res = await client.post("/api/v1/mint/presale", json=body, headers=as_caller(ALICE))
    assert res.status_code == 403
    assert res.json()["error"]["code"] == "ALLOW_LIST_ERROR"


async def test_presale_outside_phase(client, as_caller):
    res = await client.post(
        "/api/v1/mint/presale",
        json={"amount": 1, "proof": [], "value": PRESALE_PRICE},
        headers=as_caller(ALICE),
    )
    assert res.status_code == 409
    assert res.json()["error"]["code"] == "PHASE_INACTIVE"


async def test_presale_underpaid_records_no_claim(client, as_caller):
    tree = await _open_presale(client, as_caller, [ALICE])
    res = await client.post(
        "/api/v1/mint/presale",
        json={"amount": 2, "proof": tree.proofs[ALICE], "value": PRESALE_PRICE},
        headers=as_caller(ALICE),
    )
    assert res.status_code == 402
    assert res.json()["error"]["code"] == "PAYMENT_ERROR"

    account = (await client.get(f"/api/v1/accounts/{ALICE}")).json()
    assert account["presale_claimed"] == 0
    assert account["balance"] == 0


async def test_public_mint_and_cap(client, as_caller):
    await _open_public(client, as_caller)
    res = await client.post(
        "/api/v1/mint/public",
        json={"amount": 5, "value": 5 * PUBLIC_PRICE},
        headers=as_caller(ALICE),
    )
    assert res.status_code == 201
    assert res.json()["issued_count"] == 5

    res = await client.post(
        "/api/v1/mint/public",
        json={"amount": 1, "value": PUBLIC_PRICE},
        headers=as_caller(BOB),
    )
    assert res.status_code == 409
    assert res.json()["error"]["code"] == "SUPPLY_EXCEEDED"


async def test_public_mint_zero_amount(client, as_caller):
    await _open_public(client, as_caller)
    res = await client.post(
        "/api/v1/mint/public", json={"amount": 0, "value": 0}, headers=as_caller(ALICE),
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_mint_without_caller_header(client):
    res = await client.post("/api/v1/mint/public", json={"amount": 1, "value": 100})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_airdrop_by_owner(client, as_caller):
    res = await client.post(
        "/api/v1/mint/airdrop",
        json={"recipients": [BOB, ALICE]},
        headers=as_caller(OWNER),
    )
    assert res.status_code == 201
    assert res.json()["token_ids"] == [1, 2]

    token = (await client.get("/api/v1/tokens/1")).json()
    assert token["owner"] == BOB


async def test_airdrop_requires_minter(client, as_caller):
    res = await client.post(
        "/api/v1/mint/airdrop", json={"recipients": [BOB]}, headers=as_caller(ALICE),
    )
    assert res.status_code == 403
    assert res.json()["error"]["code"] == "AUTHORIZATION_ERROR"


async def test_airdrop_after_minter_granted(client, as_caller):
    res = await client.post(
        "/api/v1/admin/roles/grant",
        json={"role": "MINTER_ROLE", "account": CAROL},
        headers=as_caller(OWNER),
    )
    assert res.json()["changed"] is True
    res = await client.post(
        "/api/v1/mint/airdrop", json={"recipients": [BOB]}, headers=as_caller(CAROL),
    )
    assert res.status_code == 201


async def test_airdrop_over_cap_mints_nothing(client, as_caller):
    res = await client.post(
        "/api/v1/mint/airdrop",
        json={"recipients": [BOB] * 6},
        headers=as_caller(OWNER),
    )
    assert res.status_code == 409
    summary = (await client.get("/api/v1/collection")).json()
    assert summary["issued_count"] == 0
    assert summary["live_supply"] == 0


async def test_oversized_payment_is_validation_error(client, as_caller):
    await _open_public(client, as_caller)
    res = await client.post(
        "/api/v1/mint/public", json={"amount": 1, "value": 10**78},
        headers=as_caller(ALICE),
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"
    assert (await client.get("/api/v1/collection")).json()["issued_count"] == 0
