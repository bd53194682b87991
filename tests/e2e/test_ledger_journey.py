"""
End-to-end test of the ledger lifecycle through the HTTP API.

Journey:
1. Register a user
2. Open two accounts
3. Credit and debit, including a debit below zero
4. Block an account and see operations rejected
5. Unblock and operate again
6. List the user's accounts
"""

import uuid

import pytest
from httpx import AsyncClient

from src.repositories.journal_repository import JournalRepository


@pytest.mark.integration
@pytest.mark.asyncio
async def test_ledger_journey(async_client: AsyncClient, session_factory):
    response = await async_client.post(
        "/api/v1/users", json={"username": "journey", "email": "journey@example.com"}
    )
    assert response.status_code == 201
    user_id = response.json()["id"]

    first = (await async_client.post("/api/v1/accounts", json={"user_id": user_id})).json()
    second = (await async_client.post("/api/v1/accounts", json={"user_id": user_id})).json()

    operations_url = f"/api/v1/accounts/{first['id']}/operations"

    response = await async_client.post(
        operations_url, json={"operation_type": "credit", "amount": "100.00"}
    )
    assert response.json()["balance"] == "100.00"

    response = await async_client.post(
        operations_url, json={"operation_type": "debit", "amount": "120.50"}
    )
    assert response.json()["balance"] == "-20.50"

    status_url = f"/api/v1/accounts/{first['id']}/status"
    await async_client.patch(status_url, json={"operation": "block"})

    response = await async_client.post(
        operations_url, json={"operation_type": "credit", "amount": "1.00"}
    )
    assert response.status_code == 409

    await async_client.patch(status_url, json={"operation": "unblock"})

    response = await async_client.post(
        operations_url, json={"operation_type": "credit", "amount": "20.50"}
    )
    assert response.status_code == 200
    assert response.json()["balance"] == "0.00"

    response = await async_client.get(f"/api/v1/users/{user_id}/accounts")
    accounts = {a["id"]: a for a in response.json()}
    assert set(accounts) == {first["id"], second["id"]}
    assert accounts[first["id"]]["balance"] == "0.00"
    assert accounts[second["id"]]["balance"] == "0.00"

    async with session_factory() as session:
        entries = await JournalRepository(session).get_by_account(
            uuid.UUID(first["id"])
        )

    assert len(entries) == 3
    assert [str(e.final_amount) for e in entries] == ["100.00", "-20.50", "0.00"]
