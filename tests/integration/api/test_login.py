import pytest
from httpx import AsyncClient

from src.api.utils.jwt import verify_jwt
from tests.fixtures.accounts import login, register_account


@pytest.mark.asyncio
async def test_successful_login(client: AsyncClient, test_data):
    """Correct credentials return a fresh token

    Given an account is registered
    When I log in with its email and password
    Then I receive a token naming that account
    """
    account = test_data.account("alice")
    await register_account(client, account)

    response = await login(client, account["email"], account["password"])

    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Login successful"
    assert verify_jwt(data["token"])["username"] == "alice"


@pytest.mark.asyncio
async def test_login_wrong_password(client: AsyncClient, test_data):
    account = test_data.account("alice")
    await register_account(client, account)

    response = await login(client, account["email"], "Wonderland2!")

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "INVALID_CREDENTIALS"
    assert "token" not in response.json()


@pytest.mark.asyncio
async def test_login_unknown_email(client: AsyncClient):
    response = await login(client, "nobody@example.com", "Wonderland1!")

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "USER_NOT_FOUND"


@pytest.mark.asyncio
async def test_login_missing_password(client: AsyncClient):
    response = await client.post("/auth/login", json={"email": "alice@example.com"})

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_login_malformed_body(client: AsyncClient):
    response = await client.post(
        "/auth/login", content="not json", headers={"Content-Type": "application/json"}
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"
