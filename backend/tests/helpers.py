"""Small HTTP helpers shared by the API tests."""

from conftest import PROPERTY_FIELDS


async def register(client, email: str, role: str = "user", name: str = "Someone") -> dict:
    """Register and return auth headers plus the user payload."""
    res = await client.post(
        "/api/auth/register",
        json={"name": name, "email": email, "password": "secret123", "role": role},
    )
    assert res.status_code == 201, res.text
    body = res.json()
    return {
        "headers": {"Authorization": f"Bearer {body['access_token']}"},
        "user": body["user"],
        "refresh_token": body["refresh_token"],
    }


async def list_property(client, auth: dict, **overrides) -> dict:
    res = await client.post(
        "/api/properties", json={**PROPERTY_FIELDS, **overrides}, headers=auth["headers"]
    )
    assert res.status_code == 201, res.text
    return res.json()["data"]
