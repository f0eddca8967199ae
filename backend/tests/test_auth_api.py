"""Tests for registration, login, token refresh and admin role management."""

from helpers import register


class TestRegisterAndLogin:
    async def test_register_returns_tokens(self, client) -> None:
        auth = await register(client, "new@example.com", name="New")
        assert auth["user"]["role"] == "user"
        assert auth["user"]["email"] == "new@example.com"

        me = await client.get("/api/users/me", headers=auth["headers"])
        assert me.status_code == 200
        assert me.json()["name"] == "New"

    async def test_register_as_landlord(self, client) -> None:
        auth = await register(client, "land@example.com", role="landlord")
        assert auth["user"]["role"] == "landlord"

    async def test_cannot_self_register_as_admin(self, client) -> None:
        res = await client.post(
            "/api/auth/register",
            json={"name": "X", "email": "x@example.com", "password": "secret123", "role": "admin"},
        )
        assert res.status_code == 422

    async def test_duplicate_email(self, client) -> None:
        await register(client, "dup@example.com")
        res = await client.post(
            "/api/auth/register",
            json={"name": "X", "email": "dup@example.com", "password": "secret123"},
        )
        assert res.status_code == 400

    async def test_login(self, client) -> None:
        await register(client, "me@example.com")
        res = await client.post(
            "/api/auth/login", json={"email": "me@example.com", "password": "secret123"}
        )
        assert res.status_code == 200
        assert res.json()["token_type"] == "bearer"

    async def test_login_wrong_password(self, client) -> None:
        await register(client, "me@example.com")
        res = await client.post(
            "/api/auth/login", json={"email": "me@example.com", "password": "wrong-one"}
        )
        assert res.status_code == 401

    async def test_me_requires_auth(self, client) -> None:
        res = await client.get("/api/users/me")
        assert res.status_code == 401


class TestRefreshAndLogout:
    async def test_refresh_rotates(self, client) -> None:
        auth = await register(client, "me@example.com")
        old = auth["refresh_token"]

        res = await client.post("/api/auth/refresh", json={"refresh_token": old})
        assert res.status_code == 200
        assert res.json()["refresh_token"] != old

        # the old one was revoked by the rotation
        again = await client.post("/api/auth/refresh", json={"refresh_token": old})
        assert again.status_code == 401

    async def test_access_token_cannot_refresh(self, client) -> None:
        auth = await register(client, "me@example.com")
        access = auth["headers"]["Authorization"].split()[1]
        res = await client.post("/api/auth/refresh", json={"refresh_token": access})
        assert res.status_code == 401

    async def test_logout_revokes(self, client) -> None:
        auth = await register(client, "me@example.com")
        res = await client.post("/api/auth/logout", json={"refresh_token": auth["refresh_token"]})
        assert res.json() == {"ok": True}

        res = await client.post("/api/auth/refresh", json={"refresh_token": auth["refresh_token"]})
        assert res.status_code == 401

    async def test_logout_without_body(self, client) -> None:
        res = await client.post("/api/auth/logout")
        assert res.status_code == 200


class TestAdmin:
    async def test_admin_endpoints_need_admin(self, client) -> None:
        auth = await register(client, "me@example.com")
        res = await client.get("/api/admin/stats", headers=auth["headers"])
        assert res.status_code == 403

    async def test_admin_can_promote(self, client, db) -> None:
        from homelet.db import crud_users

        await crud_users.create_user(
            db, name="Root", email="root@example.com", password="secret123", role="admin"
        )
        login = await client.post(
            "/api/auth/login", json={"email": "root@example.com", "password": "secret123"}
        )
        admin_headers = {"Authorization": f"Bearer {login.json()['access_token']}"}
        user = await register(client, "me@example.com")

        res = await client.put(
            f"/api/admin/users/{user['user']['id']}/role",
            json={"role": "landlord"},
            headers=admin_headers,
        )
        assert res.status_code == 200
        assert res.json()["role"] == "landlord"

        stats = await client.get("/api/admin/stats", headers=admin_headers)
        assert stats.json() == {"total_users": 2, "total_properties": 0, "total_bookings": 0}

        users = await client.get("/api/admin/users", headers=admin_headers)
        assert len(users.json()["data"]) == 2

    async def test_promote_unknown_user(self, client, db) -> None:
        from homelet.db import crud_users

        await crud_users.create_user(
            db, name="Root", email="root@example.com", password="secret123", role="admin"
        )
        login = await client.post(
            "/api/auth/login", json={"email": "root@example.com", "password": "secret123"}
        )
        res = await client.put(
            "/api/admin/users/999/role",
            json={"role": "landlord"},
            headers={"Authorization": f"Bearer {login.json()['access_token']}"},
        )
        assert res.status_code == 404
