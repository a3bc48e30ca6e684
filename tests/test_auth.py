from datetime import timedelta

from auth import SessionStore, hash_password, resolve_identity, verify_password


# -------------------- Passwords --------------------

def test_hash_is_salted():
    h1, s1 = hash_password("secret123", iterations=1000)
    h2, s2 = hash_password("secret123", iterations=1000)
    assert s1 != s2
    assert h1 != h2


def test_verify_password():
    h, salt = hash_password("secret123", iterations=1000)
    assert verify_password("secret123", salt, h, iterations=1000)
    assert not verify_password("secret124", salt, h, iterations=1000)


# -------------------- Sessions --------------------

def test_resolve_identity(sessions):
    token = sessions.issue("user-1")
    assert resolve_identity(token, sessions) == "user-1"
    assert resolve_identity(None, sessions) is None
    assert resolve_identity("forged", sessions) is None


def test_session_expires_after_ttl(sessions, clock):
    token = sessions.issue("user-1")
    clock.advance(days=6, hours=23)
    assert resolve_identity(token, sessions) == "user-1"
    clock.advance(hours=1)
    assert resolve_identity(token, sessions) is None
    assert len(sessions) == 0


def test_revoke(clock):
    store = SessionStore(ttl=timedelta(minutes=5), clock=clock)
    token = store.issue("user-1")
    store.revoke(token)
    assert resolve_identity(token, store) is None


def test_issue_purges_expired_sessions(sessions, clock):
    for n in range(100):
        sessions.issue(f"user-{n}")
    clock.advance(days=30)
    token = sessions.issue("user-fresh")
    assert len(sessions) == 1
    assert resolve_identity(token, sessions) == "user-fresh"


# -------------------- Endpoints --------------------

def register(client, email="asha@vastra.in", password="secret123", **extra):
    body = {"email": email, "password": password, "fullName": "Asha Rao", **extra}
    return client.post("/api/auth/register", json=body)


def test_register_starts_session(client, settings):
    resp = register(client, phone="9000000000")
    assert resp.status_code == 201
    body = resp.json()
    assert body["email"] == "asha@vastra.in"
    assert body["fullName"] == "Asha Rao"
    assert body["phone"] == "9000000000"
    assert body["addresses"] == []
    assert "password" not in body and "passwordHash" not in body and "salt" not in body
    assert settings.SESSION_COOKIE_NAME in resp.cookies

    me = client.get("/api/auth/me")
    assert me.status_code == 200
    assert me.json()["id"] == body["id"]


def test_register_rejects_email_differing_only_in_case(client):
    assert register(client, email="A@x.com").status_code == 201
    resp = register(client, email="a@x.com")
    assert resp.status_code == 400
    assert resp.json()["message"] == "Email already registered"


def test_register_validation(client):
    resp = register(client, email="not-an-email", password="123")
    assert resp.status_code == 400
    body = resp.json()
    assert body["message"] == "Invalid input"
    fields = {e["loc"][-1] for e in body["errors"]}
    assert {"email", "password"} <= fields


def test_login_logout_cycle(client):
    register(client)
    client.post("/api/auth/logout")
    assert client.get("/api/auth/me").status_code == 401

    resp = client.post("/api/auth/login", json={"email": "ASHA@vastra.in", "password": "secret123"})
    assert resp.status_code == 200
    assert resp.json()["email"] == "asha@vastra.in"
    assert client.get("/api/auth/me").status_code == 200

    resp = client.post("/api/auth/logout")
    assert resp.json() == {"message": "Logged out successfully"}
    assert client.get("/api/auth/me").status_code == 401


def test_logout_revokes_token_server_side(client, sessions, settings):
    resp = register(client)
    token = resp.cookies[settings.SESSION_COOKIE_NAME]
    client.post("/api/auth/logout")
    assert resolve_identity(token, sessions) is None


def test_login_replaces_presented_token(client, sessions, settings):
    old = register(client).cookies[settings.SESSION_COOKIE_NAME]
    resp = client.post("/api/auth/login", json={"email": "asha@vastra.in", "password": "secret123"})
    new = resp.cookies[settings.SESSION_COOKIE_NAME]
    assert new != old
    assert resolve_identity(old, sessions) is None
    assert len(sessions) == 1
    assert client.get("/api/auth/me").status_code == 200


def test_register_while_signed_in_drops_old_token(client, sessions, settings):
    old = register(client).cookies[settings.SESSION_COOKIE_NAME]
    assert register(client, email="second@vastra.in").status_code == 201
    assert resolve_identity(old, sessions) is None
    assert client.get("/api/auth/me").json()["email"] == "second@vastra.in"


def test_login_wrong_password(client):
    register(client)
    resp = client.post("/api/auth/login", json={"email": "asha@vastra.in", "password": "wrong-one"})
    assert resp.status_code == 401
    assert resp.json()["message"] == "Invalid email or password"


def test_login_unknown_email(client):
    resp = client.post("/api/auth/login", json={"email": "ghost@vastra.in", "password": "secret123"})
    assert resp.status_code == 401


def test_me_anonymous(client):
    resp = client.get("/api/auth/me")
    assert resp.status_code == 401
    assert resp.json()["message"] == "Not authenticated"


def test_expired_session_is_anonymous(client, clock):
    register(client)
    clock.advance(days=7)
    assert client.get("/api/auth/me").status_code == 401
