"""API tests for registration, login and the current-user endpoint."""

import pytest
from jose import jwt

from conftest import make_user


class TestRegister:
    def test_register_creates_plain_user(self, client):
        body = {"name": "Jane", "email": "Jane@Mail.com", "password": "hunter22"}
        resp = client.post("/api/users", json=body)

        assert resp.status_code == 201
        data = resp.json()
        assert data["email"] == "jane@mail.com"
        assert data["role"] == "user"
        assert "passwordHash" not in data

    def test_role_cannot_be_chosen(self, client):
        body = {"name": "Eve", "email": "eve@mail.com", "password": "pw", "role": "admin"}
        assert client.post("/api/users", json=body).json()["role"] == "user"

    def test_duplicate_email(self, client, user):
        body = {"name": "Again", "email": "owner@mail.com", "password": "pw"}
        resp = client.post("/api/users", json=body)

        assert resp.status_code == 400
        assert resp.json() == {"msg": "User already exists"}

    def test_invalid_email(self, client):
        resp = client.post("/api/users", json={"name": "X", "email": "nope", "password": "pw"})

        assert resp.status_code == 400
        assert resp.json()["errors"][0]["field"] == "email"


class TestLogin:
    def test_login_returns_token_for_user(self, client, db, settings):
        user = make_user(db, "login@mail.com", password="correct-horse")

        resp = client.post("/api/auth", json={"email": "login@mail.com", "password": "correct-horse"})

        assert resp.status_code == 200
        data = resp.json()
        assert data["tokenType"] == "bearer"
        claims = jwt.decode(data["accessToken"], settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
        assert claims["sub"] == user.id
        assert claims["role"] == "user"

    def test_wrong_password(self, client, user):
        resp = client.post("/api/auth", json={"email": "owner@mail.com", "password": "wrong"})

        assert resp.status_code == 400
        assert resp.json() == {"errors": [{"field": "email", "msg": "Invalid credentials"}]}

    def test_unknown_email(self, client):
        resp = client.post("/api/auth", json={"email": "ghost@mail.com", "password": "x"})
        assert resp.status_code == 400

    def test_token_works_on_protected_route(self, client, db):
        make_user(db, "flow@mail.com", password="pw123456")
        token = client.post("/api/auth", json={"email": "flow@mail.com", "password": "pw123456"}).json()["accessToken"]

        resp = client.get("/api/resumes", headers={"Authorization": f"Bearer {token}"})
        assert resp.status_code == 200


class TestMe:
    def test_me(self, client, user, headers_for):
        resp = client.get("/api/auth", headers=headers_for(user))

        assert resp.status_code == 200
        assert resp.json()["id"] == user.id
        assert resp.json()["email"] == "owner@mail.com"
        assert resp.json()["createdAt"].endswith("+00:00")

    def test_me_requires_token(self, client):
        assert client.get("/api/auth").status_code == 401

    def test_token_signed_with_other_key(self, client, user):
        token = jwt.encode({"sub": user.id}, "someone-elses-key", algorithm="HS256")
        resp = client.get("/api/auth", headers={"Authorization": f"Bearer {token}"})
        assert resp.status_code == 401


class TestOperational:
    def test_health(self, client):
        assert client.get("/health").json() == {"status": "ok"}

    def test_root(self, client):
        assert client.get("/").json()["name"] == "Resume Builder API"

    @pytest.mark.parametrize("method,path,field", [
        ("post", "/api/resumes", "personalInfo"),
        ("put", "/api/resumes/{resume_id}", "skills"),
        ("post", "/api/templates", "previewImage"),
        ("put", "/api/templates/{template_id}", "isPremium"),
    ])
    def test_request_bodies_documented(self, client, method, path, field):
        """Routes that read the raw body still publish its camelCase schema."""
        operation = client.get("/openapi.json").json()["paths"][path][method]
        schema = operation["requestBody"]["content"]["application/json"]["schema"]

        assert field in schema["properties"]
        assert "$ref" not in str(schema)
