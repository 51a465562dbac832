"""Tests for registration and login."""
from __future__ import annotations

from datetime import datetime, timezone
from types import SimpleNamespace
from unittest.mock import AsyncMock

import bcrypt
import pytest
from fastapi import HTTPException
from httpx import ASGITransport, AsyncClient

from app.db.session import get_session
from app.main import app
from app.models.user import Gender
from app.repositories import doctors as doctors_repo
from app.repositories import users as users_repo
from app.schemas import accounts as schemas
from app.services import accounts as accounts_service


class DummySession:
    """Minimal session stub supporting async transaction context."""

    def __init__(self) -> None:
        self.added: list[object] = []

    def add(self, obj: object) -> None:
        self.added.append(obj)

    def begin(self):  # noqa: D401 - mimic SQLAlchemy's async begin
        session = self

        class _Tx:
            async def __aenter__(self_inner):
                return session

            async def __aexit__(self_inner, exc_type, exc, tb):
                return False

        return _Tx()


def _hash(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=4)).decode("utf-8")


def user_stub(**overrides) -> SimpleNamespace:
    fields = dict(
        id=1,
        first_name="Ada",
        last_name="Lovelace",
        email="ada@example.com",
        address=None,
        country_code="+44",
        nhs_number=None,
        phone="0700",
        blood_group="O+",
        gender=Gender.FEMALE,
        profile_pic=None,
        password=_hash("secret"),
        created_at=datetime(2025, 1, 1, tzinfo=timezone.utc),
    )
    fields.update(overrides)
    return SimpleNamespace(**fields)


def doctor_stub(**overrides) -> SimpleNamespace:
    fields = dict(
        id=7,
        first_name="Grace",
        last_name="Okafor",
        email="grace@example.org",
        address=None,
        country_code=None,
        nhs_number=None,
        phone=None,
        department="Dermatology",
        role="Consultant",
        hospital="Manchester Royal Infirmary",
        gender=Gender.FEMALE,
        profile_pic=None,
        password=_hash("doctor-pass"),
    )
    fields.update(overrides)
    return SimpleNamespace(**fields)


@pytest.fixture(autouse=True)
def fast_hashing(monkeypatch):
    monkeypatch.setattr(accounts_service.settings, "password_hash_rounds", 4)


@pytest.mark.asyncio
async def test_register_user_hashes_password(monkeypatch):
    session = DummySession()
    create_user = AsyncMock(return_value=user_stub())
    monkeypatch.setattr(users_repo, "get_by_email", AsyncMock(return_value=None))
    monkeypatch.setattr(users_repo, "create_user", create_user)

    response = await accounts_service.register_user(
        session,
        first_name="Ada",
        last_name="Lovelace",
        email="ada@example.com",
        phone="0700",
        password="secret",
        gender="Female",
    )

    assert response.message == "User registered successfully!"
    assert response.user.id == 1
    stored_hash = create_user.await_args.kwargs["password_hash"]
    assert stored_hash != "secret"
    assert bcrypt.checkpw(b"secret", stored_hash.encode("utf-8"))
    assert create_user.await_args.kwargs["gender"] is Gender.FEMALE
    assert "password" not in response.user.model_dump()


@pytest.mark.asyncio
async def test_register_user_rejects_unknown_gender(monkeypatch):
    create_user = AsyncMock()
    monkeypatch.setattr(users_repo, "create_user", create_user)

    with pytest.raises(HTTPException) as exc:
        await accounts_service.register_user(
            DummySession(),
            first_name="Ada",
            last_name="Lovelace",
            email="ada@example.com",
            phone="0700",
            password="secret",
            gender="Robot",
        )

    assert exc.value.status_code == 400
    create_user.assert_not_awaited()


@pytest.mark.asyncio
async def test_register_user_requires_fields():
    with pytest.raises(HTTPException) as exc:
        await accounts_service.register_user(
            DummySession(),
            first_name="Ada",
            last_name="",
            email="ada@example.com",
            phone="0700",
            password="secret",
            gender="Other",
        )

    assert exc.value.status_code == 400
    assert exc.value.detail == "Please provide all required fields."


@pytest.mark.asyncio
async def test_register_doctor_duplicate_email_conflicts(monkeypatch):
    monkeypatch.setattr(doctors_repo, "get_by_email", AsyncMock(return_value=doctor_stub()))

    with pytest.raises(HTTPException) as exc:
        await accounts_service.register_doctor(
            DummySession(),
            first_name="Grace",
            last_name="Okafor",
            email="grace@example.org",
            password="doctor-pass",
        )

    assert exc.value.status_code == 409


@pytest.mark.asyncio
async def test_login_prefers_patient_account(monkeypatch):
    monkeypatch.setattr(users_repo, "get_by_email", AsyncMock(return_value=user_stub()))
    doctor_lookup = AsyncMock(return_value=None)
    monkeypatch.setattr(doctors_repo, "get_by_email", doctor_lookup)

    response = await accounts_service.login(
        schemas.LoginRequest(email="ada@example.com", password="secret"), AsyncMock()
    )

    assert response.message == "User logged in successfully"
    assert response.user is not None and response.user.email == "ada@example.com"
    assert response.doctor is None
    doctor_lookup.assert_not_awaited()


@pytest.mark.asyncio
async def test_login_falls_back_to_doctor(monkeypatch):
    monkeypatch.setattr(users_repo, "get_by_email", AsyncMock(return_value=None))
    monkeypatch.setattr(doctors_repo, "get_by_email", AsyncMock(return_value=doctor_stub()))

    response = await accounts_service.login(
        schemas.LoginRequest(email="grace@example.org", password="doctor-pass"), AsyncMock()
    )

    assert response.message == "Doctor logged in successfully"
    assert response.doctor is not None and response.doctor.department == "Dermatology"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("user", "doctor", "password"),
    [
        (user_stub(), None, "wrong"),
        (None, doctor_stub(), "wrong"),
        (None, None, "anything"),
        (user_stub(password="not-a-bcrypt-hash"), None, "secret"),
    ],
)
async def test_login_rejects_bad_credentials(monkeypatch, user, doctor, password):
    monkeypatch.setattr(users_repo, "get_by_email", AsyncMock(return_value=user))
    monkeypatch.setattr(doctors_repo, "get_by_email", AsyncMock(return_value=doctor))

    with pytest.raises(HTTPException) as exc:
        await accounts_service.login(schemas.LoginRequest(email="x@example.com", password=password), AsyncMock())

    assert exc.value.status_code == 400
    assert exc.value.detail == "Invalid email or password"


@pytest.mark.asyncio
async def test_get_user_route_returns_profile_or_404(monkeypatch):
    async def override_session():
        yield DummySession()

    lookup = AsyncMock(side_effect=[user_stub(), None])
    monkeypatch.setattr(users_repo, "get_by_id", lookup)
    app.dependency_overrides[get_session] = override_session
    try:
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://testserver") as client:
            found = await client.get("/api/user/1")
            missing = await client.get("/api/user/2")
    finally:
        app.dependency_overrides.pop(get_session, None)

    assert found.status_code == 200
    assert found.json()["email"] == "ada@example.com"
    assert "password" not in found.json()
    assert missing.status_code == 404
    assert missing.json() == {"detail": "User not found"}


@pytest.mark.asyncio
async def test_register_user_route_stores_profile_picture(monkeypatch, tmp_path):
    async def override_session():
        yield DummySession()

    monkeypatch.setattr(accounts_service.uploads.settings, "upload_dir", str(tmp_path))
    monkeypatch.setattr(users_repo, "get_by_email", AsyncMock(return_value=None))

    async def create_user(session, **kwargs):
        return user_stub(profile_pic=kwargs["profile_pic"])

    monkeypatch.setattr(users_repo, "create_user", create_user)
    app.dependency_overrides[get_session] = override_session
    try:
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://testserver") as client:
            response = await client.post(
                "/register/user",
                data={
                    "first_name": "Ada",
                    "last_name": "Lovelace",
                    "email": "ada@example.com",
                    "phone": "0700",
                    "password": "secret",
                    "gender": "Female",
                },
                files={"profile_pic": ("me.png", b"\x89PNG fake", "image/png")},
            )
    finally:
        app.dependency_overrides.pop(get_session, None)

    assert response.status_code == 200
    filename = response.json()["user"]["profile_pic"]
    assert filename.endswith(".jpg")
    assert (tmp_path / filename).read_bytes() == b"\x89PNG fake"


@pytest.mark.asyncio
async def test_register_doctor_conflict_removes_stored_picture(monkeypatch, tmp_path):
    async def override_session():
        yield DummySession()

    monkeypatch.setattr(accounts_service.uploads.settings, "upload_dir", str(tmp_path))
    monkeypatch.setattr(doctors_repo, "get_by_email", AsyncMock(return_value=doctor_stub()))
    app.dependency_overrides[get_session] = override_session
    try:
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://testserver") as client:
            response = await client.post(
                "/register/doctor",
                data={
                    "first_name": "Grace",
                    "last_name": "Okafor",
                    "email": "grace@example.org",
                    "password": "doctor-pass",
                },
                files={"profile_pic": ("me.png", b"\x89PNG fake", "image/png")},
            )
    finally:
        app.dependency_overrides.pop(get_session, None)

    assert response.status_code == 409
    assert list(tmp_path.iterdir()) == []


@pytest.mark.asyncio
@pytest.mark.parametrize("body", [{"email": "", "password": "x"}, {"email": "ada@example.com"}])
async def test_login_with_missing_credentials_is_validation_error(body):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        response = await client.post("/login", json=body)

    assert response.status_code == 422
