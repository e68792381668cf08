from httpx import AsyncClient
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.user import User

SIGNUP = {
    "full_name": "Test User",
    "email": "test@example.com",
    "phone": "555-0100",
    "password": "securepassword",
    "confirmPassword": "securepassword",
}


async def _count_users(db: AsyncSession) -> int:
    return await db.scalar(select(func.count(User.id)))


async def test_signup(client: AsyncClient, db: AsyncSession):
    res = await client.post("/api/signup", json=SIGNUP)
    assert res.status_code == 201
    assert res.json() == {"message": "User signup successful"}

    user = await db.scalar(select(User).where(User.email == "test@example.com"))
    assert user.full_name == "Test User"
    assert user.password != "securepassword"
    assert user.password.startswith("$2b$10$")


async def test_signup_without_phone_stores_empty_string(client: AsyncClient, db: AsyncSession):
    payload = {k: v for k, v in SIGNUP.items() if k != "phone"}
    res = await client.post("/api/signup", json=payload)
    assert res.status_code == 201
    user = await db.scalar(select(User).where(User.email == "test@example.com"))
    assert user.phone == ""


async def test_signup_missing_fields(client: AsyncClient, db: AsyncSession):
    for field in ("full_name", "email", "password", "confirmPassword"):
        payload = dict(SIGNUP, **{field: ""})
        res = await client.post("/api/signup", json=payload)
        assert res.status_code == 400
        assert res.json() == {"message": "Please fill all required fields"}
    assert await _count_users(db) == 0


async def test_signup_password_mismatch_writes_nothing(client: AsyncClient, db: AsyncSession):
    res = await client.post("/api/signup", json=dict(SIGNUP, confirmPassword="different"))
    assert res.status_code == 400
    assert res.json() == {"message": "Passwords do not match"}
    assert await _count_users(db) == 0


async def test_signup_duplicate_email(client: AsyncClient, db: AsyncSession):
    await client.post("/api/signup", json=SIGNUP)
    original = await db.scalar(select(User.password).where(User.email == SIGNUP["email"]))

    res = await client.post(
        "/api/signup",
        json=dict(SIGNUP, full_name="Someone Else", password="other", confirmPassword="other"),
    )
    assert res.status_code == 400
    assert res.json() == {"message": "Email already registered"}

    assert await _count_users(db) == 1
    user = await db.scalar(select(User).where(User.email == SIGNUP["email"]))
    assert user.full_name == "Test User"
    assert user.password == original


async def test_login(client: AsyncClient):
    await client.post("/api/signup", json=SIGNUP)
    res = await client.post("/api/login", json={
        "email": "test@example.com", "password": "securepassword"
    })
    assert res.status_code == 200
    data = res.json()
    assert data["message"] == "Login success"
    assert set(data["user"]) == {"id", "full_name", "email", "phone"}
    assert data["user"]["email"] == "test@example.com"
    assert data["user"]["phone"] == "555-0100"
    assert "password" not in res.text


async def test_login_missing_fields(client: AsyncClient):
    res = await client.post("/api/login", json={"email": "test@example.com"})
    assert res.status_code == 400
    assert res.json() == {"message": "Please provide email and password"}


async def test_login_failures_are_indistinguishable(client: AsyncClient):
    await client.post("/api/signup", json=SIGNUP)
    wrong_password = await client.post("/api/login", json={
        "email": "test@example.com", "password": "wrong"
    })
    unknown_email = await client.post("/api/login", json={
        "email": "nobody@example.com", "password": "securepassword"
    })
    assert wrong_password.status_code == 400
    assert unknown_email.status_code == 400
    assert wrong_password.content == unknown_email.content
    assert wrong_password.json() == {"message": "Email or password is incorrect"}


async def test_signup_rejects_wrong_types(client: AsyncClient):
    res = await client.post("/api/signup", json=dict(SIGNUP, full_name=["not", "a", "string"]))
    assert res.status_code == 400
    data = res.json()
    assert data["message"] == "Invalid request"
    assert data["errors"]


async def test_signup_numeric_phone_is_stored_as_text(client: AsyncClient, db: AsyncSession):
    res = await client.post("/api/signup", json=dict(SIGNUP, phone=5550100))
    assert res.status_code == 201
    user = await db.scalar(select(User).where(User.email == SIGNUP["email"]))
    assert user.phone == "5550100"
