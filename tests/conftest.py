import os

os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from sqlalchemy.pool import StaticPool
from app.database.postgres import Database
from app.models.message import Message
from app.models.user import User
from app.core.security import hash_password

DATABASE_URL = "sqlite+aiosqlite:///:memory:"

@pytest.fixture
async def database():
    db = Database(
        DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await db.connect()
    await db.create_all()
    yield db
    await db.disconnect()

@pytest.fixture
async def async_session(database):
    async with database.session() as session:
        yield session

@pytest.fixture
async def test_user(async_session):
    user = User(
        username="testuser",
        password=hash_password("password123"),
        first_name="Test",
        last_name="User",
        phone="555-0100",
    )
    async_session.add(user)
    await async_session.commit()
    await async_session.refresh(user)
    return user

@pytest.fixture
async def other_user(async_session):
    user = User(
        username="otheruser",
        password=hash_password("password456"),
        first_name="Other",
        last_name="Person",
        phone="555-0199",
    )
    async_session.add(user)
    await async_session.commit()
    await async_session.refresh(user)
    return user

@pytest.fixture
async def test_messages(async_session, test_user, other_user):
    outgoing = Message(from_username=test_user.username, to_username=other_user.username, body="hi other")
    incoming = Message(from_username=other_user.username, to_username=test_user.username, body="hi test")
    async_session.add_all([outgoing, incoming])
    await async_session.commit()
    await async_session.refresh(outgoing)
    await async_session.refresh(incoming)
    return outgoing, incoming
