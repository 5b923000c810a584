import pytest
from sqlalchemy.ext.asyncio import AsyncSession
from app.services.user_service import UserService
from app.models.user import User
from app.core.exceptions import UserNotFoundException

@pytest.mark.asyncio
async def test_messages_from(async_session: AsyncSession, test_messages):
    outgoing, _ = test_messages
    messages = await UserService(async_session).messages_from("testuser")

    assert len(messages) == 1
    message = messages[0]
    assert message.id == outgoing.id
    assert message.body == "hi other"
    assert message.sent_at is not None
    assert message.read_at is None
    assert message.to_user.username == "otheruser"
    assert message.to_user.first_name == "Other"
    assert message.to_user.last_name == "Person"
    assert message.to_user.phone == "555-0199"

@pytest.mark.asyncio
async def test_messages_to(async_session: AsyncSession, test_messages):
    _, incoming = test_messages
    messages = await UserService(async_session).messages_to("testuser")

    assert len(messages) == 1
    message = messages[0]
    assert message.id == incoming.id
    assert message.body == "hi test"
    assert message.from_user.username == "otheruser"
    assert "password" not in message.from_user.model_dump()

@pytest.mark.asyncio
async def test_messages_for_user_without_messages(async_session: AsyncSession, test_user: User):
    user_service = UserService(async_session)
    assert await user_service.messages_from(test_user.username) == []
    assert await user_service.messages_to(test_user.username) == []

@pytest.mark.asyncio
async def test_messages_for_unknown_user(async_session: AsyncSession, test_messages):
    user_service = UserService(async_session)
    with pytest.raises(UserNotFoundException):
        await user_service.messages_from("nouser")
    with pytest.raises(UserNotFoundException):
        await user_service.messages_to("nouser")
