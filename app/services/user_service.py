from typing import List

from sqlalchemy import select, insert, update, func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.message import Message
from ..models.user import User
from ..schemas.message import ReceivedMessage, SentMessage
from ..schemas.user import LoginTimestamp, RegisterRequest, UserDetail, UserSummary
from ..core.exceptions import UserNotFoundException
from ..core.log_config import logger
from ..core.security import hash_password, verify_password


class UserService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def register(self, request: RegisterRequest) -> UserSummary:
        """
        Register a new user, storing a bcrypt hash of the password.

        Args:
            request: Registration data

        Returns:
            UserSummary with the identity fields of the created user

        Raises:
            IntegrityError: If the username is already taken
        """
        stmt = (
            insert(User)
            .values(
                username=request.username,
                password=hash_password(request.password),
                first_name=request.first_name,
                last_name=request.last_name,
                phone=request.phone,
                join_at=func.now(),
            )
            .returning(User.username, User.first_name, User.last_name, User.phone)
        )
        try:
            result = await self.db.execute(stmt)
            row = result.one()
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            logger.warning(f"Registration rejected by the store for username {request.username}")
            raise

        logger.info(f"Registered user {row.username}")
        return UserSummary(**row._mapping)

    async def authenticate(self, username: str, password: str) -> bool:
        """
        Check a username/password pair against the stored hash.

        Raises:
            UserNotFoundException: If the username does not exist
        """
        result = await self.db.execute(
            select(User.password).where(User.username == username)
        )
        hashed_password = result.scalar_one_or_none()
        if hashed_password is None:
            logger.info(f"Authentication attempted for unknown user {username}")
            raise UserNotFoundException.for_username(username)

        return verify_password(password, hashed_password)

    async def update_login_timestamp(self, username: str) -> LoginTimestamp:
        """
        Set last_login_at to the store's current time.

        Raises:
            UserNotFoundException: If no user row was updated
        """
        stmt = (
            update(User)
            .where(User.username == username)
            .values(last_login_at=func.now())
            .returning(User.username, User.last_login_at)
            .execution_options(synchronize_session=False)
        )
        result = await self.db.execute(stmt)
        row = result.one_or_none()
        if row is None:
            raise UserNotFoundException.for_username(username)

        await self.db.commit()
        logger.info(f"Updated login timestamp for {username}")
        return LoginTimestamp(**row._mapping)

    async def login(self, username: str, password: str) -> bool:
        """Authenticate and, when the password matches, record the login."""
        if not await self.authenticate(username, password):
            return False
        await self.update_login_timestamp(username)
        return True

    async def list_all(self) -> List[UserSummary]:
        result = await self.db.execute(
            select(User.username, User.first_name, User.last_name, User.phone)
        )
        return [UserSummary(**row._mapping) for row in result.all()]

    async def get(self, username: str) -> UserDetail:
        """
        Fetch one user's profile, password excluded.

        Raises:
            UserNotFoundException: If the username does not exist
        """
        result = await self.db.execute(
            select(
                User.username,
                User.first_name,
                User.last_name,
                User.phone,
                User.join_at,
                User.last_login_at,
            ).where(User.username == username)
        )
        row = result.one_or_none()
        if row is None:
            raise UserNotFoundException.for_username(username)
        return UserDetail(**row._mapping)

    async def _ensure_exists(self, username: str) -> None:
        result = await self.db.execute(
            select(User.username).where(User.username == username)
        )
        if result.scalar_one_or_none() is None:
            raise UserNotFoundException.for_username(username)

    async def messages_from(self, username: str) -> List[SentMessage]:
        """
        Messages sent by a user, each with the recipient's identity fields.

        An existing user without messages gets an empty list.

        Raises:
            UserNotFoundException: If the username does not exist
        """
        await self._ensure_exists(username)

        result = await self.db.execute(
            select(Message, User)
            .join(Message.to_user)
            .where(Message.from_username == username)
            .order_by(Message.id)
        )
        return [
            SentMessage(
                id=msg.id,
                to_user=UserSummary.model_validate(recipient),
                body=msg.body,
                sent_at=msg.sent_at,
                read_at=msg.read_at,
            )
            for msg, recipient in result.all()
        ]

    async def messages_to(self, username: str) -> List[ReceivedMessage]:
        """
        Messages received by a user, each with the sender's identity fields.

        An existing user without messages gets an empty list.

        Raises:
            UserNotFoundException: If the username does not exist
        """
        await self._ensure_exists(username)

        result = await self.db.execute(
            select(Message, User)
            .join(Message.from_user)
            .where(Message.to_username == username)
            .order_by(Message.id)
        )
        return [
            ReceivedMessage(
                id=msg.id,
                from_user=UserSummary.model_validate(sender),
                body=msg.body,
                sent_at=msg.sent_at,
                read_at=msg.read_at,
            )
            for msg, sender in result.all()
        ]
