import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from ..config import Settings
from ..exceptions import AuthenticationError
from ..models.user import User
from ..repositories import UnitOfWork
from .security import (
    ACCESS_TOKEN,
    REFRESH_TOKEN,
    create_token,
    decode_token,
    verify_password,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TokenPair:
    access_token: str
    refresh_token: str


class AuthService:
    """Password login and access / refresh token rotation"""

    def __init__(self, uow: UnitOfWork, settings: Settings):
        self.uow = uow
        self.settings = settings

    async def authenticate(self, email: str, password: str) -> Optional[User]:
        user = await self.uow.users.get_by_email(email)
        if user is None or not verify_password(password, user.password):
            return None
        return user

    def issue_tokens(self, user: User) -> TokenPair:
        return TokenPair(
            access_token=create_token(user.id, user.email, ACCESS_TOKEN, self.settings),
            refresh_token=create_token(user.id, user.email, REFRESH_TOKEN, self.settings),
        )

    async def login(self, email: str, password: str) -> Tuple[TokenPair, User]:
        user = await self.authenticate(email, password)
        if user is None:
            logger.warning(f"⚠️ Failed login for {email}")
            raise AuthenticationError("Invalid credentials")

        logger.info(f"🔑 User {user.id} logged in")
        return self.issue_tokens(user), user

    async def refresh(self, refresh_token: Optional[str]) -> Tuple[TokenPair, User]:
        if not refresh_token:
            raise AuthenticationError("No refresh token")

        payload = decode_token(refresh_token, REFRESH_TOKEN, self.settings)
        user = await self.uow.users.get(int(payload["sub"]))
        if user is None:
            raise AuthenticationError("User not found")

        return self.issue_tokens(user), user
