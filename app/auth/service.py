# app/auth/service.py

from datetime import timedelta, datetime, timezone
from typing import Annotated, Optional
import logging

import jwt
from jwt import PyJWTError
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from . import models
from ..core.config import Settings, get_settings
from ..core.exceptions import NotAuthenticatedError
from ..database.core import DbSession
from ..users.models import User
from ..users.repository import UserRepository

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


class TokenIssuer:
    """Signs and verifies the bearer tokens handed out at login."""

    def __init__(self, settings: Settings):
        self.secret_key = settings.JWT_SECRET
        self.algorithm = settings.JWT_ALGORITHM
        self.expires_delta = timedelta(days=settings.JWT_EXPIRES_DAYS)

    def create_access_token(self, user_id: int) -> str:
        """Creates a signed token whose payload is `{id, exp}`."""
        expire = datetime.now(timezone.utc) + self.expires_delta
        encode = {"id": user_id, "exp": expire}
        return jwt.encode(encode, self.secret_key, algorithm=self.algorithm)

    def verify_token(self, token: str) -> models.TokenData:
        """Decodes and verifies a token, returning the user id it carries."""
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except PyJWTError as e:
            logger.warning(f"JWT decode error: {e}")
            raise NotAuthenticatedError("Invalid session")

        user_id = payload.get("id")
        if not isinstance(user_id, int):
            raise NotAuthenticatedError("User ID not found in token.")

        return models.TokenData(user_id=user_id)


def get_token_issuer(settings: Annotated[Settings, Depends(get_settings)]) -> TokenIssuer:
    return TokenIssuer(settings)


TokenIssuerDep = Annotated[TokenIssuer, Depends(get_token_issuer)]


def get_session_user(
    db: DbSession,
    token_issuer: TokenIssuerDep,
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(bearer_scheme)],
) -> User:
    """FastAPI dependency resolving the authenticated user from the bearer token."""
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise NotAuthenticatedError("You are not logged in")

    token_data = token_issuer.verify_token(credentials.credentials)

    user = UserRepository(db).get_active_by_id(token_data.user_id)
    if not user:
        logger.warning(f"Token presented for missing or disabled user ID: {token_data.user_id}")
        raise NotAuthenticatedError("The owner of this token is no longer active")

    return user


SessionUser = Annotated[User, Depends(get_session_user)]
